"""Filtering and sorting of the catalog."""

from immo_catalog.search.engine import filter_properties, sort_properties
from immo_catalog.search.filters import failed_predicates, matches

__all__ = ["failed_predicates", "filter_properties", "matches", "sort_properties"]
