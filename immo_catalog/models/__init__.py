"""Domain models for the property catalog."""

from immo_catalog.models.base import GeoPoint, Neighborhood
from immo_catalog.models.criteria import FilterCriteria
from immo_catalog.models.enums import Amenity, PropertyCategory, SortKey, TransactionKind
from immo_catalog.models.neighborhoods import DAKAR_NEIGHBORHOODS
from immo_catalog.models.property import Property

__all__ = [
    "Amenity",
    "DAKAR_NEIGHBORHOODS",
    "FilterCriteria",
    "GeoPoint",
    "Neighborhood",
    "Property",
    "PropertyCategory",
    "SortKey",
    "TransactionKind",
]
