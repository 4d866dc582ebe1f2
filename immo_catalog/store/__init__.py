"""In-memory property store."""

from immo_catalog.store.catalog import PropertyStore

__all__ = ["PropertyStore"]
