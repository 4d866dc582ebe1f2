"""User-driven side state: compare set, gallery cursor and debouncing."""

from immo_catalog.state.compare import CompareResult, CompareSet
from immo_catalog.state.debounce import Debouncer
from immo_catalog.state.gallery import GalleryCursor, GallerySession

__all__ = ["CompareResult", "CompareSet", "Debouncer", "GalleryCursor", "GallerySession"]
