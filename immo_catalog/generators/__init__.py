"""Mock catalog generation."""

from immo_catalog.generators.base import BaseGenerator
from immo_catalog.generators.property import PropertyGenerator

__all__ = ["BaseGenerator", "PropertyGenerator"]
