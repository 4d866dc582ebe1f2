"""Enumeration types for catalog entities."""

from enum import Enum


class PropertyCategory(str, Enum):
    VILLA = "villa"
    APARTMENT = "apartment"
    LAND = "land"
    OFFICE = "office"


class TransactionKind(str, Enum):
    SALE = "sale"
    RENTAL = "rental"


class Amenity(str, Enum):
    POOL = "pool"
    GARDEN = "garden"
    PARKING = "parking"
    SECURITY = "security"
    AIR_CONDITIONING = "air_conditioning"


class SortKey(str, Enum):
    RECENT = "recent"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    AREA_DESC = "area-desc"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        """Resolve a raw sort value, falling back to newest first."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.RECENT
