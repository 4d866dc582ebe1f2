"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime

from immo_catalog.models.base import GeoPoint
from immo_catalog.models.enums import Amenity, PropertyCategory, TransactionKind


@dataclass(frozen=True)
class Property:
    """Real estate listing, immutable once loaded into a store."""

    property_id: str
    title: str
    category: PropertyCategory
    transaction: TransactionKind
    price: int  # FCFA; per month for rentals
    area_sqm: float
    rooms: int
    neighborhood: str  # Key into the neighborhood registry
    location: GeoPoint
    amenities: frozenset[Amenity] = field(default_factory=frozenset)
    views: int = 0
    created_at: datetime = field(default_factory=datetime.now)
    photos: tuple[str, ...] = ()
    description: str = ""

    @property
    def is_rental(self) -> bool:
        return self.transaction == TransactionKind.RENTAL
