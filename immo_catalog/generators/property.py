"""Mock listing generator for the Dakar catalog."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator, Mapping

from immo_catalog.generators.base import BaseGenerator
from immo_catalog.models import (
    DAKAR_NEIGHBORHOODS,
    Amenity,
    GeoPoint,
    Neighborhood,
    Property,
    PropertyCategory,
    TransactionKind,
)
from immo_catalog.views.formatting import CATEGORY_LABELS, build_title

SAMPLE_PHOTOS = [
    "https://images.unsplash.com/photo-1560448075-bb4caa6c0f11?q=80&w=1600&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1507089947368-19c1da9775ae?q=80&w=1600&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1523217582562-09d0def993a6?q=80&w=1600&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1501045661006-fcebe0257c3f?q=80&w=1600&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?q=80&w=1600&auto=format&fit=crop",
    "https://images.unsplash.com/photo-1597047084897-51e81819a499?q=80&w=1600&auto=format&fit=crop",
]


class PropertyGenerator(BaseGenerator):
    """Generate synthetic listings spread over a neighborhood registry."""

    # Price ranges in FCFA; rentals are monthly
    SALE_PRICES = {
        PropertyCategory.VILLA: (30_000_000, 450_000_000),
        PropertyCategory.APARTMENT: (30_000_000, 450_000_000),
        PropertyCategory.LAND: (20_000_000, 300_000_000),
        PropertyCategory.OFFICE: (50_000_000, 600_000_000),
    }
    RENT_PRICES = {
        PropertyCategory.VILLA: (250_000, 3_500_000),
        PropertyCategory.APARTMENT: (250_000, 3_500_000),
        PropertyCategory.LAND: (250_000, 3_500_000),
        PropertyCategory.OFFICE: (500_000, 5_000_000),
    }

    AREA_RANGE = (45, 380)
    LAND_AREA_RANGE = (150, 1200)
    ROOMS_RANGE = (1, 6)
    VIEWS_RANGE = (50, 1500)
    PHOTOS_RANGE = (3, 6)
    MAX_AGE_DAYS = 45
    JITTER_DEGREES = 0.01  # roughly 1 km

    def __init__(
        self,
        seed: int | None = None,
        registry: Mapping[str, Neighborhood] | None = None,
        locale: str = "fr_FR",
    ) -> None:
        super().__init__(seed, locale)
        self.registry = dict(registry) if registry is not None else dict(DAKAR_NEIGHBORHOODS)
        self._counter = 0

    def generate(self, now: datetime | None = None) -> Property:
        """Generate a single listing.

        Returns
        -------
        Property
            Generated listing with a sequential ``prop-N`` id.
        """
        return self._generate_one(now or datetime.now())

    def generate_batch(self, count: int = 36, now: datetime | None = None) -> Iterator[Property]:
        """Generate multiple listings.

        Parameters
        ----------
        count : int
            Number of listings to generate.
        now : datetime | None
            Reference time for creation dates (default: now).

        Yields
        ------
        Property
            Generated listings.
        """
        reference = now or datetime.now()
        for _ in range(count):
            yield self._generate_one(reference)

    def _generate_one(self, now: datetime) -> Property:
        rng = self.rng
        self._counter += 1

        neighborhood = self.registry[rng.choice(list(self.registry))]
        location = GeoPoint(
            neighborhood.center.lat + rng.uniform(-self.JITTER_DEGREES, self.JITTER_DEGREES),
            neighborhood.center.lng + rng.uniform(-self.JITTER_DEGREES, self.JITTER_DEGREES),
        )

        category = rng.choice(list(PropertyCategory))
        transaction = rng.choice(list(TransactionKind))
        prices = self.SALE_PRICES if transaction == TransactionKind.SALE else self.RENT_PRICES
        price = rng.randint(*prices[category])

        is_land = category == PropertyCategory.LAND
        area = rng.randint(*(self.LAND_AREA_RANGE if is_land else self.AREA_RANGE))
        rooms = 0 if is_land else rng.randint(*self.ROOMS_RANGE)

        amenities = frozenset(a for a in Amenity if rng.random() > 0.5)
        photos = tuple(
            f"{rng.choice(SAMPLE_PHOTOS)}&sig={rng.random()}"
            for _ in range(rng.randint(*self.PHOTOS_RANGE))
        )

        return Property(
            property_id=f"prop-{self._counter}",
            title=build_title(category, transaction, rooms, area, neighborhood.name),
            category=category,
            transaction=transaction,
            price=price,
            area_sqm=area,
            rooms=rooms,
            neighborhood=neighborhood.key,
            location=location,
            amenities=amenities,
            views=rng.randint(*self.VIEWS_RANGE),
            created_at=now - timedelta(days=rng.randint(0, self.MAX_AGE_DAYS), minutes=rng.randint(0, 1439)),
            photos=photos,
            description=self._describe(category, rooms, area, neighborhood.name, amenities),
        )

    def _describe(
        self,
        category: PropertyCategory,
        rooms: int,
        area: int,
        neighborhood_name: str,
        amenities: frozenset[Amenity],
    ) -> str:
        size = f"{rooms} spacious bedrooms" if rooms > 0 else "Generous plot"
        features = ", ".join(sorted(a.value for a in amenities)) or "to be defined"
        return (
            f"Superb {CATEGORY_LABELS[category].lower()} located in {neighborhood_name}. "
            f"{size} • {area} m² • Amenities: {features}. "
            f"Listed by {self.fake.company()}."
        )
