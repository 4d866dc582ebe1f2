"""Pytest configuration and fixtures."""

import logging
from datetime import datetime

import pytest

from immo_catalog.models import Amenity, GeoPoint, Property, PropertyCategory, TransactionKind
from immo_catalog.store import PropertyStore


def make_property(
    property_id: str,
    *,
    title: str | None = None,
    category: PropertyCategory = PropertyCategory.APARTMENT,
    transaction: TransactionKind = TransactionKind.SALE,
    price: int = 100_000_000,
    area_sqm: float = 120,
    rooms: int = 3,
    neighborhood: str = "almadies",
    location: GeoPoint = GeoPoint(14.723, -17.503),
    amenities: frozenset = frozenset(),
    views: int = 100,
    created_at: datetime = datetime(2025, 1, 15, 12, 0),
    photos: tuple = ("https://example.com/a.jpg",),
    description: str = "",
) -> Property:
    """Build a listing with sensible defaults for tests."""
    return Property(
        property_id=property_id,
        title=title or f"Listing {property_id}",
        category=category,
        transaction=transaction,
        price=price,
        area_sqm=area_sqm,
        rooms=rooms,
        neighborhood=neighborhood,
        location=location,
        amenities=frozenset(amenities),
        views=views,
        created_at=created_at,
        photos=photos,
        description=description,
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_properties() -> list[Property]:
    """Six varied listings."""
    return [
        make_property(
            "prop-1",
            title="Villa for sale - 5 bd - Almadies",
            category=PropertyCategory.VILLA,
            price=250_000_000,
            area_sqm=300,
            rooms=5,
            amenities=frozenset({Amenity.POOL, Amenity.GARDEN, Amenity.SECURITY}),
            views=900,
            created_at=datetime(2025, 1, 10),
            description="Sea view villa with a large pool.",
        ),
        make_property(
            "prop-2",
            title="Apartment for rent - 2 bd - Plateau",
            transaction=TransactionKind.RENTAL,
            price=600_000,
            area_sqm=75,
            rooms=2,
            neighborhood="plateau",
            location=GeoPoint(14.673, -17.438),
            amenities=frozenset({Amenity.PARKING, Amenity.AIR_CONDITIONING}),
            views=300,
            created_at=datetime(2025, 1, 20),
        ),
        make_property(
            "prop-3",
            title="Land for sale - 800 m² - Ngor",
            category=PropertyCategory.LAND,
            price=90_000_000,
            area_sqm=800,
            rooms=0,
            neighborhood="ngor",
            location=GeoPoint(14.745, -17.513),
            views=300,
            created_at=datetime(2025, 1, 5),
        ),
        make_property(
            "prop-4",
            title="Office for sale - 4 bd - Plateau",
            category=PropertyCategory.OFFICE,
            price=400_000_000,
            area_sqm=220,
            rooms=4,
            neighborhood="plateau",
            location=GeoPoint(14.675, -17.440),
            amenities=frozenset({Amenity.PARKING, Amenity.SECURITY}),
            views=1200,
            created_at=datetime(2025, 1, 25),
        ),
        make_property(
            "prop-5",
            title="Apartment for sale - 3 bd - Mermoz",
            price=90_000_000,
            area_sqm=110,
            rooms=3,
            neighborhood="mermoz",
            location=GeoPoint(14.709, -17.472),
            amenities=frozenset({Amenity.POOL, Amenity.GARDEN}),
            views=50,
            created_at=datetime(2025, 1, 20),
        ),
        make_property(
            "prop-6",
            title="Villa for rent - 4 bd - Sacré-Cœur",
            category=PropertyCategory.VILLA,
            transaction=TransactionKind.RENTAL,
            price=2_000_000,
            area_sqm=260,
            rooms=4,
            neighborhood="sacre-coeur",
            location=GeoPoint(14.712, -17.462),
            amenities=frozenset({Amenity.GARDEN, Amenity.PARKING, Amenity.SECURITY}),
            views=700,
            created_at=datetime(2025, 1, 1),
        ),
    ]


@pytest.fixture
def store(sample_properties: list[Property]) -> PropertyStore:
    """Store loaded with the sample listings."""
    return PropertyStore.load(sample_properties)


@pytest.fixture
def property_factory():
    """Factory building listings with test defaults."""
    return make_property


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    package = logging.getLogger("immo_catalog")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
