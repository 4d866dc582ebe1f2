"""Filter predicates applied to a single listing."""

from typing import Callable

from immo_catalog.models import FilterCriteria, Property
from immo_catalog.store import PropertyStore

Predicate = Callable[[Property, FilterCriteria, PropertyStore], bool]


def match_category(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return criteria.category is None or prop.category == criteria.category


def match_transaction(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return criteria.transaction is None or prop.transaction == criteria.transaction


def match_neighborhood(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return not criteria.neighborhood or prop.neighborhood == criteria.neighborhood


def match_price(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return criteria.min_price <= prop.price <= criteria.max_price


def match_area(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return criteria.min_area <= prop.area_sqm <= criteria.max_area


def match_rooms(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    return prop.rooms >= criteria.min_rooms


def match_amenities(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    # Every checked amenity is required, not any of them
    return criteria.amenities <= prop.amenities


def search_text(prop: Property, store: PropertyStore) -> str:
    """Lower-cased haystack searched by free-text queries."""
    return f"{prop.title} {prop.description} {store.neighborhood_name(prop.neighborhood)}".lower()


def match_query(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    needle = criteria.normalized_query
    return not needle or needle in search_text(prop, store)


# Cheap field comparisons first, the text scan last
PREDICATES: dict[str, Predicate] = {
    "category": match_category,
    "transaction": match_transaction,
    "neighborhood": match_neighborhood,
    "price": match_price,
    "area": match_area,
    "rooms": match_rooms,
    "amenities": match_amenities,
    "query": match_query,
}


def failed_predicates(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> list[str]:
    """Names of the predicates a listing violates (empty when it matches)."""
    return [name for name, predicate in PREDICATES.items() if not predicate(prop, criteria, store)]


def matches(prop: Property, criteria: FilterCriteria, store: PropertyStore) -> bool:
    """Whether a listing satisfies every active predicate."""
    return all(predicate(prop, criteria, store) for predicate in PREDICATES.values())
