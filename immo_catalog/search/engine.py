"""Stateless filter and sort engine."""

from typing import Callable, Sequence

from immo_catalog.logging import get_logger
from immo_catalog.models import FilterCriteria, Property, SortKey
from immo_catalog.search.filters import matches
from immo_catalog.store import PropertyStore

logger = get_logger(__name__)

# (key function, reverse); list.sort is stable in both directions
SORT_ORDERS: dict[SortKey, tuple[Callable[[Property], object], bool]] = {
    SortKey.RECENT: (lambda p: p.created_at, True),
    SortKey.PRICE_ASC: (lambda p: p.price, False),
    SortKey.PRICE_DESC: (lambda p: p.price, True),
    SortKey.AREA_DESC: (lambda p: p.area_sqm, True),
}


def sort_properties(properties: Sequence[Property], sort: SortKey) -> list[Property]:
    """Order listings by a sort key, keeping input order among ties."""
    key, reverse = SORT_ORDERS.get(sort, SORT_ORDERS[SortKey.RECENT])
    return sorted(properties, key=key, reverse=reverse)


def filter_properties(store: PropertyStore, criteria: FilterCriteria) -> list[Property]:
    """Select and order the listings matching every active criterion.

    Parameters
    ----------
    store : PropertyStore
        Full catalog.
    criteria : FilterCriteria
        Active filters and sort key.

    Returns
    -------
    list[Property]
        Matching listings in sort order. An empty list is a normal result.
    """
    selected = [prop for prop in store if matches(prop, criteria, store)]
    ordered = sort_properties(selected, criteria.sort)
    logger.debug(
        "Filtered %d of %d properties (sort=%s)", len(ordered), len(store), criteria.sort.value
    )
    return ordered
