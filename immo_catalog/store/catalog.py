"""Property store with load-time referential integrity checks."""

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Mapping

from immo_catalog.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from immo_catalog.logging import get_logger
from immo_catalog.models import (
    DAKAR_NEIGHBORHOODS,
    Amenity,
    Neighborhood,
    Property,
    PropertyCategory,
    TransactionKind,
)

logger = get_logger(__name__)


@dataclass
class PropertyStore:
    """In-memory store for the listings of one browsing session.

    The store is the single source of truth: filtered results, the
    compare set and the gallery only ever hold ids or references that
    resolve back here. Every listing is validated on insert so that a
    broken neighborhood or amenity reference fails at load time instead
    of silently never matching a filter.
    """

    registry: Mapping[str, Neighborhood] = field(default_factory=lambda: dict(DAKAR_NEIGHBORHOODS))

    _properties: dict[str, Property] = field(default_factory=dict)

    @classmethod
    def load(
        cls,
        properties: Iterable[Property],
        registry: Mapping[str, Neighborhood] | None = None,
    ) -> "PropertyStore":
        """Build a store from a finite sequence of listings.

        Parameters
        ----------
        properties : Iterable[Property]
            Listings in display order.
        registry : Mapping[str, Neighborhood] | None
            Neighborhood registry (default: Dakar neighborhoods).

        Returns
        -------
        PropertyStore
            Populated store.
        """
        store = cls(registry=dict(registry) if registry is not None else dict(DAKAR_NEIGHBORHOODS))
        for prop in properties:
            store.add_property(prop)
        logger.info("Loaded %d properties into the catalog", len(store))
        return store

    def add_property(self, prop: Property) -> Property:
        """Validate and add a listing; returns the stored (normalized) record."""
        if prop.property_id in self._properties:
            raise InvalidEntityStateError(f"Property {prop.property_id} already loaded")

        if prop.neighborhood not in self.registry:
            raise ReferentialIntegrityError(
                f"Neighborhood {prop.neighborhood!r} of property {prop.property_id} not found"
            )

        try:
            amenities = frozenset(Amenity(a) for a in prop.amenities)
        except ValueError as exc:
            raise ReferentialIntegrityError(
                f"Property {prop.property_id} has an unknown amenity: {exc}"
            ) from exc

        try:
            category = PropertyCategory(prop.category)
            transaction = TransactionKind(prop.transaction)
        except ValueError as exc:
            raise InvalidEntityStateError(f"Property {prop.property_id}: {exc}") from exc

        if not prop.photos:
            raise InvalidEntityStateError(f"Property {prop.property_id} has no photos")
        if prop.price <= 0:
            raise InvalidEntityStateError(f"Property {prop.property_id} has a non-positive price")
        if prop.area_sqm <= 0:
            raise InvalidEntityStateError(f"Property {prop.property_id} has a non-positive area")
        if prop.rooms < 0:
            raise InvalidEntityStateError(f"Property {prop.property_id} has a negative room count")
        if prop.rooms == 0 and category != PropertyCategory.LAND:
            raise InvalidEntityStateError(
                f"Property {prop.property_id} is a {category.value} without rooms"
            )
        if prop.views < 0:
            raise InvalidEntityStateError(f"Property {prop.property_id} has a negative view count")

        stored = replace(
            prop,
            category=category,
            transaction=transaction,
            amenities=amenities,
            photos=tuple(prop.photos),
        )
        self._properties[stored.property_id] = stored
        return stored

    # Query methods
    def get(self, property_id: str) -> Property:
        """Get a listing by id."""
        try:
            return self._properties[property_id]
        except KeyError:
            raise EntityNotFoundError(f"Property {property_id} not found") from None

    def find(self, property_id: str) -> Property | None:
        """Get a listing by id, or None when it is unknown."""
        return self._properties.get(property_id)

    def neighborhood_name(self, key: str) -> str:
        """Display name of a neighborhood key (the key itself if unregistered)."""
        neighborhood = self.registry.get(key)
        return neighborhood.name if neighborhood else key

    @property
    def properties(self) -> tuple[Property, ...]:
        """All listings in load order."""
        return tuple(self._properties.values())

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties.values())

    def summary(self) -> dict[str, int]:
        """Return listing counts, overall and per category and transaction."""
        by_category = Counter(p.category.value for p in self)
        by_transaction = Counter(p.transaction.value for p in self)
        return {
            "properties": len(self),
            **{f"category.{c.value}": by_category.get(c.value, 0) for c in PropertyCategory},
            **{f"transaction.{t.value}": by_transaction.get(t.value, 0) for t in TransactionKind},
        }
