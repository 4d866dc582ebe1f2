"""Filter criteria model."""

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from immo_catalog.exceptions import ReferentialIntegrityError
from immo_catalog.models.enums import Amenity, PropertyCategory, SortKey, TransactionKind


def _bound(raw: Any, default: float) -> float:
    """Parse a numeric form bound; blank or non-numeric values leave it open.

    Zero counts as unset, so ``max_price=0`` means no ceiling rather than
    "nothing is cheap enough".
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if math.isnan(value) or value == 0:
        return default
    return value


def _rooms(raw: Any) -> int:
    """Parse a minimum room count; fractional minimums round up."""
    value = _bound(raw, 0)
    return math.ceil(value) if math.isfinite(value) else 0


def _choice(enum_cls: type, raw: Any) -> Any:
    if raw is None or raw == "":
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        raise ReferentialIntegrityError(f"Unknown {enum_cls.__name__} {raw!r}") from None


def _amenities(raw: Iterable[Any] | None) -> frozenset[Amenity]:
    if not raw:
        return frozenset()
    if isinstance(raw, str):
        raw = [raw]
    return frozenset(_choice(Amenity, value) for value in raw if value)


@dataclass(frozen=True)
class FilterCriteria:
    """Active filter and sort parameters.

    Rebuilt on every evaluation. Unset optional fields impose no
    constraint, numeric bounds default to fully open ranges and an empty
    amenity set requires nothing.
    """

    query: str = ""
    category: PropertyCategory | None = None
    transaction: TransactionKind | None = None
    neighborhood: str | None = None
    min_price: float = 0
    max_price: float = math.inf
    min_area: float = 0
    max_area: float = math.inf
    min_rooms: int = 0
    amenities: frozenset[Amenity] = field(default_factory=frozenset)
    sort: SortKey = SortKey.RECENT

    def __post_init__(self) -> None:
        # Raw form values are accepted here as well as in from_form
        object.__setattr__(self, "min_price", _bound(self.min_price, 0))
        object.__setattr__(self, "max_price", _bound(self.max_price, math.inf))
        object.__setattr__(self, "min_area", _bound(self.min_area, 0))
        object.__setattr__(self, "max_area", _bound(self.max_area, math.inf))
        object.__setattr__(self, "min_rooms", _rooms(self.min_rooms))
        object.__setattr__(self, "category", _choice(PropertyCategory, self.category))
        object.__setattr__(self, "transaction", _choice(TransactionKind, self.transaction))
        object.__setattr__(self, "amenities", _amenities(self.amenities))
        object.__setattr__(self, "sort", SortKey.parse(self.sort))

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "FilterCriteria":
        """Build criteria from raw search-form values.

        Parameters
        ----------
        form : Mapping[str, Any]
            Raw values keyed by field name. Missing, blank or non-numeric
            entries fall back to the unconstrained default.

        Returns
        -------
        FilterCriteria
            Parsed criteria.

        Raises
        ------
        ReferentialIntegrityError
            If a category, transaction or amenity value is outside its
            closed vocabulary.
        """
        query = form.get("query") or ""
        neighborhood = form.get("neighborhood") or None
        return cls(
            query=str(query).strip(),
            category=form.get("category"),
            transaction=form.get("transaction"),
            neighborhood=neighborhood,
            min_price=form.get("min_price"),
            max_price=form.get("max_price"),
            min_area=form.get("min_area"),
            max_area=form.get("max_area"),
            min_rooms=form.get("min_rooms"),
            amenities=form.get("amenities"),
            sort=form.get("sort"),
        )

    @property
    def normalized_query(self) -> str:
        return self.query.strip().lower()
