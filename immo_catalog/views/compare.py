"""Side-by-side comparison table."""

from dataclasses import dataclass, field

from immo_catalog.state import CompareSet
from immo_catalog.store import PropertyStore
from immo_catalog.views.formatting import format_area, format_price

EMPTY_COMPARE_MESSAGE = "No property selected for comparison."


@dataclass(frozen=True)
class ComparisonTable:
    """Column headers are listing titles, rows are characteristics."""

    property_ids: tuple[str, ...] = ()
    headers: tuple[str, ...] = ()
    rows: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.property_ids

    @property
    def empty_message(self) -> str | None:
        return EMPTY_COMPARE_MESSAGE if self.is_empty else None


def build_comparison(compare: CompareSet, store: PropertyStore) -> ComparisonTable:
    """Resolve the compare set against the store at render time.

    Ids the store does not know are skipped.
    """
    properties = [prop for prop in map(store.find, compare.ids) if prop is not None]
    if not properties:
        return ComparisonTable()

    return ComparisonTable(
        property_ids=tuple(p.property_id for p in properties),
        headers=tuple(p.title for p in properties),
        rows={
            "Photo": tuple(p.photos[0] for p in properties),
            "Price": tuple(format_price(p) for p in properties),
            "Area": tuple(format_area(p.area_sqm) for p in properties),
            "Bedrooms": tuple(str(p.rooms) for p in properties),
            "Neighborhood": tuple(store.neighborhood_name(p.neighborhood) for p in properties),
            "Amenities": tuple(
                ", ".join(sorted(a.value for a in p.amenities)) or "-" for p in properties
            ),
        },
    )
