"""Result grid consumer."""

from dataclasses import dataclass

from immo_catalog.models import Property
from immo_catalog.store import PropertyStore
from immo_catalog.views.base import NO_MATCH_MESSAGE, FilteredResult
from immo_catalog.views.formatting import TRANSACTION_LABELS, format_area, format_price

MAX_CARD_TAGS = 4


@dataclass(frozen=True)
class ResultCard:
    """Display fields of one listing in the grid."""

    property_id: str
    title: str
    price: str
    transaction: str
    meta: str
    neighborhood: str
    thumbnail: str
    tags: tuple[str, ...]


class ResultGrid:
    """Keeps the cards and the literal count of the current result."""

    def __init__(self, store: PropertyStore) -> None:
        self.store = store
        self.cards: list[ResultCard] = []
        self.count = 0
        self.empty_message: str | None = None
        self.revision = -1

    def render(self, result: FilteredResult) -> None:
        self.cards = [self._card(prop) for prop in result.items]
        self.count = result.count
        self.empty_message = NO_MATCH_MESSAGE if result.is_empty else None
        self.revision = result.revision

    def _card(self, prop: Property) -> ResultCard:
        return ResultCard(
            property_id=prop.property_id,
            title=prop.title,
            price=format_price(prop),
            transaction=TRANSACTION_LABELS[prop.transaction],
            meta=f"{prop.rooms} bd • {format_area(prop.area_sqm)}",
            neighborhood=self.store.neighborhood_name(prop.neighborhood),
            thumbnail=prop.photos[0],
            tags=tuple(a.value for a in sorted(prop.amenities, key=lambda a: a.value))[:MAX_CARD_TAGS],
        )
