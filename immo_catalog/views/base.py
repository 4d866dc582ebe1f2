"""Result delivered to presentation consumers."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from immo_catalog.models import FilterCriteria, Property

NO_MATCH_MESSAGE = "No property matches your criteria."


@dataclass(frozen=True)
class FilteredResult:
    """One evaluation of the catalog, shared by every consumer."""

    criteria: FilterCriteria
    items: tuple[Property, ...]
    revision: int = 0

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def ids(self) -> list[str]:
        return [p.property_id for p in self.items]


@runtime_checkable
class ResultConsumer(Protocol):
    """Anything that presents a filtered result."""

    def render(self, result: FilteredResult) -> None: ...
