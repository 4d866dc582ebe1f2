"""Keeps every presentation consumer on the same filtered result."""

from typing import Iterable

from immo_catalog.logging import get_logger
from immo_catalog.models import FilterCriteria
from immo_catalog.search import filter_properties
from immo_catalog.store import PropertyStore
from immo_catalog.views.base import FilteredResult, ResultConsumer

logger = get_logger(__name__)


class ViewSynchronizer:
    """Recompute the filtered result and fan it out to all consumers.

    Each ``apply`` evaluates the criteria once and hands the very same
    ``FilteredResult`` to every consumer before returning, so no consumer
    is left showing an older result than another.
    """

    def __init__(
        self,
        store: PropertyStore,
        consumers: Iterable[ResultConsumer] = (),
    ) -> None:
        self.store = store
        self.consumers: list[ResultConsumer] = list(consumers)
        self._revision = 0
        self._current = FilteredResult(criteria=FilterCriteria(), items=(), revision=0)

    @property
    def current(self) -> FilteredResult:
        return self._current

    @property
    def criteria(self) -> FilterCriteria:
        return self._current.criteria

    def apply(self, criteria: FilterCriteria) -> FilteredResult:
        """Evaluate ``criteria`` and deliver the result to every consumer."""
        self._revision += 1
        items = tuple(filter_properties(self.store, criteria))
        result = FilteredResult(criteria=criteria, items=items, revision=self._revision)
        self._current = result

        for consumer in self.consumers:
            consumer.render(result)

        logger.info(
            "Delivered %d results to %d consumers",
            result.count,
            len(self.consumers),
            extra={"revision": result.revision, "result_count": result.count},
        )
        return result

    def reset(self) -> FilteredResult:
        """Apply the default criteria (everything, newest first)."""
        return self.apply(FilterCriteria())

    def subscribe(self, consumer: ResultConsumer) -> None:
        """Attach a consumer and bring it up to date with the current result."""
        self.consumers.append(consumer)
        consumer.render(self._current)

    def unsubscribe(self, consumer: ResultConsumer) -> None:
        self.consumers.remove(consumer)
