"""Browsing session: composes the catalog components behind one dispatch point."""

import threading
from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable

from immo_catalog.config import CatalogConfig
from immo_catalog.exceptions import CompareCapacityError
from immo_catalog.logging import get_logger
from immo_catalog.models import FilterCriteria, Property
from immo_catalog.state import CompareResult, CompareSet, Debouncer, GalleryCursor
from immo_catalog.store import PropertyStore
from immo_catalog.sync import ViewSynchronizer
from immo_catalog.views import (
    ComparisonTable,
    DashboardAggregator,
    FilteredResult,
    MapLayer,
    ResultConsumer,
    ResultGrid,
    build_comparison,
)

logger = get_logger(__name__)


class Action(str, Enum):
    """Per-listing actions raised by the grid, map popups and detail view."""

    DETAILS = "details"
    GALLERY = "gallery"
    COMPARE = "compare"
    VIEW_MAP = "view-map"


@dataclass(frozen=True)
class Notice:
    """Transient message for the user (a toast)."""

    message: str
    level: str = "info"  # info, success or error


class CatalogSession:
    """Session state for one user browsing one catalog.

    Owns the synchronizer (and through it the grid and map), the compare
    set, the gallery cursor and the search debouncer. All mutations go
    through a re-entrant lock because debounced searches fire from a
    timer thread.

    Parameters
    ----------
    store : PropertyStore
        Loaded catalog.
    config : CatalogConfig | None
        Session settings.
    consumers : Iterable[ResultConsumer]
        Extra consumers to keep in sync besides the grid and the map.

    Only the latest ``MAX_NOTICES`` notices are kept.
    """

    MAX_NOTICES = 20

    def __init__(
        self,
        store: PropertyStore,
        config: CatalogConfig | None = None,
        consumers: Iterable[ResultConsumer] = (),
    ) -> None:
        self.store = store
        self.config = config or CatalogConfig()
        self.grid = ResultGrid(store)
        self.map = MapLayer(self.config.map)
        self.sync = ViewSynchronizer(store, [self.grid, self.map, *consumers])
        self.compare = CompareSet(capacity=self.config.compare.capacity)
        self.gallery = GalleryCursor()
        self.dashboard = DashboardAggregator(
            store, self.config.dashboard, seed=self.config.generator.seed
        )
        self.detail: Property | None = None
        self.notices: deque[Notice] = deque(maxlen=self.MAX_NOTICES)
        self._lock = threading.RLock()
        self._generation = 0
        self._search = Debouncer(self._apply_query, wait=self.config.search.debounce_seconds)

    def start(self) -> FilteredResult:
        """Show the whole catalog, newest first."""
        with self._lock:
            return self.sync.reset()

    # Criteria
    @property
    def criteria(self) -> FilterCriteria:
        return self.sync.criteria

    @property
    def result(self) -> FilteredResult:
        return self.sync.current

    def apply(self, criteria: FilterCriteria) -> FilteredResult:
        """Apply criteria now; a pending debounced query is dropped."""
        self._search.cancel()
        with self._lock:
            # A timer already past its own check may be waiting on the lock
            self._generation += 1
            return self.sync.apply(criteria)

    def apply_form(self, form: dict[str, Any]) -> FilteredResult:
        """Apply criteria parsed from raw search-form values."""
        return self.apply(FilterCriteria.from_form(form))

    def update_filters(self, **changes: Any) -> FilteredResult:
        """Apply the current criteria with some fields replaced.

        A live search still waiting for its quiet window is folded in first.
        """
        with self._lock:
            self._search.flush()
            return self.apply(replace(self.criteria, **changes))

    def reset_filters(self) -> FilteredResult:
        with self._lock:
            result = self.apply(FilterCriteria())
            self._notify("Filters reset")
            return result

    def search(self, text: str) -> None:
        """Live search: re-evaluate once typing has paused."""
        with self._lock:
            self._search.call(text, self._generation)

    def flush_search(self) -> bool:
        """Run a pending live search immediately."""
        return self._search.flush()

    @property
    def search_pending(self) -> bool:
        return self._search.pending

    def _apply_query(self, text: str, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale search %r", text, extra={"query": text})
                return
            self.sync.apply(replace(self.criteria, query=text.strip()))

    # Per-listing actions
    def dispatch(
        self,
        action: str | Action,
        property_id: str,
        raise_errors: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Handle an action raised for one listing.

        Parameters
        ----------
        action : str | Action
            One of ``details``, ``gallery``, ``compare``, ``view-map``.
        property_id : str
            Listing the action targets. Unknown ids are ignored.
        raise_errors : bool
            Re-raise a compare capacity error after recording the notice.
        **kwargs
            ``start_index`` for ``gallery``.

        Returns
        -------
        Any
            The opened listing (details), the gallery index (gallery), the
            ``CompareResult`` or None when rejected (compare), the map marker
            or None (view-map). None for unknown ids.
        """
        action = Action(action)
        with self._lock:
            prop = self.store.find(property_id)
            if prop is None:
                logger.warning(
                    "Ignoring %s for unknown property %s",
                    action.value,
                    property_id,
                    extra={"action": action.value, "property_id": property_id},
                )
                return None

            if action == Action.DETAILS:
                self.detail = prop
                return prop
            if action == Action.GALLERY:
                self.gallery.open(prop.photos, kwargs.get("start_index", 0), title=prop.title)
                return self.gallery.index
            if action == Action.VIEW_MAP:
                return self.map.focus(prop)
            return self._toggle_compare(prop.property_id, raise_errors)

    def _toggle_compare(self, property_id: str, raise_errors: bool) -> CompareResult | None:
        try:
            outcome = self.compare.toggle(property_id)
        except CompareCapacityError as exc:
            self._notify(f"Comparison: maximum {self.compare.capacity} properties", "error")
            if raise_errors:
                raise
            logger.info("Compare toggle rejected: %s", exc)
            return None

        if outcome == CompareResult.ADDED:
            self._notify("Added to comparison", "success")
        else:
            self._notify("Removed from comparison")
        return outcome

    def close_details(self) -> None:
        with self._lock:
            self.detail = None

    def comparison(self) -> ComparisonTable:
        with self._lock:
            return build_comparison(self.compare, self.store)

    def close(self) -> None:
        """Drop pending work and transient views."""
        self._search.cancel()
        with self._lock:
            self._generation += 1
            self.gallery.close()
            self.detail = None

    def _notify(self, message: str, level: str = "info") -> None:
        self.notices.append(Notice(message=message, level=level))
