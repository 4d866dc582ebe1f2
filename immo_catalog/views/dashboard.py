"""Agent dashboard aggregates over the full catalog."""

import random
from dataclasses import dataclass
from datetime import date, timedelta

from immo_catalog.config import DashboardConfig
from immo_catalog.models import Property
from immo_catalog.store import PropertyStore


@dataclass(frozen=True)
class KpiSnapshot:
    """Headline figures. Everything but ``active_listings`` is simulated."""

    active_listings: int
    monthly_sales: int
    revenue_millions: int
    weekly_visits: int


@dataclass(frozen=True)
class LabeledSeries:
    labels: tuple[str, ...]
    values: tuple[int, ...]


class DashboardAggregator:
    """Read-side figures for the agent dashboard.

    Works on the whole store and ignores the active search criteria, so
    the ranking does not move while a client narrows the grid.

    Parameters
    ----------
    store : PropertyStore
        Full catalog.
    config : DashboardConfig | None
        Ranking size and series length.
    seed : int | None
        Seed for the simulated KPI and sales figures.
    """

    def __init__(
        self,
        store: PropertyStore,
        config: DashboardConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.store = store
        self.config = config or DashboardConfig()
        self._rng = random.Random(seed)

    def top_viewed(self, n: int | None = None) -> list[Property]:
        """Most viewed listings, ties kept in load order."""
        limit = self.config.top_n if n is None else n
        return sorted(self.store, key=lambda p: p.views, reverse=True)[:limit]

    def kpis(self) -> KpiSnapshot:
        return KpiSnapshot(
            active_listings=len(self.store),
            monthly_sales=self._rng.randint(4, 22),
            revenue_millions=self._rng.randint(80, 480),
            weekly_visits=self._rng.randint(12, 45),
        )

    def sales_series(self, days: int | None = None, today: date | None = None) -> LabeledSeries:
        """Simulated daily sales over the last ``days`` days, oldest first."""
        length = self.config.series_days if days is None else days
        end = today or date.today()
        labels = tuple(
            (end - timedelta(days=length - 1 - i)).strftime("%d/%m") for i in range(length)
        )
        values = tuple(self._rng.randint(0, 3) for _ in labels)
        return LabeledSeries(labels=labels, values=values)
