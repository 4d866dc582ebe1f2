"""Console consumer for debugging and the command line script."""

import json
from typing import Any, Iterable

from immo_catalog.store import PropertyStore
from immo_catalog.views.base import NO_MATCH_MESSAGE, FilteredResult
from immo_catalog.views.compare import ComparisonTable
from immo_catalog.views.formatting import format_area, format_price
from immo_catalog.views.serialization import to_dict


class ConsoleRenderer:
    """Print filtered results, rankings and comparisons to stdout."""

    def __init__(
        self,
        store: PropertyStore,
        pretty: bool = False,
        max_records: int | None = None,
        as_json: bool = False,
    ) -> None:
        """Initialize console renderer.

        Parameters
        ----------
        store : PropertyStore
            Catalog used to resolve neighborhood names.
        pretty : bool
            Indent JSON output.
        max_records : int | None
            Maximum listings to print per result (None for all).
        as_json : bool
            Print one JSON document per listing instead of a text line.
        """
        self.store = store
        self.pretty = pretty
        self.max_records = max_records
        self.as_json = as_json
        self.renders = 0

    def render(self, result: FilteredResult) -> None:
        print(f"\n{'=' * 60}")
        print(f"Results: {result.count} properties")
        print("=" * 60)
        self.renders += 1

        if result.is_empty:
            print(NO_MATCH_MESSAGE)
            return

        display = result.items[: self.max_records] if self.max_records else result.items
        self._print_listings(display)

        if self.max_records and result.count > self.max_records:
            print(f"... and {result.count - self.max_records} more properties")

    def print_ranking(self, title: str, properties: Iterable[Any]) -> None:
        print(f"\n{title}")
        print("-" * 60)
        for rank, prop in enumerate(properties, start=1):
            print(f"{rank}. {prop.title} ({prop.views} views)")

    def print_comparison(self, table: ComparisonTable) -> None:
        print(f"\n{'=' * 60}")
        print("Comparison")
        print("=" * 60)
        if table.is_empty:
            print(table.empty_message)
            return
        print(" | ".join(("", *table.headers)))
        for label, cells in table.rows.items():
            print(" | ".join((label, *cells)))

    def _print_listings(self, properties: Iterable[Any]) -> None:
        for prop in properties:
            if self.as_json:
                print(json.dumps(to_dict(prop), indent=2 if self.pretty else None, ensure_ascii=False))
                continue
            neighborhood = self.store.neighborhood_name(prop.neighborhood)
            print(
                f"[{prop.property_id}] {prop.title} | {format_price(prop)} | "
                f"{format_area(prop.area_sqm)} | {neighborhood}"
            )
