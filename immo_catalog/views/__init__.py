"""Presentation consumers fed by the view synchronizer."""

from immo_catalog.views.base import NO_MATCH_MESSAGE, FilteredResult, ResultConsumer
from immo_catalog.views.compare import ComparisonTable, build_comparison
from immo_catalog.views.console import ConsoleRenderer
from immo_catalog.views.dashboard import DashboardAggregator, KpiSnapshot, LabeledSeries
from immo_catalog.views.formatting import format_price
from immo_catalog.views.grid import ResultCard, ResultGrid
from immo_catalog.views.map import Bounds, MapLayer, Marker, Viewport

__all__ = [
    "Bounds",
    "ComparisonTable",
    "ConsoleRenderer",
    "DashboardAggregator",
    "FilteredResult",
    "KpiSnapshot",
    "LabeledSeries",
    "MapLayer",
    "Marker",
    "NO_MATCH_MESSAGE",
    "ResultCard",
    "ResultConsumer",
    "ResultGrid",
    "Viewport",
    "build_comparison",
    "format_price",
]
