#!/usr/bin/env python3
"""Browse a generated catalog from the command line.

Generates a mock Dakar catalog, applies the given filters and prints the
result grid, the most viewed listings and an optional comparison.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from immo_catalog.config import CatalogConfig
from immo_catalog.exceptions import CatalogError
from immo_catalog.generators import PropertyGenerator
from immo_catalog.logging import LOG_FORMATS, get_logger, setup_logging
from immo_catalog.models import Amenity, PropertyCategory, SortKey, TransactionKind
from immo_catalog.session import CatalogSession
from immo_catalog.store import PropertyStore
from immo_catalog.views import ConsoleRenderer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search a generated real-estate catalog")
    parser.add_argument("query", nargs="?", default="", help="Free-text search")
    parser.add_argument("--count", type=int, default=None, help="Catalog size (default: 36)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--category", choices=[c.value for c in PropertyCategory])
    parser.add_argument("--transaction", choices=[t.value for t in TransactionKind])
    parser.add_argument("--neighborhood", help="Neighborhood key, e.g. almadies")
    parser.add_argument("--min-price", dest="min_price")
    parser.add_argument("--max-price", dest="max_price")
    parser.add_argument("--min-area", dest="min_area")
    parser.add_argument("--max-area", dest="max_area")
    parser.add_argument("--min-rooms", dest="min_rooms")
    parser.add_argument(
        "--amenity",
        dest="amenities",
        action="append",
        choices=[a.value for a in Amenity],
        help="Required amenity (repeatable, all are required)",
    )
    parser.add_argument("--sort", choices=[s.value for s in SortKey], default=SortKey.RECENT.value)
    parser.add_argument(
        "--compare",
        action="append",
        default=[],
        metavar="PROPERTY_ID",
        help="Add a listing to the comparison (repeatable)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Maximum listings to print")
    parser.add_argument("--json", action="store_true", help="Print listings as JSON")
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=list(LOG_FORMATS),
        default=None,
        help="Log output format (default: LOG_FORMAT or standard)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = CatalogConfig.from_env()
    if args.count is not None:
        config.generator.count = args.count
    if args.seed is not None:
        config.generator.seed = args.seed
    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    generator = PropertyGenerator(seed=config.generator.seed, locale=config.generator.locale)
    store = PropertyStore.load(generator.generate_batch(config.generator.count))

    renderer = ConsoleRenderer(store, pretty=True, max_records=args.limit, as_json=args.json)
    session = CatalogSession(store, config, consumers=[renderer])

    form = {key: value for key, value in vars(args).items() if value is not None}
    try:
        session.apply_form(form)
    except CatalogError as exc:
        logger.error("Invalid search: %s", exc)
        return 2

    for property_id in args.compare:
        session.dispatch("compare", property_id)
    for notice in session.notices:
        if notice.level == "error":
            logger.warning(notice.message)

    renderer.print_ranking("Most viewed", session.dashboard.top_viewed())
    if args.compare:
        renderer.print_comparison(session.comparison())

    session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
