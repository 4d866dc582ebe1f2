"""Configuration management for immo-catalog."""

from dataclasses import dataclass, field

from immo_catalog.exceptions import ConfigurationError
from immo_catalog.logging import LOG_FORMATS

# Centre of Dakar, used whenever there is nothing to fit the map to
DEFAULT_MAP_CENTER: tuple[float, float] = (14.6928, -17.4467)


@dataclass
class GeneratorConfig:
    """Mock catalog generation settings."""

    count: int = 36
    seed: int | None = None
    locale: str = "fr_FR"


@dataclass
class SearchConfig:
    """Live search settings."""

    debounce_seconds: float = 0.5


@dataclass
class CompareConfig:
    """Compare set settings."""

    capacity: int = 3

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ConfigurationError(f"Compare capacity must be positive, got {self.capacity}")


@dataclass
class MapConfig:
    """Map viewport settings."""

    default_center: tuple[float, float] = DEFAULT_MAP_CENTER
    default_zoom: int = 12
    focus_zoom: int = 15
    bounds_padding: float = 0.2


@dataclass
class DashboardConfig:
    """Agent dashboard settings."""

    top_n: int = 5
    series_days: int = 30


@dataclass
class CatalogConfig:
    """Main configuration for immo-catalog."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    compare: CompareConfig = field(default_factory=CompareConfig)
    map: MapConfig = field(default_factory=MapConfig)
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Create config from environment variables."""
        import json
        import os

        seed = os.getenv("SEED")
        generator = GeneratorConfig(
            count=int(os.getenv("CATALOG_SIZE", "36")),
            seed=int(seed) if seed else None,
            locale=os.getenv("FAKER_LOCALE", "fr_FR"),
        )

        search = SearchConfig(
            debounce_seconds=float(os.getenv("SEARCH_DEBOUNCE", "0.5")),
        )

        compare = CompareConfig(
            capacity=int(os.getenv("COMPARE_CAPACITY", "3")),
        )

        center_str = os.getenv("MAP_CENTER")
        if center_str:
            center = json.loads(center_str)
            if not isinstance(center, list) or len(center) != 2:
                raise ConfigurationError(f"MAP_CENTER must be a [lat, lng] pair, got {center_str!r}")
            map_config = MapConfig(default_center=(float(center[0]), float(center[1])))
        else:
            map_config = MapConfig()

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        dashboard = DashboardConfig(
            top_n=int(os.getenv("TOP_N", "5")),
        )

        return cls(
            generator=generator,
            search=search,
            compare=compare,
            map=map_config,
            dashboard=dashboard,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )
