"""Map marker layer consumer."""

from dataclasses import dataclass

from immo_catalog.config import MapConfig
from immo_catalog.models import GeoPoint, Property
from immo_catalog.views.base import FilteredResult
from immo_catalog.views.formatting import format_area, format_price


@dataclass(frozen=True)
class Marker:
    property_id: str
    location: GeoPoint
    title: str
    caption: str


@dataclass(frozen=True)
class Bounds:
    south_west: GeoPoint
    north_east: GeoPoint

    @classmethod
    def around(cls, points: list[GeoPoint]) -> "Bounds":
        lats = [p.lat for p in points]
        lngs = [p.lng for p in points]
        return cls(GeoPoint(min(lats), min(lngs)), GeoPoint(max(lats), max(lngs)))

    def pad(self, ratio: float) -> "Bounds":
        """Grow each side by ``ratio`` of the span, like Leaflet's ``LatLngBounds.pad``."""
        lat_buffer = (self.north_east.lat - self.south_west.lat) * ratio
        lng_buffer = (self.north_east.lng - self.south_west.lng) * ratio
        return Bounds(
            GeoPoint(self.south_west.lat - lat_buffer, self.south_west.lng - lng_buffer),
            GeoPoint(self.north_east.lat + lat_buffer, self.north_east.lng + lng_buffer),
        )

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(
            (self.south_west.lat + self.north_east.lat) / 2,
            (self.south_west.lng + self.north_east.lng) / 2,
        )


@dataclass(frozen=True)
class Viewport:
    """Either a fit-to-bounds command or a fixed center and zoom."""

    center: GeoPoint
    zoom: int | None = None
    bounds: Bounds | None = None


class MapLayer:
    """One marker per delivered listing plus the viewport derived from them."""

    def __init__(self, config: MapConfig | None = None) -> None:
        self.config = config or MapConfig()
        self.markers: list[Marker] = []
        self.viewport = self.default_viewport()
        self.revision = -1

    def render(self, result: FilteredResult) -> None:
        self.markers = [self._marker(prop) for prop in result.items]
        self.viewport = self.fit(list(result.items))
        self.revision = result.revision

    def fit(self, properties: list[Property]) -> Viewport:
        """Viewport covering ``properties``; the default center when there are none."""
        return self._fit_points([p.location for p in properties])

    def recenter(self) -> Viewport:
        """Refit the viewport to the markers currently shown."""
        self.viewport = self._fit_points([m.location for m in self.markers])
        return self.viewport

    def focus(self, prop: Property) -> Marker | None:
        """Center on one listing at street-level zoom.

        Returns the listing's marker, or None when the current result does
        not show it.
        """
        self.viewport = Viewport(center=prop.location, zoom=self.config.focus_zoom)
        return next((m for m in self.markers if m.property_id == prop.property_id), None)

    def _fit_points(self, points: list[GeoPoint]) -> Viewport:
        if not points:
            return self.default_viewport()
        bounds = Bounds.around(points).pad(self.config.bounds_padding)
        return Viewport(center=bounds.center, bounds=bounds)

    def default_viewport(self) -> Viewport:
        lat, lng = self.config.default_center
        return Viewport(center=GeoPoint(lat, lng), zoom=self.config.default_zoom)

    @staticmethod
    def _marker(prop: Property) -> Marker:
        return Marker(
            property_id=prop.property_id,
            location=prop.location,
            title=prop.title,
            caption=f"{format_price(prop)} - {format_area(prop.area_sqm)}",
        )
