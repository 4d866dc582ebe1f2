"""Base models shared across the catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """WGS84 coordinate pair."""

    lat: float
    lng: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


@dataclass(frozen=True)
class Neighborhood:
    """Entry of the neighborhood registry.

    ``key`` is the stable identifier properties refer to, ``name`` the
    display name shown to users and searched by free-text queries, and
    ``center`` the approximate centroid used to place generated listings.
    """

    key: str
    name: str
    center: GeoPoint
