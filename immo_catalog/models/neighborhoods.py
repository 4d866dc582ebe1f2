"""Neighborhood registry for the Dakar catalog."""

from immo_catalog.models.base import GeoPoint, Neighborhood


def _entry(key: str, name: str, lat: float, lng: float) -> tuple[str, Neighborhood]:
    return key, Neighborhood(key=key, name=name, center=GeoPoint(lat, lng))


# Approximate centroids from OpenStreetMap
DAKAR_NEIGHBORHOODS: dict[str, Neighborhood] = dict(
    [
        _entry("almadies", "Almadies", 14.723, -17.503),
        _entry("mermoz", "Mermoz", 14.709, -17.472),
        _entry("vdn", "VDN", 14.720, -17.459),
        _entry("plateau", "Plateau", 14.673, -17.438),
        _entry("sacre-coeur", "Sacré-Cœur", 14.712, -17.462),
        _entry("ouakam", "Ouakam", 14.724, -17.490),
        _entry("fann", "Fann", 14.692, -17.466),
        _entry("ngor", "Ngor", 14.745, -17.513),
        _entry("point-e", "Point E", 14.691, -17.466),
        _entry("hann", "Hann Maristes", 14.721, -17.424),
    ]
)
