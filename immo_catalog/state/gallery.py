"""Circular photo gallery cursor."""

from dataclasses import dataclass
from typing import Sequence

from immo_catalog.exceptions import EmptyGalleryError, GalleryClosedError


@dataclass(frozen=True)
class GallerySession:
    """Photos and position of one open gallery."""

    photos: tuple[str, ...]
    index: int
    title: str = ""


class GalleryCursor:
    """Two-state (closed/open) cursor over a photo sequence.

    Navigation wraps around in both directions. Every ``open`` seeds a
    fresh session; ``close`` discards it entirely.
    """

    def __init__(self) -> None:
        self._session: GallerySession | None = None

    def open(self, photos: Sequence[str], start_index: int = 0, title: str = "") -> None:
        """Open (or replace) the gallery session.

        ``start_index`` is clamped into range. An empty photo sequence is
        rejected and leaves the current state untouched.
        """
        if not photos:
            raise EmptyGalleryError("Cannot open a gallery without photos")
        index = min(max(start_index, 0), len(photos) - 1)
        self._session = GallerySession(photos=tuple(photos), index=index, title=title)

    def navigate(self, delta: int) -> int:
        """Move by ``delta`` photos, wrapping around; returns the new index."""
        session = self._require_open()
        length = len(session.photos)
        index = (session.index + delta) % length
        self._session = GallerySession(photos=session.photos, index=index, title=session.title)
        return index

    def next(self) -> int:
        return self.navigate(1)

    def previous(self) -> int:
        return self.navigate(-1)

    def close(self) -> None:
        self._session = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def index(self) -> int:
        return self._require_open().index

    @property
    def photos(self) -> tuple[str, ...]:
        return self._require_open().photos

    @property
    def title(self) -> str:
        return self._require_open().title

    @property
    def current_photo(self) -> str:
        session = self._require_open()
        return session.photos[session.index]

    @property
    def counter(self) -> str:
        """Position label, e.g. ``"2 / 5"``."""
        session = self._require_open()
        return f"{session.index + 1} / {len(session.photos)}"

    def _require_open(self) -> GallerySession:
        if self._session is None:
            raise GalleryClosedError("Gallery is closed")
        return self._session
