"""Bounded compare set of property ids."""

from enum import Enum

from immo_catalog.exceptions import CompareCapacityError
from immo_catalog.logging import get_logger

logger = get_logger(__name__)


class CompareResult(str, Enum):
    ADDED = "ADDED"
    REMOVED = "REMOVED"


class CompareSet:
    """Ordered selection of at most ``capacity`` distinct property ids.

    Membership is toggled; a full set rejects new ids instead of evicting
    an existing one.
    """

    def __init__(self, capacity: int = 3) -> None:
        self.capacity = capacity
        self._ids: list[str] = []

    def toggle(self, property_id: str) -> CompareResult:
        """Remove ``property_id`` if present, otherwise append it.

        Parameters
        ----------
        property_id : str
            Listing to toggle.

        Returns
        -------
        CompareResult
            ``REMOVED`` or ``ADDED``.

        Raises
        ------
        CompareCapacityError
            If the id is new and the set is full. The set is unchanged.
        """
        if property_id in self._ids:
            self._ids.remove(property_id)
            logger.debug("Removed %s from compare set (%d/%d)", property_id, len(self), self.capacity)
            return CompareResult.REMOVED

        if len(self._ids) >= self.capacity:
            raise CompareCapacityError(f"Compare set is full (maximum {self.capacity} properties)")

        self._ids.append(property_id)
        logger.debug("Added %s to compare set (%d/%d)", property_id, len(self), self.capacity)
        return CompareResult.ADDED

    def contains(self, property_id: str) -> bool:
        return property_id in self._ids

    def size(self) -> int:
        return len(self._ids)

    def clear(self) -> None:
        self._ids.clear()

    @property
    def ids(self) -> tuple[str, ...]:
        """Ids in insertion order."""
        return tuple(self._ids)

    @property
    def is_full(self) -> bool:
        return len(self._ids) >= self.capacity

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
