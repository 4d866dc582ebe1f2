"""Base generator class for mock catalog data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: a Faker instance and a private
    ``random.Random`` both seeded for reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``fr_FR``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "fr_FR",
    ) -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
