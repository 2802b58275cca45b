"""Tunable settings for building and querying boundaries."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache

from nanoshapes._constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_PRECISION,
    GUARD_DIGITS,
    MIN_PRECISION,
)


@lru_cache(maxsize=None)
def _defaults(cls: type) -> dict:
    return {
        f.name: f.default
        for f in dataclasses.fields(cls)
        if f.default is not dataclasses.MISSING
    }


@dataclass(frozen=True)
class BuildOptions:
    """Settings shared by shape construction and batched queries.

    Attributes:
        precision: Decimal digits of the exact predicate.
        guard_digits: Extra digits carried in arithmetic beyond
            *precision*.
        max_workers: Threads used by batched evaluation.  ``None``
            lets :class:`concurrent.futures.ThreadPoolExecutor` choose.
        batch_size: Points handed to each worker at a time.
        screen_with_floats: Whether batched evaluation first classifies
            points with a float64 pass and only sends points near a
            face plane through the exact predicate.
    """

    precision: int = DEFAULT_PRECISION
    guard_digits: int = GUARD_DIGITS
    max_workers: int | None = None
    batch_size: int = DEFAULT_BATCH_SIZE
    screen_with_floats: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(
                f"precision must be an integer, got {self.precision!r}"
            )
        if self.precision < MIN_PRECISION:
            raise ValueError(
                f"precision must be >= {MIN_PRECISION}, got {self.precision}"
            )
        if not isinstance(self.guard_digits, int) or self.guard_digits < 0:
            raise ValueError(
                f"guard_digits must be a non-negative integer, "
                f"got {self.guard_digits!r}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(
                f"max_workers must be >= 1, got {self.max_workers}"
            )
        if self.batch_size < 1:
            raise ValueError(
                f"batch_size must be >= 1, got {self.batch_size}"
            )

    @property
    def working_digits(self) -> int:
        return self.precision + self.guard_digits

    def to_dict(self) -> dict:
        """Serialise to a dictionary, omitting fields at their defaults."""
        return {
            name: getattr(self, name)
            for name, default in _defaults(type(self)).items()
            if getattr(self, name) != default
        }

    @classmethod
    def from_dict(cls, d: dict) -> BuildOptions:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        known = _defaults(cls)
        unknown = set(d) - set(known)
        if unknown:
            raise ValueError(
                f"unknown option(s): {', '.join(sorted(unknown))}"
            )
        return cls(**d)
