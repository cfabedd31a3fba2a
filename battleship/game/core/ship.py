"""Ship hit tracking."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidShipLength(ValueError):
    """Raised when a ship is created with a non-positive or non-integer length."""


@dataclass(slots=True, eq=False)
class Ship:
    """A ship of fixed length accumulating hits up to that length."""

    length: int
    hits: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidShipLength(f"Ship length must be an integer, got {self.length!r}.")
        if self.length <= 0:
            raise InvalidShipLength(f"Ship length must be positive, got {self.length}.")
        if not 0 <= self.hits <= self.length:
            raise ValueError(f"Ship hits must be within 0..{self.length}, got {self.hits}.")

    @property
    def is_sunk(self) -> bool:
        return self.hits >= self.length

    def register_hit(self) -> None:
        """Record one hit; a sunk ship stays saturated."""
        if self.hits < self.length:
            self.hits += 1
