"""Distance domain model."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from subway_network.domain.errors import InvalidDistanceError

METERS_PER_KILOMETER = 1000


@dataclass(frozen=True, order=True)
class Distance:
    """A strictly positive distance in whole meters."""

    meters: int

    def __post_init__(self) -> None:
        if isinstance(self.meters, bool) or not isinstance(self.meters, int):
            raise InvalidDistanceError(f"Distance must be whole meters, got {self.meters!r}")
        if self.meters <= 0:
            raise InvalidDistanceError(f"Distance must be positive, got {self.meters}m")

    @classmethod
    def from_meters(cls, meters: int) -> "Distance":
        """Create a distance from a meter count."""
        return cls(meters)

    @classmethod
    def from_kilometers(cls, kilometers: float) -> "Distance":
        """Create a distance from kilometers, rounded half-up to the nearest meter."""
        if not math.isfinite(kilometers):
            raise InvalidDistanceError(f"Distance must be a finite number, got {kilometers}km")
        meters = (Decimal(str(kilometers)) * METERS_PER_KILOMETER).to_integral_value(
            rounding=ROUND_HALF_UP
        )
        return cls(int(meters))

    @property
    def kilometers(self) -> float:
        return self.meters / METERS_PER_KILOMETER

    def plus(self, other: "Distance") -> "Distance":
        return Distance(self.meters + other.meters)

    def minus(self, other: "Distance") -> "Distance":
        """Subtract another distance.

        Raises:
            InvalidDistanceError: If the remainder would not be positive.
        """
        remainder = self.meters - other.meters
        if remainder <= 0:
            raise InvalidDistanceError(
                f"Cannot subtract {other.meters}m from {self.meters}m: result must be positive"
            )
        return Distance(remainder)

    def __str__(self) -> str:
        return f"{self.meters}m"
