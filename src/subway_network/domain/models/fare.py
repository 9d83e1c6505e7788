"""Fare domain model."""

from dataclasses import dataclass

from subway_network.domain.errors import NegativeFareError


@dataclass(frozen=True, order=True)
class Fare:
    """A non-negative monetary amount."""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeFareError(f"Fare cannot be negative, got {self.value}")

    def plus(self, other: "Fare") -> "Fare":
        return Fare(self.value + other.value)

    def minus(self, other: "Fare") -> "Fare":
        """Subtract another fare.

        Raises:
            NegativeFareError: If the result would be below zero.
        """
        if other.value > self.value:
            raise NegativeFareError(f"Cannot subtract {other.value} from {self.value}")
        return Fare(self.value - other.value)
