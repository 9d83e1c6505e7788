"""Tests for the Fare value type and the distance fare policy."""

import pytest

from subway_network.domain.errors import InvalidDistanceError, NegativeFareError
from subway_network.domain.models import Distance, Fare, distance_fare


def test_fare_defaults_to_zero() -> None:
    """Given no value, when creating a Fare, then it is zero."""
    assert Fare().value == 0


def test_fare_rejects_negative_value() -> None:
    """Given a negative amount, when creating a Fare, then NegativeFareError is raised."""
    with pytest.raises(NegativeFareError):
        Fare(-1)


def test_fare_plus() -> None:
    """Given two fares, when adding them, then the amounts are summed."""
    assert Fare(1250).plus(Fare(900)) == Fare(2150)


def test_fare_minus() -> None:
    """Given a larger and a smaller fare, when subtracting, then the difference is returned."""
    assert Fare(1250).minus(Fare(250)) == Fare(1000)
    assert Fare(1250).minus(Fare(1250)) == Fare(0)


def test_fare_minus_rejects_negative_result() -> None:
    """Given a subtrahend larger than the fare, when subtracting, then NegativeFareError is raised."""
    with pytest.raises(NegativeFareError):
        Fare(100).minus(Fare(101))


@pytest.mark.parametrize(
    ("distance", "expected"),
    [
        (9, 1250),
        (10, 1250),
        (11, 1350),
        (15.1, 1450),
        (16, 1450),
        (49, 2050),
        (50, 2050),
        (51, 2150),
        (58, 2150),
        (59, 2250),
    ],
)
def test_fare_calculator(distance: float, expected: int) -> None:
    """Given a distance in km, when calculating the fare, then the tiered fare is returned."""
    fare_calculator = distance_fare.fare_calculator()

    assert fare_calculator(distance).value == expected


def test_fare_calculator_rounds_tiers_up() -> None:
    """Given a distance just past a tier boundary, when calculating, then a whole tier is charged."""
    assert distance_fare.calculate(10.001).value == 1350
    assert distance_fare.calculate(50.001).value == 2150


def test_fare_for_distance_uses_kilometers() -> None:
    """Given a Distance in meters, when calculating the fare, then it is converted to km."""
    assert distance_fare.for_distance(Distance(15100)) == Fare(1450)
    assert distance_fare.for_distance(Distance(10000)) == Fare(1250)


@pytest.mark.parametrize("distance", [float("inf"), float("-inf"), float("nan")])
def test_fare_calculator_rejects_non_finite_distance(distance: float) -> None:
    """Given an infinite or NaN distance, when calculating, then InvalidDistanceError is raised."""
    with pytest.raises(InvalidDistanceError):
        distance_fare.calculate(distance)
