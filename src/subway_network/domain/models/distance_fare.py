"""Distance-based fare policy.

Up to 10 km costs the base fare. Between 10 and 50 km every started 5 km adds
100, and beyond 50 km every started 8 km adds 100.
"""

import math
from collections.abc import Callable

from subway_network.domain.errors import InvalidDistanceError
from subway_network.domain.models.distance import Distance
from subway_network.domain.models.fare import Fare

BASE_FARE = 1250
SURCHARGE_PER_TIER = 100

BASE_LIMIT_KM = 10
MIDDLE_LIMIT_KM = 50
MIDDLE_TIER_KM = 5
LONG_TIER_KM = 8

# Full surcharge for 10-50 km (eight 5 km tiers)
MIDDLE_MAX_SURCHARGE = (MIDDLE_LIMIT_KM - BASE_LIMIT_KM) // MIDDLE_TIER_KM * SURCHARGE_PER_TIER


def _tiers(distance_km: float, tier_km: int) -> int:
    return math.ceil(distance_km / tier_km)


def calculate(distance_km: float) -> Fare:
    """Return the fare for travelling ``distance_km`` kilometers.

    Raises:
        InvalidDistanceError: If the distance is not a finite number.
    """
    if not math.isfinite(distance_km):
        raise InvalidDistanceError(
            f"Distance must be a finite number of kilometers, got {distance_km}"
        )
    if distance_km <= BASE_LIMIT_KM:
        return Fare(BASE_FARE)
    if distance_km <= MIDDLE_LIMIT_KM:
        surcharge = _tiers(distance_km - BASE_LIMIT_KM, MIDDLE_TIER_KM) * SURCHARGE_PER_TIER
        return Fare(BASE_FARE + surcharge)
    surcharge = _tiers(distance_km - MIDDLE_LIMIT_KM, LONG_TIER_KM) * SURCHARGE_PER_TIER
    return Fare(BASE_FARE + MIDDLE_MAX_SURCHARGE + surcharge)


def for_distance(distance: Distance) -> Fare:
    return calculate(distance.kilometers)


def fare_calculator() -> Callable[[float], Fare]:
    """Return the distance (km) to fare function."""
    return calculate
