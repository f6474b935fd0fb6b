"""Pass geometry shared by both cost models.

Pure arithmetic on the sensor / AOI / platform sections.  Divisors that
can reach zero are floored at ``EPSILON`` and the floored quantity is
appended to the caller's ``degenerate`` list.
"""

from __future__ import annotations

import math

from stratocost.config.aoi import AOIConfig
from stratocost.config.platform import PlatformConfig
from stratocost.config.sensor import SensorConfig
from stratocost.models.results import MissionTiming

EPSILON = 1e-6
MINUTES_PER_YEAR = 525_600
HOURS_PER_DAY = 24.0


def floor_divisor(value: float, name: str, degenerate: list[str], floor: float = EPSILON) -> float:
    """Return ``max(value, floor)``, recording ``name`` when the floor applies."""
    if value < floor:
        degenerate.append(name)
        return floor
    return value


def mission_timing(platform: PlatformConfig) -> MissionTiming:
    """Days and flight hours of one mission.

    Relay duration is floored at one hour (1/24 day) for amortization;
    hourly costs use the actual flight hours.
    """
    if platform.is_relay:
        hours = platform.relay_flight_hours
        return MissionTiming(duration_days=max(hours / HOURS_PER_DAY, 1 / HOURS_PER_DAY), hours=hours)
    days = platform.mission_duration_days
    return MissionTiming(duration_days=days, hours=days * HOURS_PER_DAY)


def coverage_rate(sensor: SensorConfig) -> float:
    """Imaged area per flight hour (km²/h), unclamped."""
    return sensor.swath_km * sensor.ground_speed_kmh * sensor.duty_fraction * sensor.coverage_efficiency


def strip_count(aoi: AOIConfig, sensor: SensorConfig, degenerate: list[str]) -> int:
    """Number of parallel strips needed to cover the AOI width.

    Corridors always need at least one strip; an areal AOI's count follows
    its effective width.
    """
    strip_width = floor_divisor(sensor.swath_km * (1 - sensor.overlap_fraction), "strip_width", degenerate)
    if aoi.shape == "corridor":
        return max(1, math.ceil(aoi.corridor_width_km / strip_width))
    return math.ceil(aoi.effective_width_km / strip_width)


def sweep_minutes(area_km2: float, rate: float, degenerate: list[str]) -> float:
    return (area_km2 / floor_divisor(rate, "coverage_rate", degenerate)) * 60


def reposition_minutes(aoi: AOIConfig, sensor: SensorConfig, strips: int, degenerate: list[str]) -> float:
    """Time spent turning between strips: one half-circle of radius r per strip.

    A single-strip corridor still turns once to come back along the line.
    """
    speed = floor_divisor(sensor.ground_speed_kmh * sensor.nav_efficiency, "reposition_speed", degenerate)
    one_turn = (math.pi * sensor.turn_radius_km) / speed * 60
    if aoi.shape == "corridor" and strips == 1:
        return one_turn
    return ((strips * math.pi * sensor.turn_radius_km) / speed) * 60
