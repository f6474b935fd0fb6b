"""Subscription coverage model: continuous revisit over an AOI.

Pipeline (all pure arithmetic, one pass):

  geometry      strips, sweep + reposition = cycle time, slack vs revisit
  demand        revisits/year × area = km² to image per year
  missions      demand / km² imaged per mission
  fleet         missions / (missions one platform flies per year),
                floored by the platforms needed to hold the revisit,
                plus spare buffer
  cost          per-mission cost × missions + annual overhead
  pricing       target-margin price, or the proposed price and its margin
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from stratocost.config.parameters import ServiceParameters
from stratocost.config.parsing import coerce_parameters
from stratocost.engine.geometry import (
    EPSILON,
    MINUTES_PER_YEAR,
    coverage_rate,
    floor_divisor,
    mission_timing,
    reposition_minutes,
    strip_count,
    sweep_minutes,
)
from stratocost.finance.pricing import (
    MIN_PRICE,
    margin_from_price,
    price_from_cost,
    target_margin_is_degenerate,
)
from stratocost.models.results import CoverageResult

logger = logging.getLogger(__name__)

MIN_AVAILABILITY = 0.5
MAX_AVAILABILITY = 0.999
MIN_PLATFORM_CYCLE_DAYS = 0.1


def compute_coverage_model(params: ServiceParameters | Mapping[str, Any]) -> CoverageResult:
    """Size the fleet and price a continuous-coverage subscription.

    Parameters
    ----------
    params : ServiceParameters | Mapping
        Validated parameters, or a flat raw record (parsed in coverage mode).

    Returns
    -------
    CoverageResult
        Fully populated result.

    Raises
    ------
    InvalidParameter
        When a flat record is missing a required field or holds a
        non-numeric / out-of-domain value.
    """
    params = coerce_parameters(params, "coverage")
    aoi, sensor, platform = params.aoi, params.sensor, params.platform
    costs, fleet, reliability = params.costs, params.fleet, params.reliability
    degenerate: list[str] = []

    # ── Geometry ───────────────────────────────────────────────────────
    area = aoi.area_km2
    timing = mission_timing(platform)
    days, hours = timing.duration_days, timing.hours

    rate = coverage_rate(sensor)
    strips = strip_count(aoi, sensor, degenerate)
    t_sweep = sweep_minutes(area, rate, degenerate)
    t_repos = reposition_minutes(aoi, sensor, strips, degenerate)
    t_cycle = t_sweep + t_repos

    revisit = params.revisit_minutes
    slack = revisit - t_cycle

    # ── Annual demand ──────────────────────────────────────────────────
    revisits_per_year = math.ceil(MINUTES_PER_YEAR / revisit)
    annual_demand_km2 = area * revisits_per_year
    coverage_per_mission = rate * max(hours, EPSILON)
    missions_per_year = math.ceil(
        annual_demand_km2 / floor_divisor(coverage_per_mission, "coverage_per_mission", degenerate)
    )

    # ── Fleet sizing ───────────────────────────────────────────────────
    mtbf, mttr = reliability.mtbf_hours, reliability.mttr_hours
    availability = min(
        MAX_AVAILABILITY,
        max(MIN_AVAILABILITY, mtbf / floor_divisor(mtbf + mttr, "availability", degenerate)),
    )
    usable_days = fleet.max_flight_days_per_year * (1 - fleet.maintenance_buffer_fraction)

    if platform.is_relay:
        missions_per_platform = 0
        min_platforms = 1
        base_fleet = 1
        fleet_size = 1
    else:
        platform_cycle_days = floor_divisor(
            days + platform.turnaround_days, "platform_cycle_days", degenerate,
            floor=MIN_PLATFORM_CYCLE_DAYS,
        )
        missions_per_platform = math.floor(usable_days * availability / platform_cycle_days)
        if missions_per_platform < 1:
            degenerate.append("missions_per_platform_per_year")
        min_platforms = math.ceil(t_cycle / revisit)
        base_fleet = max(math.ceil(missions_per_year / max(missions_per_platform, 1)), min_platforms)
        # spare buffer never shrinks the fleet
        spare = max(fleet.spare_buffer_fraction, 0.0)
        fleet_size = max(math.ceil(base_fleet * (1 + spare)), 1)

    # ── Cost ───────────────────────────────────────────────────────────
    cost_per_mission = (
        costs.fixed_cost_per_mission
        + costs.hourly_cost * hours
        + (costs.platform_amortization_per_day + costs.payload_amortization_per_day) * days
        + costs.consumables_per_mission
    )
    annual_cost = missions_per_year * cost_per_mission + costs.annual_fixed_overhead
    cost_per_km2_per_revisit = annual_cost / max(annual_demand_km2, 1)
    cost_per_km2_per_year = annual_cost / max(area, 1)

    # ── Pricing ────────────────────────────────────────────────────────
    margin = params.pricing.target_gross_margin
    if target_margin_is_degenerate(margin):
        degenerate.append("target_gross_margin")
    target_annual_price = price_from_cost(annual_cost, margin)
    target_price_per_mission = price_from_cost(cost_per_mission, margin)

    proposed = params.pricing.proposed_annual_price
    proposed_margin: float | None = None
    if proposed is not None:
        proposed = max(proposed, MIN_PRICE)
        proposed_margin = margin_from_price(proposed, annual_cost)
        chosen_price = proposed
    else:
        chosen_price = target_annual_price

    result = CoverageResult(
        is_relay=platform.is_relay,
        area_km2=area,
        effective_width_km=aoi.effective_width_km,
        duration_days=days,
        hours=hours,
        coverage_rate_km2_per_hour=rate,
        strip_count=strips,
        sweep_minutes=t_sweep,
        reposition_minutes=t_repos,
        cycle_minutes=t_cycle,
        revisit_minutes=revisit,
        slack_minutes=slack,
        revisit_feasible=slack >= 0,
        revisits_per_year=revisits_per_year,
        annual_coverage_demand_km2=annual_demand_km2,
        coverage_per_mission_km2=coverage_per_mission,
        missions_per_year=missions_per_year,
        availability=availability,
        usable_days=usable_days,
        missions_per_platform_per_year=missions_per_platform,
        min_platforms=min_platforms,
        base_fleet_size=base_fleet,
        fleet_size=fleet_size,
        cost_per_mission=cost_per_mission,
        annual_cost=annual_cost,
        cost_per_km2_per_revisit=cost_per_km2_per_revisit,
        cost_per_km2_per_year=cost_per_km2_per_year,
        target_gross_margin=margin,
        target_annual_price=target_annual_price,
        target_price_per_mission=target_price_per_mission,
        proposed_annual_price=proposed,
        proposed_margin=proposed_margin,
        chosen_annual_price=chosen_price,
        chosen_margin=margin_from_price(chosen_price, annual_cost),
        chosen_price_per_km2_per_revisit=chosen_price / max(annual_demand_km2, 1),
        chosen_price_per_km2_per_year=chosen_price / max(area, 1),
        degenerate=degenerate,
    )

    if degenerate:
        logger.warning("Coverage model hit epsilon floors: %s", ", ".join(degenerate))
    logger.debug(
        "Coverage: %d missions/yr, fleet %d, annual cost %.2f, target price %.2f",
        missions_per_year, fleet_size, annual_cost, target_annual_price,
    )
    return result
