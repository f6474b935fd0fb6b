"""Tasking model: a batch of discrete missions under one operating profile.

No revisit constraint and no fleet sizing: each mission is costed on its
own and the batch is ``mission_count`` identical missions.

CAPEX amortization uses the catalog default platform / payload cost and
life, not the values in ``params.costs``.  Per-call CAPEX overrides
therefore only affect the subscription model.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from stratocost.config.costs import CostConfig
from stratocost.config.parameters import ServiceParameters
from stratocost.config.parsing import coerce_parameters, parse_mission_count
from stratocost.config.profiles import ProfileKey, resolve_profile
from stratocost.engine.geometry import HOURS_PER_DAY, coverage_rate, floor_divisor, mission_timing
from stratocost.errors import InvalidParameter
from stratocost.finance.pricing import (
    MIN_PRICE,
    margin_from_price,
    price_from_cost,
    target_margin_is_degenerate,
)
from stratocost.models.results import TaskingResult

logger = logging.getLogger(__name__)

_CATALOG_COSTS = CostConfig()
CATALOG_AMORTIZATION_PER_DAY = (
    _CATALOG_COSTS.platform_amortization_per_day + _CATALOG_COSTS.payload_amortization_per_day
)


def compute_tasking_model(
    params: ServiceParameters | Mapping[str, Any],
    mission_count: Any = None,
    profile_key: str | ProfileKey | None = None,
) -> TaskingResult:
    """Cost and price ``mission_count`` missions flown under ``profile_key``.

    Parameters
    ----------
    params : ServiceParameters | Mapping
        Validated parameters, or a flat raw record (parsed in tasking mode).
    mission_count : int | str | None
        Missions in the batch.  None = ``params.tasking.mission_count``.
        Non-numeric values count as 0.
    profile_key : str | ProfileKey | None
        Operating profile.  None = ``params.tasking.profile``; unknown
        keys fall back to standard.

    Raises
    ------
    InvalidParameter
        Negative mission count, or an invalid flat record.
    """
    params = coerce_parameters(params, "tasking")
    count = params.tasking.mission_count if mission_count is None else parse_mission_count(mission_count)
    if count < 0:
        raise InvalidParameter("mission_count", f"must be >= 0, got {count}")
    profile = resolve_profile(params.tasking.profile if profile_key is None else profile_key)
    costs = params.costs
    degenerate: list[str] = []

    # ── Duration ───────────────────────────────────────────────────────
    base = mission_timing(params.platform)
    days = base.duration_days * profile.duration_multiplier
    hours = days * HOURS_PER_DAY

    # ── Cost ───────────────────────────────────────────────────────────
    cost_per_mission = (
        costs.fixed_cost_per_mission * profile.fixed_cost_multiplier
        + costs.hourly_cost * profile.hourly_cost_multiplier * hours
        + CATALOG_AMORTIZATION_PER_DAY * days
        + costs.consumables_per_mission * profile.consumables_multiplier
    )
    batch_cost = count * cost_per_mission

    rate = coverage_rate(params.sensor)
    coverage_per_mission = rate * hours
    km2_divisor = floor_divisor(coverage_per_mission, "coverage_per_mission", degenerate)

    # ── Pricing ────────────────────────────────────────────────────────
    margin = params.pricing.target_gross_margin
    if target_margin_is_degenerate(margin):
        degenerate.append("target_gross_margin")
    target_price = price_from_cost(cost_per_mission, margin)

    proposed = params.pricing.proposed_price_per_mission
    has_proposed = proposed is not None
    proposed_batch: float | None = None
    proposed_margin: float | None = None
    proposed_batch_margin: float | None = None
    if has_proposed:
        proposed = max(proposed, MIN_PRICE)
        proposed_batch = proposed * count
        proposed_margin = margin_from_price(proposed, cost_per_mission)
        proposed_batch_margin = (
            margin_from_price(proposed_batch, batch_cost) if count > 0 else proposed_margin
        )

    chosen_price = proposed if has_proposed else target_price
    chosen_batch = chosen_price * count
    chosen_margin = margin_from_price(chosen_price, cost_per_mission)
    chosen_batch_margin = margin_from_price(chosen_batch, batch_cost) if count > 0 else chosen_margin

    if degenerate:
        logger.warning("Tasking model hit epsilon floors: %s", ", ".join(degenerate))
    logger.debug(
        "Tasking: %d × %s missions, cost/mission %.2f, batch price %.2f",
        count, profile.key.value, cost_per_mission, chosen_batch,
    )

    return TaskingResult(
        is_relay=params.platform.is_relay,
        profile=profile.key.value,
        mission_count=count,
        duration_days=days,
        hours=hours,
        coverage_rate_km2_per_hour=rate,
        coverage_per_mission_km2=coverage_per_mission,
        cost_per_mission=cost_per_mission,
        batch_cost=batch_cost,
        cost_per_km2=cost_per_mission / km2_divisor,
        target_gross_margin=margin,
        target_price_per_mission=target_price,
        target_batch_price=target_price * count,
        has_proposed_price=has_proposed,
        proposed_price_per_mission=proposed,
        proposed_batch_price=proposed_batch,
        proposed_margin=proposed_margin,
        proposed_batch_margin=proposed_batch_margin,
        chosen_price_per_mission=chosen_price,
        chosen_batch_price=chosen_batch,
        chosen_margin=chosen_margin,
        chosen_batch_margin=chosen_batch_margin,
        chosen_price_per_km2=chosen_price / km2_divisor,
        degenerate=degenerate,
    )
