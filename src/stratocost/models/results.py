"""Result types: the contract between the cost models and their callers.

Results are frozen and always fully populated: a computation either
returns every field for its mode or raises ``InvalidParameter``.

``degenerate`` lists the quantities whose divisor was floored at its
epsilon (e.g. a zero coverage rate).  The numbers are still finite, but
callers should not treat them as physically meaningful.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════
# Shared geometry
# ═══════════════════════════════════════════════════════════════════════════

class MissionTiming(BaseModel):
    """Duration of one mission, in days and flight hours."""

    model_config = ConfigDict(frozen=True)

    duration_days: float
    """Stratostat: mission_duration_days.  Relay: max(hours / 24, 1 / 24)."""

    hours: float
    """Flight hours per mission."""


# ═══════════════════════════════════════════════════════════════════════════
# Subscription (continuous coverage)
# ═══════════════════════════════════════════════════════════════════════════

class CoverageResult(BaseModel):
    """Everything the subscription model derives from one ServiceParameters."""

    model_config = ConfigDict(frozen=True)

    is_relay: bool

    # --- Geometry ---
    area_km2: float
    effective_width_km: float
    """Across-track width used for areal strip count (sqrt(area) if not given)."""
    duration_days: float
    hours: float
    coverage_rate_km2_per_hour: float
    """swath × speed × duty × efficiency."""
    strip_count: int
    sweep_minutes: float
    """Time imaging the AOI once = area / coverage rate × 60."""
    reposition_minutes: float
    """Turn time between strips = n × π × r / (v × η) × 60."""
    cycle_minutes: float
    """sweep + reposition = one complete pass."""
    revisit_minutes: float
    slack_minutes: float
    """revisit − cycle.  Negative = one platform cannot hold the revisit."""
    revisit_feasible: bool

    # --- Annual demand ---
    revisits_per_year: int
    annual_coverage_demand_km2: float
    coverage_per_mission_km2: float
    missions_per_year: int

    # --- Fleet sizing ---
    availability: float
    """MTBF / (MTBF + MTTR) clamped to [0.5, 0.999]."""
    usable_days: float
    missions_per_platform_per_year: int
    """0 for relay platforms (no standing fleet)."""
    min_platforms: int
    """ceil(cycle / revisit): platforms needed to hold the revisit at all."""
    base_fleet_size: int
    fleet_size: int
    """Base fleet plus spare buffer.  Always ≥ min_platforms and ≥ 1."""

    # --- Cost ---
    cost_per_mission: float
    annual_cost: float
    cost_per_km2_per_revisit: float
    cost_per_km2_per_year: float

    # --- Pricing ---
    target_gross_margin: float
    target_annual_price: float
    target_price_per_mission: float
    proposed_annual_price: float | None = None
    proposed_margin: float | None = None
    """Realized margin of the proposed annual price, if one was given."""
    chosen_annual_price: float
    """Proposed price when given, otherwise the target-margin price."""
    chosen_margin: float
    chosen_price_per_km2_per_revisit: float
    chosen_price_per_km2_per_year: float

    degenerate: list[str] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Tasking (discrete missions)
# ═══════════════════════════════════════════════════════════════════════════

class TaskingResult(BaseModel):
    """Per-mission and batch cost / price for a set of tasked missions."""

    model_config = ConfigDict(frozen=True)

    is_relay: bool
    profile: str
    mission_count: int

    duration_days: float
    """Base duration × profile duration multiplier."""
    hours: float
    coverage_rate_km2_per_hour: float
    coverage_per_mission_km2: float

    cost_per_mission: float
    batch_cost: float
    cost_per_km2: float

    target_gross_margin: float
    target_price_per_mission: float
    target_batch_price: float

    has_proposed_price: bool
    proposed_price_per_mission: float | None = None
    proposed_batch_price: float | None = None
    proposed_margin: float | None = None
    proposed_batch_margin: float | None = None

    chosen_price_per_mission: float
    chosen_batch_price: float
    chosen_margin: float
    chosen_batch_margin: float
    chosen_price_per_km2: float

    degenerate: list[str] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Quotes
# ═══════════════════════════════════════════════════════════════════════════

class PlatformQuoteStats(BaseModel):
    """Aggregates of the quotes for one platform kind."""

    count: int = 0
    total_price: float = 0.0
    total_cost: float = 0.0


class QuoteSummary(BaseModel):
    """Quick statistics over a list of saved quotes."""

    count: int
    avg_price: float
    avg_cost: float
    avg_margin: float
    """Mean over quotes that carry a margin; 0 if none do."""
    by_platform: dict[str, PlatformQuoteStats] = Field(default_factory=dict)
