"""Sensitivity analysis on the subscription model.

Two views:

  * ``run_sensitivity``: vary one input at a time by ±%, measure the swing
    in annual cost and target annual price.  Bars sorted by price swing
    (tornado chart data).
  * ``revisit_sweep``: annual figures across a grid of revisit times,
    returned as a DataFrame for tables / plots.

Default sweep set:
  - costs.hourly_cost ± 20%
  - costs.fixed_cost_per_mission ± 20%
  - sensor.ground_speed_kmh ± 15%
  - sensor.swath_km ± 15%
  - sensor.coverage_efficiency ± 20%
  - reliability.mtbf_hours ± 30%
  - costs.annual_fixed_overhead ± 25%
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from stratocost.config.parameters import ServiceParameters
from stratocost.engine.coverage import compute_coverage_model


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    param_path: str
    """Dot-path into ServiceParameters (e.g. 'sensor.swath_km')."""

    base_value: float
    low_value: float
    high_value: float

    annual_cost_at_low: float
    annual_cost_at_high: float
    price_at_low: float
    """Target annual price when param = low_value."""
    price_at_high: float

    delta_price: float
    """abs(price_at_high − price_at_low): total swing width."""


@dataclass
class SensitivityResult:
    base_annual_cost: float
    base_price: float
    bars: list[TornadoBar] = field(default_factory=list)


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Hourly cost", "costs.hourly_cost", -0.20, 0.20),
    ("Fixed cost per mission", "costs.fixed_cost_per_mission", -0.20, 0.20),
    ("Ground speed", "sensor.ground_speed_kmh", -0.15, 0.15),
    ("Swath", "sensor.swath_km", -0.15, 0.15),
    ("Coverage efficiency", "sensor.coverage_efficiency", -0.20, 0.20),
    ("MTBF", "reliability.mtbf_hours", -0.30, 0.30),
    ("Annual overhead", "costs.annual_fixed_overhead", -0.25, 0.25),
]


def get_parameter(params: ServiceParameters, path: str) -> float:
    """Read a numeric field via dot-path."""
    current: object = params
    for part in path.split("."):
        current = getattr(current, part)
    return float(current)


def with_parameter(params: ServiceParameters, path: str, value: float) -> ServiceParameters:
    """Return a copy of ``params`` with the dot-path field replaced.

    Models are frozen, so every level along the path is rebuilt with
    ``model_copy``.  Fields typed ``int`` get the value rounded.
    """
    head, _, rest = path.partition(".")
    if not rest:
        field_info = type(params).model_fields.get(head)
        if field_info is not None and field_info.annotation is int:
            value = round(value)
        return params.model_copy(update={head: value})
    child = getattr(params, head)
    return params.model_copy(update={head: with_parameter(child, rest, value)})


def run_sensitivity(
    params: ServiceParameters,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """One-at-a-time sensitivity of annual cost and target price.

    Parameters
    ----------
    params : ServiceParameters
        Base parameters.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps.  None = use DEFAULT_SWEEPS.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by target price swing (descending).
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = compute_coverage_model(params)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        base_val = get_parameter(params, path)
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        low = compute_coverage_model(with_parameter(params, path, low_val))
        high = compute_coverage_model(with_parameter(params, path, high_val))

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            annual_cost_at_low=low.annual_cost,
            annual_cost_at_high=high.annual_cost,
            price_at_low=low.target_annual_price,
            price_at_high=high.target_annual_price,
            delta_price=abs(high.target_annual_price - low.target_annual_price),
        ))

    bars.sort(key=lambda b: b.delta_price, reverse=True)

    return SensitivityResult(
        base_annual_cost=base.annual_cost,
        base_price=base.target_annual_price,
        bars=bars,
    )


def revisit_grid(min_minutes: float, max_minutes: float, points: int = 10) -> np.ndarray:
    """Log-spaced revisit times, shortest first."""
    return np.geomspace(min_minutes, max_minutes, num=points)


def revisit_sweep(params: ServiceParameters, revisit_minutes: Iterable[float]) -> pd.DataFrame:
    """Annual figures of the subscription model for each revisit time.

    Columns: revisit_minutes, revisits_per_year, missions_per_year,
    fleet_size, revisit_feasible, annual_cost, target_annual_price,
    cost_per_km2_per_revisit.
    """
    rows = []
    for revisit in revisit_minutes:
        result = compute_coverage_model(params.model_copy(update={"revisit_minutes": float(revisit)}))
        rows.append({
            "revisit_minutes": result.revisit_minutes,
            "revisits_per_year": result.revisits_per_year,
            "missions_per_year": result.missions_per_year,
            "fleet_size": result.fleet_size,
            "revisit_feasible": result.revisit_feasible,
            "annual_cost": result.annual_cost,
            "target_annual_price": result.target_annual_price,
            "cost_per_km2_per_revisit": result.cost_per_km2_per_revisit,
        })
    return pd.DataFrame(rows)
