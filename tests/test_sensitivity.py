"""Tests for finance/sensitivity.py."""

from __future__ import annotations

import pytest

from stratocost.config import ServiceParameters
from stratocost.engine.coverage import compute_coverage_model
from stratocost.finance.sensitivity import (
    DEFAULT_SWEEPS,
    get_parameter,
    revisit_grid,
    revisit_sweep,
    run_sensitivity,
    with_parameter,
)


def test_with_parameter_leaves_original_untouched(params: ServiceParameters):
    changed = with_parameter(params, "sensor.swath_km", 10.0)
    assert changed.sensor.swath_km == 10.0
    assert params.sensor.swath_km == 7
    assert changed.costs == params.costs


def test_with_parameter_rounds_int_fields(params: ServiceParameters):
    changed = with_parameter(params, "tasking.mission_count", 4.6)
    assert changed.tasking.mission_count == 5


def test_get_parameter(params: ServiceParameters):
    assert get_parameter(params, "reliability.mtbf_hours") == 500.0
    assert get_parameter(params, "revisit_minutes") == 1_440.0


def test_default_sweeps(params: ServiceParameters):
    result = run_sensitivity(params)
    assert result.base_annual_cost == pytest.approx(43_600)
    assert result.base_price == pytest.approx(87_200)
    assert len(result.bars) == len(DEFAULT_SWEEPS)
    deltas = [b.delta_price for b in result.bars]
    assert deltas == sorted(deltas, reverse=True)


def test_overhead_bar(params: ServiceParameters):
    result = run_sensitivity(params, [("Overhead", "costs.annual_fixed_overhead", -0.5, 0.5)])
    bar = result.bars[0]
    assert bar.low_value == pytest.approx(6_000)
    assert bar.high_value == pytest.approx(18_000)
    # overhead passes straight into annual cost; price = cost / 0.5
    assert bar.annual_cost_at_high - bar.annual_cost_at_low == pytest.approx(12_000)
    assert bar.delta_price == pytest.approx(24_000)


def test_revisit_grid():
    grid = revisit_grid(30, 2_880, points=5)
    assert len(grid) == 5
    assert grid[0] == pytest.approx(30)
    assert grid[-1] == pytest.approx(2_880)


def test_revisit_sweep(params: ServiceParameters):
    df = revisit_sweep(params, [1_440, 720, 60])
    assert list(df["revisit_minutes"]) == [1_440, 720, 60]
    assert df.loc[0, "annual_cost"] == pytest.approx(43_600)
    assert df.loc[2, "fleet_size"] == compute_coverage_model(
        params.model_copy(update={"revisit_minutes": 60.0})
    ).fleet_size
    assert df["missions_per_year"].is_monotonic_increasing
