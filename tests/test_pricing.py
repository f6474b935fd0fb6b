"""Tests for finance/pricing.py."""

from __future__ import annotations

import pytest

from stratocost.finance.pricing import margin_from_price, price_from_cost, target_margin_is_degenerate


def test_price_from_cost():
    assert price_from_cost(7_900, 0.5) == pytest.approx(15_800)
    assert price_from_cost(1_000, 0.0) == pytest.approx(1_000)


@pytest.mark.parametrize("margin", [0.0, 0.1, 0.35, 0.5, 0.8, 0.95])
@pytest.mark.parametrize("cost", [1.0, 7_900.0, 43_600.0, 2.5e6])
def test_margin_round_trip(cost: float, margin: float):
    assert margin_from_price(price_from_cost(cost, margin), cost) == pytest.approx(margin)


def test_margin_at_or_above_one_is_clamped():
    # 1 − GM floored at 0.01 → price = 100 × cost
    assert price_from_cost(100, 1.0) == pytest.approx(10_000)
    assert price_from_cost(100, 1.5) == pytest.approx(10_000)
    assert target_margin_is_degenerate(1.0)
    assert not target_margin_is_degenerate(0.5)


def test_margin_from_price():
    assert margin_from_price(100, 60) == pytest.approx(0.4)
    assert margin_from_price(50, 60) == pytest.approx(-0.2)


def test_non_positive_price_is_floored():
    # price floored at 0.01
    assert margin_from_price(0, 1) == pytest.approx((0.01 - 1) / 0.01)
    assert margin_from_price(-5, 0) == pytest.approx(1.0)
