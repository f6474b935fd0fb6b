"""Pricing policy: cost ↔ price conversions at a gross margin.

Gross margin GM = (price − cost) / price, so price = cost / (1 − GM).
Both conversions clamp their divisor so no input can divide by zero:

  price_from_cost:   1 − GM floored at 0.01   (GM ≥ 0.99 behaves as 0.99)
  margin_from_price: price floored at 0.01    (non-positive proposals)
"""

from __future__ import annotations

MIN_MARGIN_COMPLEMENT = 0.01
MIN_PRICE = 0.01


def price_from_cost(cost: float, target_margin: float) -> float:
    """Price that yields ``target_margin`` on ``cost``."""
    return cost / max(1.0 - target_margin, MIN_MARGIN_COMPLEMENT)


def margin_from_price(price: float, cost: float) -> float:
    """Realized gross margin of selling at ``price``."""
    price = max(price, MIN_PRICE)
    return (price - cost) / price


def target_margin_is_degenerate(target_margin: float) -> bool:
    """True when ``price_from_cost`` had to clamp the margin."""
    return 1.0 - target_margin < MIN_MARGIN_COMPLEMENT
