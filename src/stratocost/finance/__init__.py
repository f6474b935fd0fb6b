"""Finance: pricing policy, quotes, sensitivity analysis."""

from stratocost.finance.pricing import margin_from_price, price_from_cost
from stratocost.finance.quotes import Quote, build_quote, summarize_quotes

__all__ = [
    "price_from_cost",
    "margin_from_price",
    "Quote",
    "build_quote",
    "summarize_quotes",
]
