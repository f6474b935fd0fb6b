"""Quotes: a priced offer captured from a model result, plus summary stats.

A ``Quote`` is the flat record a caller keeps in its own history store;
``summarize_quotes`` gives the quick statistics shown over that history.
Storage and export are up to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from stratocost.config.parameters import ServiceParameters
from stratocost.models.results import (
    CoverageResult,
    PlatformQuoteStats,
    QuoteSummary,
    TaskingResult,
)


class Quote(BaseModel):
    """One priced offer.

    ``price`` and ``total_cost`` are annual for subscriptions and for the
    whole batch for tasking.
    """

    model_config = ConfigDict(frozen=True)

    quote_id: str
    created_at: datetime
    client_name: str = "Client"
    aoi_name: str = "AOI"
    mode: Literal["coverage", "tasking"]
    platform: str
    profile: str | None = None
    mission_count: int | None = None
    area_km2: float
    revisit_minutes: float | None = None
    hours_per_mission: float
    strip_count: int | None = None
    cost_per_mission: float
    total_cost: float
    price: float
    margin: float | None = Field(default=None, description="Gross margin of the quoted price")


def build_quote(
    params: ServiceParameters,
    result: CoverageResult | TaskingResult,
    client_name: str = "Client",
    quote_id: str | None = None,
    created_at: datetime | None = None,
) -> Quote:
    """Capture a result as a Quote.  ``quote_id`` defaults to ``q_<epoch ms>``."""
    created_at = created_at or datetime.now(timezone.utc)
    if quote_id is None:
        quote_id = f"q_{int(created_at.timestamp() * 1000)}"

    common = dict(
        quote_id=quote_id,
        created_at=created_at,
        client_name=client_name,
        aoi_name=params.aoi.name,
        platform=params.platform.kind,
        area_km2=params.aoi.area_km2,
        hours_per_mission=result.hours,
        cost_per_mission=result.cost_per_mission,
    )
    if isinstance(result, CoverageResult):
        return Quote(
            **common,
            mode="coverage",
            revisit_minutes=result.revisit_minutes,
            strip_count=result.strip_count,
            total_cost=result.annual_cost,
            price=result.chosen_annual_price,
            margin=result.chosen_margin,
        )
    return Quote(
        **common,
        mode="tasking",
        profile=result.profile,
        mission_count=result.mission_count,
        total_cost=result.batch_cost,
        price=result.chosen_batch_price,
        margin=result.chosen_margin,
    )


def summarize_quotes(quotes: Iterable[Quote]) -> QuoteSummary:
    """Count, mean price / cost / margin and per-platform totals."""
    quotes = list(quotes)
    if not quotes:
        return QuoteSummary(count=0, avg_price=0.0, avg_cost=0.0, avg_margin=0.0)

    margins = [q.margin for q in quotes if q.margin is not None]
    by_platform: dict[str, PlatformQuoteStats] = {}
    for q in quotes:
        stats = by_platform.setdefault(q.platform, PlatformQuoteStats())
        stats.count += 1
        stats.total_price += q.price
        stats.total_cost += q.total_cost

    return QuoteSummary(
        count=len(quotes),
        avg_price=sum(q.price for q in quotes) / len(quotes),
        avg_cost=sum(q.total_cost for q in quotes) / len(quotes),
        avg_margin=sum(margins) / len(margins) if margins else 0.0,
        by_platform=by_platform,
    )
