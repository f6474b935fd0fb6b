"""Result models: cost model output contracts."""

from stratocost.models.results import (
    CoverageResult,
    MissionTiming,
    PlatformQuoteStats,
    QuoteSummary,
    TaskingResult,
)

__all__ = [
    "CoverageResult",
    "MissionTiming",
    "PlatformQuoteStats",
    "QuoteSummary",
    "TaskingResult",
]
