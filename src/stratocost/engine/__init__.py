"""Engine: deterministic coverage and tasking cost models."""

from stratocost.engine.coverage import compute_coverage_model
from stratocost.engine.tasking import compute_tasking_model

__all__ = [
    "compute_coverage_model",
    "compute_tasking_model",
]
