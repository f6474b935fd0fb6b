"""stratocost: coverage and tasking cost engine for stratospheric imaging services."""

import logging

from stratocost.config import ServiceParameters, parse_service_parameters
from stratocost.engine import compute_coverage_model, compute_tasking_model
from stratocost.errors import InvalidParameter
from stratocost.models import CoverageResult, TaskingResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ServiceParameters",
    "parse_service_parameters",
    "compute_coverage_model",
    "compute_tasking_model",
    "CoverageResult",
    "TaskingResult",
    "InvalidParameter",
]
