"""Configuration models: every input of both cost models."""

from stratocost.config.aoi import AOI_PRESETS, AOIConfig, get_aoi_preset, slugify
from stratocost.config.costs import CostConfig
from stratocost.config.fleet import FleetConfig, ReliabilityConfig
from stratocost.config.parameters import ServiceParameters
from stratocost.config.parsing import (
    load_service_parameters,
    parse_decimal,
    parse_mission_count,
    parse_service_parameters,
)
from stratocost.config.platform import PlatformConfig
from stratocost.config.pricing import PricingConfig
from stratocost.config.profiles import PROFILES, OperatingProfile, ProfileKey, resolve_profile
from stratocost.config.sensor import SensorConfig
from stratocost.config.tasking import TaskingConfig

__all__ = [
    "AOIConfig",
    "AOI_PRESETS",
    "get_aoi_preset",
    "slugify",
    "PlatformConfig",
    "SensorConfig",
    "ReliabilityConfig",
    "FleetConfig",
    "CostConfig",
    "PricingConfig",
    "TaskingConfig",
    "ProfileKey",
    "OperatingProfile",
    "PROFILES",
    "resolve_profile",
    "ServiceParameters",
    "parse_decimal",
    "parse_mission_count",
    "parse_service_parameters",
    "load_service_parameters",
]
