"""Top-level parameter bundle: everything one computation needs."""

from pydantic import BaseModel, ConfigDict, Field

from stratocost.config.aoi import AOIConfig
from stratocost.config.costs import CostConfig
from stratocost.config.fleet import FleetConfig, ReliabilityConfig
from stratocost.config.platform import PlatformConfig
from stratocost.config.pricing import PricingConfig
from stratocost.config.sensor import SensorConfig
from stratocost.config.tasking import TaskingConfig


class ServiceParameters(BaseModel):
    """Complete, immutable input record for both cost models.

    Every section carries its own defaults, so ``ServiceParameters()`` is
    the reference 181.8 km² daily-revisit scenario.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    aoi: AOIConfig = Field(default_factory=AOIConfig)
    revisit_minutes: float = Field(
        default=1_440.0, gt=0,
        description="Maximum time between two passes over the AOI (subscription mode).",
    )
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    sensor: SensorConfig = Field(default_factory=SensorConfig)
    reliability: ReliabilityConfig = Field(default_factory=ReliabilityConfig)
    fleet: FleetConfig = Field(default_factory=FleetConfig)
    costs: CostConfig = Field(default_factory=CostConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    tasking: TaskingConfig = Field(default_factory=TaskingConfig)
