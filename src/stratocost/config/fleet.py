"""Reliability and fleet-constraint configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ReliabilityConfig(BaseModel):
    """Platform reliability: availability = MTBF / (MTBF + MTTR)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    mtbf_hours: float = Field(default=500.0, description="Mean time between failures (hours)")
    mttr_hours: float = Field(default=20.0, description="Mean time to repair (hours)")


class FleetConfig(BaseModel):
    """Annual flying limits and buffers applied when sizing the fleet."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    max_flight_days_per_year: float = Field(
        default=200.0,
        description="Flyable days per platform per year (weather, regulation).",
    )
    maintenance_buffer_fraction: float = Field(
        default=0.25,
        description="Share of flyable days reserved for scheduled maintenance [0, 1).",
    )
    spare_buffer_fraction: float = Field(
        default=0.15,
        description="Extra platforms on top of the base fleet (0.15 = +15%).",
    )
