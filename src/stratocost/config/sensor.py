"""Sensor / navigation configuration."""

from pydantic import BaseModel, ConfigDict, Field


class SensorConfig(BaseModel):
    """Imaging payload and pass geometry inputs."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    swath_km: float = Field(default=7.0, description="Ground width of one imaging strip (km)")
    ground_speed_kmh: float = Field(default=40.0, description="Ground speed while imaging (km/h)")
    duty_fraction: float = Field(default=0.75, description="Fraction of flight time actively imaging (0–1)")
    coverage_efficiency: float = Field(
        default=0.5,
        description="Derating for geometric / operational losses (0–1)",
    )
    overlap_fraction: float = Field(
        default=0.2,
        description=(
            "Overlap between adjacent strips [0, 1). At 1 or above the strip width is "
            "floored at epsilon and the strip count explodes (flagged strip_width)."
        ),
    )
    turn_radius_km: float = Field(default=5.0, description="Turn radius between strips (km)")
    nav_efficiency: float = Field(default=0.8, description="Navigation efficiency during repositioning (0–1]")
