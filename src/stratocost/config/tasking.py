"""Tasking-mode inputs."""

from pydantic import BaseModel, ConfigDict, Field

from stratocost.config.profiles import ProfileKey


class TaskingConfig(BaseModel):
    """Number of discrete missions in the batch and their operating profile."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    mission_count: int = Field(default=6, ge=0, description="Missions in the batch")
    profile: ProfileKey = Field(default=ProfileKey.STANDARD, description="Operating profile")
