"""Platform configuration: mission timing for standing fleets and relays."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PlatformConfig(BaseModel):
    """Which platform flies the service and how long one mission lasts.

    A stratostat stays aloft for ``mission_duration_days`` then needs
    ``turnaround_days`` on the ground.  A relay flies single discrete
    flights of ``relay_flight_hours`` and is never sized as a fleet.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: Literal["stratostat", "relay"] = Field(
        default="stratostat",
        description="'stratostat' = standing fleet with turnaround cycles; "
                    "'relay' = single discrete flights, fleet fixed at 1.",
    )
    mission_duration_days: float = Field(default=7.0, description="Days aloft per mission (stratostat)")
    relay_flight_hours: float = Field(default=6.0, description="Hours per relay flight")
    turnaround_days: float = Field(default=1.0, description="Ground time between missions (days)")

    @property
    def is_relay(self) -> bool:
        return self.kind == "relay"
