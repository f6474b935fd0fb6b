"""Cost inputs: per-mission, hourly, CAPEX amortization, annual overhead."""

from pydantic import BaseModel, ConfigDict, Field


class CostConfig(BaseModel):
    """All cost inputs in EUR.

    CAPEX is amortized per mission day: ``capex / life_days × duration_days``.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    fixed_cost_per_mission: float = Field(default=2_500.0, description="Launch / recovery / crew per mission")
    hourly_cost: float = Field(default=25.0, description="Operating cost per flight hour")
    platform_capex: float = Field(default=20_000.0, description="Platform purchase cost")
    platform_life_days: float = Field(default=800.0, description="Platform service life (flight days)")
    payload_capex: float = Field(default=90_000.0, description="Payload purchase cost")
    payload_life_days: float = Field(default=1_200.0, description="Payload service life (flight days)")
    consumables_per_mission: float = Field(default=500.0, description="Gas, ballast, batteries per mission")
    annual_fixed_overhead: float = Field(
        default=12_000.0,
        description="Annual costs independent of mission count (cloud processing, licences).",
    )

    @property
    def platform_amortization_per_day(self) -> float:
        return self.platform_capex / max(self.platform_life_days, 1.0)

    @property
    def payload_amortization_per_day(self) -> float:
        return self.payload_capex / max(self.payload_life_days, 1.0)
