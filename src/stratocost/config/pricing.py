"""Pricing inputs: target margin and optional user-proposed prices."""

from pydantic import BaseModel, ConfigDict, Field


class PricingConfig(BaseModel):
    """Target gross margin plus the prices a sales rep may propose.

    A proposed price, when present, becomes the chosen price and its
    realized margin is reported instead of the target.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    target_gross_margin: float = Field(
        default=0.5,
        description="Target GM = (price − cost) / price, expected in [0, 1). "
                    "Values ≥ 0.99 are clamped when converting cost to price.",
    )
    proposed_annual_price: float | None = Field(
        default=None,
        description="Subscription price offered to the client (EUR/year). None = use target.",
    )
    proposed_price_per_mission: float | None = Field(
        default=None,
        description="Tasking price offered per mission (EUR). None = use target.",
    )
