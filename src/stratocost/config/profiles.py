"""Tasking operating profiles: multiplier bundles applied to a baseline mission.

The catalog is closed: ``standard``, ``long`` and ``express``.  Lookup is
total, any unknown key resolves to ``standard``.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ProfileKey(str, Enum):
    STANDARD = "standard"
    LONG = "long"
    EXPRESS = "express"


class OperatingProfile(BaseModel):
    """Multipliers on duration, fixed cost, hourly cost and consumables."""

    model_config = ConfigDict(frozen=True)

    key: ProfileKey
    name: str
    duration_multiplier: float = Field(default=1.0, description="Scales mission duration (and hours)")
    fixed_cost_multiplier: float = Field(default=1.0, description="Scales fixed cost per mission")
    hourly_cost_multiplier: float = Field(default=1.0, description="Scales hourly operating cost")
    consumables_multiplier: float = Field(default=1.0, description="Scales consumables per mission")


PROFILES: MappingProxyType[ProfileKey, OperatingProfile] = MappingProxyType({
    ProfileKey.STANDARD: OperatingProfile(key=ProfileKey.STANDARD, name="Standard"),
    ProfileKey.LONG: OperatingProfile(
        key=ProfileKey.LONG, name="Long",
        duration_multiplier=1.5, fixed_cost_multiplier=1.1,
        hourly_cost_multiplier=1.0, consumables_multiplier=1.2,
    ),
    ProfileKey.EXPRESS: OperatingProfile(
        key=ProfileKey.EXPRESS, name="Express",
        duration_multiplier=0.7, fixed_cost_multiplier=1.15,
        hourly_cost_multiplier=1.15, consumables_multiplier=1.0,
    ),
})


def resolve_profile_key(key: str | ProfileKey | None) -> ProfileKey:
    """Map a raw key to a ProfileKey; unknown or empty keys map to STANDARD."""
    if isinstance(key, ProfileKey):
        return key
    try:
        return ProfileKey(str(key).strip().lower())
    except ValueError:
        logger.debug("Unknown operating profile %r, using standard", key)
        return ProfileKey.STANDARD


def resolve_profile(key: str | ProfileKey | None) -> OperatingProfile:
    return PROFILES[resolve_profile_key(key)]
