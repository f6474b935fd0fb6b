"""Area-of-interest configuration and the built-in AOI preset catalog."""

from __future__ import annotations

import math
import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AOIConfig(BaseModel):
    """Geometry of the region to image.

    ``areal`` AOIs are swept in parallel strips across ``width_km``;
    ``corridor`` AOIs (pipelines, coastlines, roads) are swept along
    their length with strips spanning ``corridor_width_km``.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(default="AOI", description="Human label")
    shape: Literal["areal", "corridor"] = Field(default="areal", description="AOI geometry type")
    area_km2: float = Field(default=181.8, gt=0, description="AOI surface (km²)")
    width_km: float | None = Field(
        default=None,
        description="Across-track width of an areal AOI (km). None = sqrt(area_km2).",
    )
    corridor_width_km: float = Field(default=0.8, description="Corridor width (km), corridor shape only")

    @property
    def effective_width_km(self) -> float:
        if self.width_km is not None:
            return self.width_km
        return math.sqrt(self.area_km2)


# ═══════════════════════════════════════════════════════════════════════════
# Preset catalog
# ═══════════════════════════════════════════════════════════════════════════

AOI_PRESETS: dict[str, AOIConfig] = {
    "milano": AOIConfig(name="Milano (prov.)", shape="areal", area_km2=1576),
    "roma": AOIConfig(name="Roma (prov.)", shape="areal", area_km2=5352),
    "torino": AOIConfig(name="Torino (prov.)", shape="areal", area_km2=6829),
    "corr-100x2": AOIConfig(
        name="Corridor 100×2 km", shape="corridor", area_km2=200, corridor_width_km=2,
    ),
}


def get_aoi_preset(preset_id: str) -> AOIConfig:
    """Return a built-in preset.  Raises KeyError for unknown ids."""
    return AOI_PRESETS[preset_id]


def slugify(name: str) -> str:
    """Preset id from a display name: lowercase, runs of other chars → '-'.

    >>> slugify("Roma (prov.)")
    'roma-prov'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")
    return slug or "aoi"
