"""Tests for config/profiles.py and the AOI preset catalog."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stratocost.config.aoi import AOI_PRESETS, get_aoi_preset, slugify
from stratocost.config.profiles import PROFILES, ProfileKey, resolve_profile


def test_catalog_is_closed():
    assert set(PROFILES) == {ProfileKey.STANDARD, ProfileKey.LONG, ProfileKey.EXPRESS}


def test_catalog_values():
    long = PROFILES[ProfileKey.LONG]
    assert (long.duration_multiplier, long.fixed_cost_multiplier,
            long.hourly_cost_multiplier, long.consumables_multiplier) == (1.5, 1.1, 1.0, 1.2)
    express = PROFILES[ProfileKey.EXPRESS]
    assert (express.duration_multiplier, express.fixed_cost_multiplier,
            express.hourly_cost_multiplier, express.consumables_multiplier) == (0.7, 1.15, 1.15, 1.0)
    standard = PROFILES[ProfileKey.STANDARD]
    assert standard.duration_multiplier == standard.consumables_multiplier == 1.0


@pytest.mark.parametrize("key", ["long", "LONG", " Long ", ProfileKey.LONG])
def test_resolve_known(key):
    assert resolve_profile(key).key is ProfileKey.LONG


@pytest.mark.parametrize("key", [None, "", "turbo", 42])
def test_resolve_unknown_is_standard(key):
    assert resolve_profile(key).key is ProfileKey.STANDARD


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        PROFILES[ProfileKey.LONG] = PROFILES[ProfileKey.STANDARD]
    with pytest.raises(ValidationError):
        PROFILES[ProfileKey.LONG].duration_multiplier = 3.0


# ═══════════════════════════════════════════════════════════════════════════
# AOI presets
# ═══════════════════════════════════════════════════════════════════════════

def test_builtin_presets():
    assert get_aoi_preset("roma").area_km2 == 5352
    corridor = get_aoi_preset("corr-100x2")
    assert corridor.shape == "corridor"
    assert corridor.corridor_width_km == 2
    assert len(AOI_PRESETS) == 4


def test_unknown_preset():
    with pytest.raises(KeyError):
        get_aoi_preset("atlantis")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Roma (prov.)", "roma-prov"),
        ("  Lago di Garda  ", "lago-di-garda"),
        ("Corridor 100×2 km", "corridor-100-2-km"),
        ("", "aoi"),
        ("!!!", "aoi"),
    ],
)
def test_slugify(name: str, expected: str):
    assert slugify(name) == expected
