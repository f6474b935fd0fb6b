"""Parameter-construction boundary: raw flat records → ServiceParameters.

Callers (forms, JSON files, spreadsheets) hand over a flat record of loosely
typed values.  Everything is normalized here, once, before the cost models
ever see it:

  * numbers accept ``,`` or ``.`` as decimal separator (``"181,8"``)
  * blank / missing fields take the model defaults
  * required fields for the selected mode must be present
  * lenient fields (AOI width, proposed prices, mission count, profile)
    fall back silently to their documented defaults
  * anything else that is not a number raises ``InvalidParameter``
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError

from stratocost.config.parameters import ServiceParameters
from stratocost.config.profiles import resolve_profile_key
from stratocost.errors import InvalidParameter

logger = logging.getLogger(__name__)

Mode = Literal["coverage", "tasking"]

# flat key → (section, attribute); section None = top-level field
FLAT_FIELDS: dict[str, tuple[str | None, str]] = {
    "aoi_name": ("aoi", "name"),
    "aoi_shape": ("aoi", "shape"),
    "area_km2": ("aoi", "area_km2"),
    "width_km": ("aoi", "width_km"),
    "corridor_width_km": ("aoi", "corridor_width_km"),
    "revisit_minutes": (None, "revisit_minutes"),
    "platform": ("platform", "kind"),
    "mission_duration_days": ("platform", "mission_duration_days"),
    "relay_flight_hours": ("platform", "relay_flight_hours"),
    "turnaround_days": ("platform", "turnaround_days"),
    "swath_km": ("sensor", "swath_km"),
    "ground_speed_kmh": ("sensor", "ground_speed_kmh"),
    "duty_fraction": ("sensor", "duty_fraction"),
    "coverage_efficiency": ("sensor", "coverage_efficiency"),
    "overlap_fraction": ("sensor", "overlap_fraction"),
    "turn_radius_km": ("sensor", "turn_radius_km"),
    "nav_efficiency": ("sensor", "nav_efficiency"),
    "mtbf_hours": ("reliability", "mtbf_hours"),
    "mttr_hours": ("reliability", "mttr_hours"),
    "max_flight_days_per_year": ("fleet", "max_flight_days_per_year"),
    "maintenance_buffer_fraction": ("fleet", "maintenance_buffer_fraction"),
    "spare_buffer_fraction": ("fleet", "spare_buffer_fraction"),
    "fixed_cost_per_mission": ("costs", "fixed_cost_per_mission"),
    "hourly_cost": ("costs", "hourly_cost"),
    "platform_capex": ("costs", "platform_capex"),
    "platform_life_days": ("costs", "platform_life_days"),
    "payload_capex": ("costs", "payload_capex"),
    "payload_life_days": ("costs", "payload_life_days"),
    "consumables_per_mission": ("costs", "consumables_per_mission"),
    "annual_fixed_overhead": ("costs", "annual_fixed_overhead"),
    "target_gross_margin": ("pricing", "target_gross_margin"),
    "proposed_annual_price": ("pricing", "proposed_annual_price"),
    "proposed_price_per_mission": ("pricing", "proposed_price_per_mission"),
    "mission_count": ("tasking", "mission_count"),
    "profile": ("tasking", "profile"),
}

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "coverage": ("area_km2", "revisit_minutes"),
    "tasking": (),
}

_OPTIONAL_NUMBERS = frozenset({"width_km", "proposed_annual_price", "proposed_price_per_mission"})
_TEXT_FIELDS = frozenset({"aoi_name", "aoi_shape", "platform", "profile"})

_SKIP = object()


def parse_decimal(raw: Any, fallback: float | None = None) -> float | None:
    """Parse a loosely typed number, returning ``fallback`` on any failure.

    Accepts ints, floats and strings using either ``,`` or ``.`` as the
    decimal separator.  None, blank strings, unparsable text and
    non-finite values (nan, inf) all yield ``fallback``.
    """
    if raw is None or isinstance(raw, bool):
        return fallback
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).replace(",", ".").strip()
        if not text:
            return fallback
        try:
            value = float(text)
        except ValueError:
            return fallback
    return value if math.isfinite(value) else fallback


def parse_mission_count(raw: Any) -> int:
    """Lenient mission count: non-numeric → 0, fractional → truncated.

    Negative counts are returned as-is so validation can reject them.
    """
    value = parse_decimal(raw, 0.0)
    return int(value)


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def _parse_field(key: str, raw: Any) -> Any:
    if key in _TEXT_FIELDS:
        if _is_blank(raw):
            return _SKIP
        text = str(raw).strip()
        if key == "aoi_shape":
            return "corridor" if text.lower() == "corridor" else "areal"
        if key == "platform":
            return "relay" if text.lower() == "relay" else "stratostat"
        if key == "profile":
            return resolve_profile_key(text)
        return text

    if key == "mission_count":
        return parse_mission_count(raw)

    if key in _OPTIONAL_NUMBERS:
        value = parse_decimal(raw, None)
        if value is None and not _is_blank(raw):
            logger.debug("Ignoring unparsable optional field %s=%r", key, raw)
        return value

    if _is_blank(raw):
        return _SKIP
    value = parse_decimal(raw, None)
    if value is None:
        raise InvalidParameter(key, f"not a number: {raw!r}")
    return value


def _flat_name(loc: tuple[Any, ...]) -> str:
    path = tuple(str(part) for part in loc)
    for key, (section, attr) in FLAT_FIELDS.items():
        expected = (section, attr) if section else (attr,)
        if path[:len(expected)] == expected:
            return key
    return ".".join(path)


def parse_service_parameters(raw: Mapping[str, Any], mode: Mode = "coverage") -> ServiceParameters:
    """Build validated ServiceParameters from a flat record.

    Raises
    ------
    InvalidParameter
        Required field missing, a numeric field not a number, or a value
        outside its domain (area ≤ 0, revisit ≤ 0, mission count < 0).
    """
    if mode not in REQUIRED_FIELDS:
        raise ValueError(f"Unknown mode {mode!r}; expected 'coverage' or 'tasking'")

    for key in REQUIRED_FIELDS[mode]:
        if _is_blank(raw.get(key)):
            raise InvalidParameter(key, "required")

    top: dict[str, Any] = {}
    sections: dict[str, dict[str, Any]] = {}
    for key, value in raw.items():
        if key not in FLAT_FIELDS:
            logger.debug("Ignoring unknown parameter %r", key)
            continue
        parsed = _parse_field(key, value)
        if parsed is _SKIP:
            continue
        section, attr = FLAT_FIELDS[key]
        target = top if section is None else sections.setdefault(section, {})
        target[attr] = parsed

    try:
        return ServiceParameters(**top, **sections)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise InvalidParameter(_flat_name(first["loc"]), first["msg"]) from exc


def coerce_parameters(
    params: ServiceParameters | Mapping[str, Any],
    mode: Mode = "coverage",
) -> ServiceParameters:
    """Pass ServiceParameters through; parse anything else as a flat record."""
    if isinstance(params, ServiceParameters):
        return params
    return parse_service_parameters(params, mode)


def load_service_parameters(source: str | Path, mode: Mode = "coverage") -> ServiceParameters:
    """Read a flat JSON parameter record from disk."""
    path = Path(source)
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(raw).__name__}")
    return parse_service_parameters(raw, mode)
