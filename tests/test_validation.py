"""Pydantic validation tests: hard domain limits and immutability."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from stratocost.config import AOIConfig, SensorConfig, ServiceParameters, TaskingConfig, parse_service_parameters
from stratocost.engine.tasking import compute_tasking_model
from stratocost.errors import InvalidParameter


class TestDomainLimits:

    def test_defaults_are_valid(self):
        p = ServiceParameters()
        assert p.aoi.area_km2 == 181.8
        assert p.revisit_minutes == 1_440

    def test_zero_area_rejected(self):
        with pytest.raises(ValidationError):
            AOIConfig(area_km2=0)

    def test_negative_area_rejected(self):
        with pytest.raises(ValidationError):
            AOIConfig(area_km2=-5)

    def test_zero_revisit_rejected(self):
        with pytest.raises(ValidationError):
            ServiceParameters(revisit_minutes=0)

    def test_negative_mission_count_rejected(self):
        with pytest.raises(ValidationError):
            TaskingConfig(mission_count=-1)

    def test_unknown_profile_rejected_by_model(self):
        # lenient lookup lives at the parsing boundary
        with pytest.raises(ValidationError):
            TaskingConfig(profile="turbo")

    def test_unknown_shape_rejected_by_model(self):
        with pytest.raises(ValidationError):
            AOIConfig(shape="blob")


class TestNonFiniteValues:

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_sensor_rejects_non_finite(self, value):
        with pytest.raises(ValidationError) as exc:
            SensorConfig(swath_km=value)
        assert exc.value.errors()[0]["loc"] == ("swath_km",)

    def test_infinite_area_rejected(self):
        with pytest.raises(ValidationError):
            ServiceParameters(aoi=AOIConfig(area_km2=math.inf))

    def test_nan_revisit_rejected(self):
        with pytest.raises(ValidationError):
            ServiceParameters(revisit_minutes=math.nan)

    def test_nan_in_json_rejected(self):
        with pytest.raises(ValidationError):
            ServiceParameters.model_validate_json('{"sensor": {"overlap_fraction": NaN}}')

    def test_infinity_in_flat_record_names_the_field(self, flat_record: dict):
        flat_record["swath_km"] = "inf"
        with pytest.raises(InvalidParameter) as exc:
            parse_service_parameters(flat_record)
        assert exc.value.field == "swath_km"


class TestImmutability:

    def test_parameters_are_frozen(self, params: ServiceParameters):
        with pytest.raises(ValidationError):
            params.revisit_minutes = 60
        with pytest.raises(ValidationError):
            params.aoi.area_km2 = 1

    def test_results_are_frozen(self, params: ServiceParameters):
        t = compute_tasking_model(params)
        with pytest.raises(ValidationError):
            t.batch_cost = 0


def test_parameters_json_round_trip(params: ServiceParameters):
    assert ServiceParameters.model_validate_json(params.model_dump_json()) == params
