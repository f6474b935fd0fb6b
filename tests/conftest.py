"""Shared test fixtures: the reference 181.8 km² daily-revisit scenario."""

from __future__ import annotations

import pytest

from stratocost.config import (
    AOIConfig,
    CostConfig,
    FleetConfig,
    PlatformConfig,
    PricingConfig,
    ReliabilityConfig,
    SensorConfig,
    ServiceParameters,
    TaskingConfig,
)


@pytest.fixture
def aoi() -> AOIConfig:
    return AOIConfig(name="Reference AOI", shape="areal", area_km2=181.8, width_km=None)


@pytest.fixture
def platform() -> PlatformConfig:
    return PlatformConfig(kind="stratostat", mission_duration_days=7, relay_flight_hours=6, turnaround_days=1)


@pytest.fixture
def relay_platform() -> PlatformConfig:
    return PlatformConfig(kind="relay", relay_flight_hours=6)


@pytest.fixture
def sensor() -> SensorConfig:
    return SensorConfig(
        swath_km=7,
        ground_speed_kmh=40,
        duty_fraction=0.75,
        coverage_efficiency=0.5,
        overlap_fraction=0.2,
        turn_radius_km=5,
        nav_efficiency=0.8,
    )


@pytest.fixture
def reliability() -> ReliabilityConfig:
    return ReliabilityConfig(mtbf_hours=500, mttr_hours=20)


@pytest.fixture
def fleet() -> FleetConfig:
    return FleetConfig(
        max_flight_days_per_year=200,
        maintenance_buffer_fraction=0.25,
        spare_buffer_fraction=0.15,
    )


@pytest.fixture
def costs() -> CostConfig:
    return CostConfig(
        fixed_cost_per_mission=2_500,
        hourly_cost=25,
        platform_capex=20_000,
        platform_life_days=800,
        payload_capex=90_000,
        payload_life_days=1_200,
        consumables_per_mission=500,
        annual_fixed_overhead=12_000,
    )


@pytest.fixture
def pricing() -> PricingConfig:
    return PricingConfig(target_gross_margin=0.5)


@pytest.fixture
def params(
    aoi: AOIConfig,
    platform: PlatformConfig,
    sensor: SensorConfig,
    reliability: ReliabilityConfig,
    fleet: FleetConfig,
    costs: CostConfig,
    pricing: PricingConfig,
) -> ServiceParameters:
    return ServiceParameters(
        aoi=aoi,
        revisit_minutes=1_440,
        platform=platform,
        sensor=sensor,
        reliability=reliability,
        fleet=fleet,
        costs=costs,
        pricing=pricing,
        tasking=TaskingConfig(mission_count=6, profile="standard"),
    )


@pytest.fixture
def relay_params(params: ServiceParameters, relay_platform: PlatformConfig) -> ServiceParameters:
    return params.model_copy(update={"platform": relay_platform})


@pytest.fixture
def flat_record() -> dict[str, object]:
    """The reference scenario as a form would submit it (strings, comma decimals)."""
    return {
        "aoi_name": "Reference AOI",
        "aoi_shape": "areal",
        "area_km2": "181,8",
        "width_km": "",
        "revisit_minutes": "1440",
        "platform": "stratostat",
        "mission_duration_days": "7",
        "turnaround_days": "1",
        "swath_km": "7",
        "ground_speed_kmh": "40",
        "duty_fraction": "0,75",
        "coverage_efficiency": "0.5",
        "overlap_fraction": "0.2",
        "turn_radius_km": "5",
        "nav_efficiency": "0.8",
        "mtbf_hours": "500",
        "mttr_hours": "20",
        "max_flight_days_per_year": "200",
        "maintenance_buffer_fraction": "0.25",
        "spare_buffer_fraction": "0.15",
        "fixed_cost_per_mission": "2500",
        "hourly_cost": "25",
        "platform_capex": "20000",
        "platform_life_days": "800",
        "payload_capex": "90000",
        "payload_life_days": "1200",
        "consumables_per_mission": "500",
        "annual_fixed_overhead": "12000",
        "target_gross_margin": "0.5",
        "proposed_annual_price": "",
        "mission_count": "6",
        "profile": "standard",
        "client_name": "Cliente",
    }
