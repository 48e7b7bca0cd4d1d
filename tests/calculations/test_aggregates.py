import pytest

from h2_platform.calculations.aggregates import (
    calculate_capacity_factor,
    calculate_eroi,
    calculate_power_requirement,
    calculate_production_efficiency,
    calculate_renewable_energy_capacity,
    calculate_round_trip_efficiency,
    estimate_daily_production,
)


def test_production_efficiency():
    # Theoretical: 1000 kWh * 0.70 / 50 = 14 kg
    assert calculate_production_efficiency(7, 1000, 70) == pytest.approx(50)


def test_production_efficiency_zero_theoretical():
    assert calculate_production_efficiency(7, 0, 70) == 0


def test_power_requirement():
    # 240 kg/day over 24 h = 10 kg/h -> 10 * 39.4 / 0.7 kW
    assert calculate_power_requirement(240, 24, 70) == pytest.approx(10 * 39.4 / 0.7)


def test_power_requirement_zero_hours_unguarded():
    with pytest.raises(ZeroDivisionError):
        calculate_power_requirement(240, 0, 70)


def test_renewable_energy_capacity():
    daily_kwh = 100 * 39.4 / 0.7
    assert calculate_renewable_energy_capacity(100, 70, 0.25) == pytest.approx(daily_kwh / (24 * 0.25) / 1000)


def test_eroi():
    assert calculate_eroi(100, 25) == pytest.approx(4)
    assert calculate_eroi(100, 0) == 0


def test_capacity_factor():
    assert calculate_capacity_factor(500, 100, 10) == pytest.approx(50)
    assert calculate_capacity_factor(500, 0, 10) == 0
    assert calculate_capacity_factor(500, 100, 0) == 0


class TestEstimateDailyProduction:

    def test_solar_only_defaults(self):
        # 1 MW * 1000 * 24 h * 0.25 = 6000 kWh -> 6000 * 0.70 / 50 = 84 kg
        assert estimate_daily_production(1, 0, 0) == pytest.approx(84)

    def test_mix_with_custom_factors(self):
        energy = (2 * 0.2 + 1 * 0.4 + 0.5 * 0.5) * 1000 * 24
        expected = energy * 0.65 / 50
        assert estimate_daily_production(2, 1, 0.5, 0.2, 0.4, 0.5, 65) == pytest.approx(expected)

    def test_no_capacity(self):
        assert estimate_daily_production(0, 0, 0) == 0


def test_round_trip_efficiency():
    assert calculate_round_trip_efficiency(70, 90, 50) == pytest.approx(31.5)
    assert calculate_round_trip_efficiency(100, 100, 100) == pytest.approx(100)
