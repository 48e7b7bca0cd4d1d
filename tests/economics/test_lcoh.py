"""
Tests for levelized cost of hydrogen.

Zero discount rate, lifetime or production raise DegenerateInputError
instead of propagating inf/nan.
"""

import pytest
from pydantic import ValidationError

from h2_platform.core.exceptions import DegenerateInputError
from h2_platform.economics.lcoh import (
    calculate_lcoh,
    capital_recovery_factor,
    estimate_facility_lcoh,
)
from h2_platform.economics.models import FacilityLCOHInputs, LCOHParams


class TestCalculateLCOH:

    def test_baseline(self, lcoh_baseline):
        result = calculate_lcoh(LCOHParams(**lcoh_baseline))
        crf = 0.08 / (1 - 1.08 ** -20)
        assert result.lcoh_usd_per_kg == pytest.approx((1_000_000 * crf + 100_000) / 10_000)
        assert result.lcoh_usd_per_kg == pytest.approx(20.185, abs=1e-3)

    def test_total_npv_is_undiscounted_sum(self, lcoh_baseline):
        result = calculate_lcoh(lcoh_baseline)
        assert result.total_npv == pytest.approx(1_000_000 + 100_000 * 20)

    def test_accepts_keywords(self, lcoh_baseline):
        assert calculate_lcoh(**lcoh_baseline) == calculate_lcoh(LCOHParams(**lcoh_baseline))

    def test_higher_discount_rate_costs_more(self, lcoh_baseline):
        low = calculate_lcoh({**lcoh_baseline, 'discount_rate': 0.05})
        high = calculate_lcoh({**lcoh_baseline, 'discount_rate': 0.12})
        assert low.lcoh_usd_per_kg < high.lcoh_usd_per_kg

    def test_small_rate_approaches_straight_line_limit(self, lcoh_baseline):
        """As r -> 0+, LCOH -> (CAPEX / n + OPEX) / production."""
        result = calculate_lcoh({**lcoh_baseline, 'discount_rate': 0.0001})
        limit = (1_000_000 / 20 + 100_000) / 10_000
        assert result.lcoh_usd_per_kg == pytest.approx(limit, rel=1e-3)

    @pytest.mark.parametrize("field", ['discount_rate', 'lifetime_years', 'annual_production_kg'])
    def test_zero_denominators_rejected(self, lcoh_baseline, field):
        with pytest.raises(DegenerateInputError):
            calculate_lcoh({**lcoh_baseline, field: 0})

    def test_result_is_frozen(self, lcoh_baseline):
        result = calculate_lcoh(lcoh_baseline)
        with pytest.raises(ValidationError):
            result.lcoh_usd_per_kg = 1.0

    def test_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            calculate_lcoh(capex_usd=1_000_000)


def test_capital_recovery_factor():
    assert capital_recovery_factor(0.08, 20) == pytest.approx(0.101852, abs=1e-6)
    with pytest.raises(DegenerateInputError):
        capital_recovery_factor(0, 20)


class TestFacilityLCOH:

    @pytest.fixture
    def facility(self):
        return FacilityLCOHInputs(
            capacity_kg_per_day=1000,
            electrolyzer_efficiency=70,
            electricity_cost_usd_per_kwh=0.05,
            water_cost_usd_per_liter=0.002,
            maintenance_fraction=0.02,
            capital_cost_usd=5_000_000,
            operating_years=20,
        )

    def test_cost_breakdown(self, facility):
        result = estimate_facility_lcoh(facility)
        production = 1000 * 365 * 0.9
        energy_per_kg = 50 / 0.7

        assert result.annual_production_kg == pytest.approx(production)
        assert result.energy_kwh_per_kg == pytest.approx(energy_per_kg)
        assert result.annual_electricity_cost_usd == pytest.approx(production * energy_per_kg * 0.05)
        assert result.annual_water_cost_usd == pytest.approx(production * 12 * 0.002)
        assert result.annual_maintenance_cost_usd == pytest.approx(100_000)
        assert result.annual_opex_usd == pytest.approx(
            result.annual_electricity_cost_usd + result.annual_water_cost_usd + 100_000
        )

    def test_lcoh_uses_capital_recovery(self, facility):
        result = estimate_facility_lcoh(facility)
        expected = calculate_lcoh(
            capex_usd=5_000_000,
            annual_opex_usd=result.annual_opex_usd,
            annual_production_kg=result.annual_production_kg,
            lifetime_years=20,
            discount_rate=0.08,
        )
        assert result.lcoh == expected
        assert result.lcoh_usd_per_kg == pytest.approx(5.45, abs=0.01)

    def test_accepts_mapping(self, facility):
        assert estimate_facility_lcoh(facility.model_dump()) == estimate_facility_lcoh(facility)

    def test_zero_efficiency_rejected(self, facility):
        with pytest.raises(DegenerateInputError):
            estimate_facility_lcoh(facility.model_copy(update={'electrolyzer_efficiency': 0}))

    def test_zero_capacity_rejected(self, facility):
        with pytest.raises(DegenerateInputError):
            estimate_facility_lcoh(facility.model_copy(update={'capacity_kg_per_day': 0}))

    def test_summary(self, facility):
        summary = estimate_facility_lcoh(facility).to_summary_dict()
        assert summary['lcoh'].startswith('$')
        assert summary['annual_production'] == '328,500 kg'
