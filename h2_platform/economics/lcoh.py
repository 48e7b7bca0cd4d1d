"""
Levelized Cost of Hydrogen

Plant-level LCOH via the capital recovery factor, plus a facility-level
estimate that builds the annual OPEX from electricity, water and
maintenance before annualising the capital cost the same way.
"""

from typing import Any, Mapping, Union
import logging

from h2_platform.core.constants import EconomicConstants
from h2_platform.core.exceptions import DegenerateInputError
from h2_platform.economics.models import (
    FacilityLCOHInputs,
    FacilityLCOHResult,
    LCOHParams,
    LCOHResult,
)

logger = logging.getLogger(__name__)


def capital_recovery_factor(discount_rate: float, lifetime_years: float) -> float:
    """
    CRF = r / (1 - (1 + r)^-n).

    Raises:
        DegenerateInputError: If the rate or lifetime is zero.
    """
    if discount_rate == 0:
        raise DegenerateInputError(
            "Discount rate must be non-zero for capital recovery factor annualisation"
        )
    if lifetime_years == 0:
        raise DegenerateInputError("Lifetime must be non-zero to annualise capital cost")
    return discount_rate / (1 - (1 + discount_rate) ** (-lifetime_years))


def calculate_lcoh(params: Union[LCOHParams, Mapping[str, Any], None] = None, **kwargs: Any) -> LCOHResult:
    """
    Calculate the levelized cost of hydrogen.

    Args:
        params: LCOHParams or a mapping with the same fields. Keyword
            arguments may be used instead.

    Returns:
        LCOHResult. ``total_npv`` is the undiscounted sum CAPEX + OPEX * n.

    Raises:
        DegenerateInputError: If discount rate, lifetime or annual
            production is zero.

    Example:
        >>> result = calculate_lcoh(capex_usd=1e6, annual_opex_usd=1e5,
        ...                         annual_production_kg=1e4, lifetime_years=20,
        ...                         discount_rate=0.08)
        >>> round(result.lcoh_usd_per_kg, 2)
        20.19
    """
    if params is None:
        params = LCOHParams(**kwargs)
    elif not isinstance(params, LCOHParams):
        params = LCOHParams(**{**params, **kwargs})

    if params.annual_production_kg == 0:
        raise DegenerateInputError("Annual production must be non-zero to levelize cost")

    crf = capital_recovery_factor(params.discount_rate, params.lifetime_years)
    annualized_capex = params.capex_usd * crf
    total_annual_cost = annualized_capex + params.annual_opex_usd

    lcoh = total_annual_cost / params.annual_production_kg
    total_npv = params.capex_usd + params.annual_opex_usd * params.lifetime_years

    logger.debug(
        f"LCOH: CRF={crf:.5f}, annualised CAPEX=${annualized_capex:,.0f}, "
        f"LCOH=${lcoh:.3f}/kg"
    )
    return LCOHResult(lcoh_usd_per_kg=lcoh, total_npv=total_npv)


def estimate_facility_lcoh(inputs: Union[FacilityLCOHInputs, Mapping[str, Any]]) -> FacilityLCOHResult:
    """
    Estimate LCOH for a production facility from its operating costs.

        annual production = capacity * 365 * availability
        energy per kg     = 50 kWh/kg / (efficiency / 100)
        OPEX              = electricity + water + maintenance

    Raises:
        DegenerateInputError: If efficiency is zero or the facility produces
            nothing, or the discount rate or lifetime is zero.
    """
    if not isinstance(inputs, FacilityLCOHInputs):
        inputs = FacilityLCOHInputs(**inputs)

    if inputs.electrolyzer_efficiency == 0:
        raise DegenerateInputError("Electrolyzer efficiency must be non-zero")

    annual_production = inputs.capacity_kg_per_day * EconomicConstants.DAYS_PER_YEAR * inputs.availability
    energy_per_kg = EconomicConstants.FACILITY_ENERGY_KWH_PER_KG_H2 / (inputs.electrolyzer_efficiency / 100)

    electricity = annual_production * energy_per_kg * inputs.electricity_cost_usd_per_kwh
    water = annual_production * inputs.water_l_per_kg * inputs.water_cost_usd_per_liter
    maintenance = inputs.capital_cost_usd * inputs.maintenance_fraction
    annual_opex = electricity + water + maintenance

    lcoh = calculate_lcoh(LCOHParams(
        capex_usd=inputs.capital_cost_usd,
        annual_opex_usd=annual_opex,
        annual_production_kg=annual_production,
        lifetime_years=inputs.operating_years,
        discount_rate=inputs.discount_rate,
    ))

    logger.info(
        f"Facility LCOH ${lcoh.lcoh_usd_per_kg:.2f}/kg "
        f"({annual_production:,.0f} kg/yr, OPEX ${annual_opex:,.0f}/yr)"
    )
    return FacilityLCOHResult(
        annual_production_kg=annual_production,
        energy_kwh_per_kg=energy_per_kg,
        annual_electricity_cost_usd=electricity,
        annual_water_cost_usd=water,
        annual_maintenance_cost_usd=maintenance,
        annual_opex_usd=annual_opex,
        lcoh=lcoh,
    )
