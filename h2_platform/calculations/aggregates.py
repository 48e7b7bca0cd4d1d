"""
Auxiliary aggregate calculators built on the production constants.

Only ``calculate_production_efficiency``, ``calculate_eroi`` and
``calculate_capacity_factor`` guard a zero denominator (returning 0). The
remaining functions divide directly and raise ``ZeroDivisionError`` for zero
operating hours, efficiency or capacity factor.
"""

from h2_platform.calculations.production import calculate_hydrogen_production
from h2_platform.core.constants import PHYSICAL_CONSTANTS, ConversionFactors, RENEWABLE_CAPACITY_FACTORS
from h2_platform.core.enums import RenewableType
from h2_platform.core.types import EnergyKWh, MassKg, Percent


def calculate_production_efficiency(
    actual_h2_kg: MassKg,
    energy_used_kwh: EnergyKWh,
    electrolyzer_efficiency: Percent,
) -> Percent:
    """Actual output as a percentage of the theoretical yield for the energy used."""
    theoretical_h2 = calculate_hydrogen_production(
        energy_input=energy_used_kwh,
        efficiency=electrolyzer_efficiency,
    ).hydrogen_produced
    if theoretical_h2 == 0:
        return 0
    return (actual_h2_kg / theoretical_h2) * 100


def calculate_power_requirement(
    capacity_kg_per_day: MassKg,
    operating_hours: float,
    electrolyzer_efficiency: Percent,
) -> float:
    """Electrolyzer power (kW) to reach a daily capacity within the operating hours."""
    hourly_production = capacity_kg_per_day / operating_hours
    return (hourly_production * PHYSICAL_CONSTANTS.HYDROGEN_HHV_KWH_PER_KG) / (electrolyzer_efficiency / 100)


def calculate_renewable_energy_capacity(
    target_h2_kg_per_day: MassKg,
    electrolyzer_efficiency: Percent,
    capacity_factor: float,
) -> float:
    """
    Installed renewable capacity (MW) needed for a daily hydrogen target.

    Typical capacity factors: 0.2-0.3 solar, 0.3-0.5 wind, 0.4-0.9 hydro.
    """
    daily_energy_need = (
        target_h2_kg_per_day * PHYSICAL_CONSTANTS.HYDROGEN_HHV_KWH_PER_KG
    ) / (electrolyzer_efficiency / 100)
    return (daily_energy_need / (ConversionFactors.HOURS_PER_DAY * capacity_factor)) / ConversionFactors.MW_TO_KW


def calculate_eroi(energy_produced_mj: float, energy_invested_mj: float) -> float:
    """Energy return on investment; 0 when nothing was invested."""
    if energy_invested_mj == 0:
        return 0
    return energy_produced_mj / energy_invested_mj


def calculate_capacity_factor(
    actual_energy_produced_kwh: EnergyKWh,
    installed_capacity_kw: float,
    hours_in_period: float,
) -> Percent:
    """Actual production as a percentage of nameplate output over the period."""
    theoretical_max_kwh = installed_capacity_kw * hours_in_period
    if theoretical_max_kwh == 0:
        return 0
    return (actual_energy_produced_kwh / theoretical_max_kwh) * 100


def estimate_daily_production(
    solar_capacity_mw: float,
    wind_capacity_mw: float,
    hydro_capacity_mw: float,
    solar_capacity_factor: float = RENEWABLE_CAPACITY_FACTORS[RenewableType.SOLAR].typical,
    wind_capacity_factor: float = RENEWABLE_CAPACITY_FACTORS[RenewableType.WIND].typical,
    hydro_capacity_factor: float = RENEWABLE_CAPACITY_FACTORS[RenewableType.HYDRO].typical,
    electrolyzer_efficiency: Percent = 70,
) -> MassKg:
    """Daily hydrogen (kg) from a renewable mix feeding a PEM electrolyzer."""
    hours = ConversionFactors.HOURS_PER_DAY
    kw_per_mw = ConversionFactors.MW_TO_KW

    daily_solar_energy = solar_capacity_mw * kw_per_mw * hours * solar_capacity_factor
    daily_wind_energy = wind_capacity_mw * kw_per_mw * hours * wind_capacity_factor
    daily_hydro_energy = hydro_capacity_mw * kw_per_mw * hours * hydro_capacity_factor

    total_daily_energy = daily_solar_energy + daily_wind_energy + daily_hydro_energy

    return calculate_hydrogen_production(
        energy_input=total_daily_energy,
        efficiency=electrolyzer_efficiency,
    ).hydrogen_produced


def calculate_round_trip_efficiency(
    production_efficiency: Percent,
    storage_efficiency: Percent,
    conversion_efficiency: Percent,
) -> Percent:
    """Power-to-hydrogen-to-power efficiency (percent)."""
    return (production_efficiency / 100) * (storage_efficiency / 100) * (conversion_efficiency / 100) * 100
