"""
Hydrogen Calculation Functions

Pure, stateless calculators for production, water, carbon, storage,
electrolyzer performance and auxiliary aggregates.
"""

from h2_platform.calculations.records import (
    HydrogenProductionInput,
    HydrogenProductionResult,
    WaterConsumptionResult,
    CarbonOffsetResult,
    CompressionEnergyResult,
)
from h2_platform.calculations.production import (
    calculate_hydrogen_production,
    calculate_water_consumption,
    calculate_carbon_offset,
)
from h2_platform.calculations.storage import (
    calculate_compression_energy,
    calculate_liquefaction_energy,
    calculate_storage_utilization,
)
from h2_platform.calculations.performance import (
    calculate_pem_performance,
    calculate_alkaline_performance,
    calculate_soec_performance,
    adjust_efficiency,
)
from h2_platform.calculations.aggregates import (
    calculate_production_efficiency,
    calculate_power_requirement,
    calculate_renewable_energy_capacity,
    calculate_eroi,
    calculate_capacity_factor,
    estimate_daily_production,
    calculate_round_trip_efficiency,
)

__all__ = [
    "HydrogenProductionInput",
    "HydrogenProductionResult",
    "WaterConsumptionResult",
    "CarbonOffsetResult",
    "CompressionEnergyResult",
    "calculate_hydrogen_production",
    "calculate_water_consumption",
    "calculate_carbon_offset",
    "calculate_compression_energy",
    "calculate_liquefaction_energy",
    "calculate_storage_utilization",
    "calculate_pem_performance",
    "calculate_alkaline_performance",
    "calculate_soec_performance",
    "adjust_efficiency",
    "calculate_production_efficiency",
    "calculate_power_requirement",
    "calculate_renewable_energy_capacity",
    "calculate_eroi",
    "calculate_capacity_factor",
    "estimate_daily_production",
    "calculate_round_trip_efficiency",
]
