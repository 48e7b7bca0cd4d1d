"""
Hydrogen Platform - Calculation Library

Pure domain calculations for a hydrogen production, storage and
transportation platform:
- Production yield, water consumption and carbon offset
- Compression, liquefaction and storage utilization
- Transportation cost and levelized cost of hydrogen (LCOH)
- Electrolyzer performance derating (PEM, Alkaline, SOEC)
- Scenario files (YAML/JSON) and a batch runner
"""

__version__ = "1.0.0"

from h2_platform.core import *
from h2_platform.calculations import *
from h2_platform.economics import *
from h2_platform.config import *
from h2_platform.simulation import *

__all__ = [
    # Constants
    'PHYSICAL_CONSTANTS',
    'PhysicalConstants',

    # Enums
    'ElectrolyzerType',
    'ProductionType',
    'TransportType',
    'StorageType',
    'RenewableType',

    # Exceptions
    'H2PlatformError',
    'CalculationError',
    'InvalidInputError',
    'DegenerateInputError',
    'ConfigurationError',

    # Records
    'HydrogenProductionInput',
    'HydrogenProductionResult',
    'WaterConsumptionResult',
    'CarbonOffsetResult',
    'CompressionEnergyResult',
    'LCOHParams',
    'LCOHResult',
    'TransportationCostParams',
    'TransportationCostResult',
    'FacilityLCOHInputs',
    'FacilityLCOHResult',

    # Production / storage
    'calculate_hydrogen_production',
    'calculate_water_consumption',
    'calculate_carbon_offset',
    'calculate_compression_energy',
    'calculate_liquefaction_energy',
    'calculate_storage_utilization',

    # Economics
    'calculate_transportation_cost',
    'calculate_lcoh',
    'estimate_facility_lcoh',

    # Performance
    'calculate_pem_performance',
    'calculate_alkaline_performance',
    'calculate_soec_performance',
    'adjust_efficiency',

    # Aggregates
    'calculate_production_efficiency',
    'calculate_power_requirement',
    'calculate_renewable_energy_capacity',
    'calculate_eroi',
    'calculate_capacity_factor',
    'estimate_daily_production',
    'calculate_round_trip_efficiency',

    # Configuration
    'ScenarioConfig',
    'ScenarioFile',
    'ScenarioLoader',
    'load_scenario_file',

    # Simulation
    'SimulationResult',
    'run_scenario',
    'run_scenarios',
    'run_from_config',
    'simulate_weekly_profile',
    'ProductionProfile',
]
