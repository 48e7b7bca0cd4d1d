"""Core constants, enums, exceptions and type aliases."""

from h2_platform.core.constants import (
    PHYSICAL_CONSTANTS,
    PhysicalConstants,
    ELECTROLYZER_ENERGY_KWH_PER_KG,
    COMPRESSION_ENERGY_KWH_PER_KG,
    TRANSPORT_COST_USD_PER_KG_KM,
    ELECTROLYZER_TECHNOLOGIES,
    STORAGE_TECHNOLOGIES,
    RENEWABLE_CAPACITY_FACTORS,
    TRANSPORTATION_METHODS,
    ECONOMIC_PARAMETERS,
    HYDROGEN_PROPERTIES,
    ELECTROLYSIS_CONSTANTS,
    CARBON_INTENSITY_KG_CO2_PER_KG_H2,
)
from h2_platform.core.enums import (
    ElectrolyzerType,
    ProductionType,
    TransportType,
    StorageType,
    RenewableType,
)
from h2_platform.core.exceptions import (
    H2PlatformError,
    CalculationError,
    InvalidInputError,
    DegenerateInputError,
    ConfigurationError,
)

__all__ = [
    "PHYSICAL_CONSTANTS",
    "PhysicalConstants",
    "ELECTROLYZER_ENERGY_KWH_PER_KG",
    "COMPRESSION_ENERGY_KWH_PER_KG",
    "TRANSPORT_COST_USD_PER_KG_KM",
    "ELECTROLYZER_TECHNOLOGIES",
    "STORAGE_TECHNOLOGIES",
    "RENEWABLE_CAPACITY_FACTORS",
    "TRANSPORTATION_METHODS",
    "ECONOMIC_PARAMETERS",
    "HYDROGEN_PROPERTIES",
    "ELECTROLYSIS_CONSTANTS",
    "CARBON_INTENSITY_KG_CO2_PER_KG_H2",
    "ElectrolyzerType",
    "ProductionType",
    "TransportType",
    "StorageType",
    "RenewableType",
    "H2PlatformError",
    "CalculationError",
    "InvalidInputError",
    "DegenerateInputError",
    "ConfigurationError",
]
