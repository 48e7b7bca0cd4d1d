"""
Physical constants, technology tables and reference data for hydrogen
production, storage and transportation calculations.

Every value here is read-only process-wide data. Lookup tables are exposed
as ``MappingProxyType`` so callers cannot mutate them at runtime.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from h2_platform.core.enums import (
    ElectrolyzerType,
    RenewableType,
    StorageType,
    TransportType,
)


@dataclass(frozen=True)
class PhysicalConstants:
    """Reference values shared by all calculation functions."""
    HYDROGEN_HHV_KWH_PER_KG: float = 39.4
    HYDROGEN_LHV_KWH_PER_KG: float = 33.3
    WATER_CONSUMPTION_L_PER_KG_H2: float = 9.0   # Stoichiometric
    GRAY_HYDROGEN_CO2_KG_PER_KG_H2: float = 9.3  # Steam methane reforming
    BLUE_HYDROGEN_CO2_KG_PER_KG_H2: float = 2.0  # SMR + carbon capture residual


PHYSICAL_CONSTANTS: Final[PhysicalConstants] = PhysicalConstants()


class ProductionConstants:
    # Real-system water losses on top of stoichiometry
    WATER_PRACTICAL_OVERHEAD_FACTOR: Final[float] = 1.10
    # Temperature correction: efficiency gain per °C above the reference
    TEMPERATURE_REFERENCE_C: Final[float] = 25.0
    TEMPERATURE_COEFFICIENT_PER_C: Final[float] = 0.001


# Specific energy consumption of each electrolyzer technology (kWh per kg H2)
ELECTROLYZER_ENERGY_KWH_PER_KG: Final[Mapping[ElectrolyzerType, float]] = MappingProxyType({
    ElectrolyzerType.PEM: 50.0,
    ElectrolyzerType.ALKALINE: 48.0,
    ElectrolyzerType.SOEC: 45.0,
})
DEFAULT_ELECTROLYZER_TYPE: Final[ElectrolyzerType] = ElectrolyzerType.PEM


class CompressionConstants:
    # Linear fallback for pressures missing from the table: (p / 700 bar) * 3.24 kWh/kg
    FALLBACK_REFERENCE_PRESSURE_BAR: Final[float] = 700.0
    FALLBACK_REFERENCE_ENERGY_KWH_PER_KG: Final[float] = 3.24
    LIQUEFACTION_ENERGY_KWH_PER_KG: Final[float] = 11.0


# Isothermal compression energy from ~1 bar (kWh per kg H2), keyed by target bar
COMPRESSION_ENERGY_KWH_PER_KG: Final[Mapping[float, float]] = MappingProxyType({
    200: 2.21,
    350: 2.94,   # Tube trailers
    700: 3.24,   # High pressure storage
    870: 3.36,   # Advanced storage
})


# Transportation cost (USD per kg per km)
TRANSPORT_COST_USD_PER_KG_KM: Final[Mapping[TransportType, float]] = MappingProxyType({
    TransportType.TUBE_TRAILER: 0.15,
    TransportType.TANKER: 0.25,
    TransportType.PIPELINE: 0.05,
})
DEFAULT_TRANSPORT_COST_USD_PER_KG_KM: Final[float] = 0.15


class EconomicConstants:
    # Facility-level LCOH defaults
    FACILITY_AVAILABILITY: Final[float] = 0.9
    FACILITY_DISCOUNT_RATE: Final[float] = 0.08
    FACILITY_WATER_L_PER_KG_H2: Final[float] = 12.0
    FACILITY_ENERGY_KWH_PER_KG_H2: Final[float] = 50.0
    DAYS_PER_YEAR: Final[int] = 365


# ============================================================================
# REFERENCE DATA
# ============================================================================

HYDROGEN_PROPERTIES: Final[Mapping[str, float]] = MappingProxyType({
    'lower_heating_value_mj_per_kg': 120.0,
    'higher_heating_value_mj_per_kg': 142.0,
    'density_gas_stp_kg_per_m3': 0.0899,
    'density_liquid_kg_per_m3': 70.8,     # at -253 °C
    'molecular_weight_g_per_mol': 2.016,
    'boiling_point_c': -252.87,
    'critical_temperature_c': -240.0,
    'critical_pressure_bar': 13.0,
})

ELECTROLYSIS_CONSTANTS: Final[Mapping[str, object]] = MappingProxyType({
    'water_per_kg_h2_theoretical_l': 9.0,
    'water_per_kg_h2_practical_l': 10.5,
    'oxygen_produced_per_kg_h2_kg': 8.0,
    'min_voltage_theoretical_v': 1.23,
    'practical_voltage_range_v': (1.8, 2.2),
    'faraday_constant_c_per_mol': 96485.0,
    'cell_efficiency_typical_pct': (60.0, 80.0),
})


@dataclass(frozen=True)
class ElectrolyzerTechnology:
    """Operating envelope and maturity of one electrolyzer technology."""
    name: str
    efficiency_pct: tuple[float, float]
    operating_temp_c: tuple[float, float]
    operating_pressure_bar: tuple[float, float]
    current_density_a_cm2: tuple[float, float]
    response_time: str
    part_load_capability: str
    maturity_level: str
    typical_capacity_mw: tuple[float, float]


ELECTROLYZER_TECHNOLOGIES: Final[Mapping[ElectrolyzerType, ElectrolyzerTechnology]] = MappingProxyType({
    ElectrolyzerType.PEM: ElectrolyzerTechnology(
        name='Proton Exchange Membrane',
        efficiency_pct=(60, 70),
        operating_temp_c=(50, 80),
        operating_pressure_bar=(30, 80),
        current_density_a_cm2=(1, 3),
        response_time='fast',
        part_load_capability='excellent',
        maturity_level='Commercial',
        typical_capacity_mw=(1, 10),
    ),
    ElectrolyzerType.ALKALINE: ElectrolyzerTechnology(
        name='Alkaline Electrolyzer',
        efficiency_pct=(50, 65),
        operating_temp_c=(60, 90),
        operating_pressure_bar=(1, 30),
        current_density_a_cm2=(0.2, 0.4),
        response_time='medium',
        part_load_capability='good',
        maturity_level='Mature',
        typical_capacity_mw=(0.5, 100),
    ),
    ElectrolyzerType.SOEC: ElectrolyzerTechnology(
        name='Solid Oxide Electrolyzer Cell',
        efficiency_pct=(80, 90),  # Including heat utilization
        operating_temp_c=(700, 850),
        operating_pressure_bar=(1, 25),
        current_density_a_cm2=(0.5, 1.5),
        response_time='slow',
        part_load_capability='limited',
        maturity_level='Developing',
        typical_capacity_mw=(0.1, 1),
    ),
})

STORAGE_TECHNOLOGIES: Final[Mapping[StorageType, Mapping[str, object]]] = MappingProxyType({
    StorageType.COMPRESSED: MappingProxyType({
        'name': 'Compressed Gas Storage',
        'typical_pressure_bar': (200, 700),
        'energy_density_kwh_per_l': (0.5, 1.3),
        'gravimetric_density_wt_pct': (4, 6),
        'compression_energy_kwh_per_kg': (2.21, 3.36),
        'cost': 'Low',
    }),
    StorageType.LIQUID: MappingProxyType({
        'name': 'Liquid Hydrogen',
        'temperature_c': -253,
        'pressure_bar': 1,
        'energy_density_kwh_per_l': (2.4,),
        'liquefaction_energy_kwh_per_kg': (10, 12),
        'boil_off_rate_pct_per_day': (0.3, 1.0),
        'cost': 'High',
    }),
    StorageType.METAL_HYDRIDE: MappingProxyType({
        'name': 'Metal Hydride Storage',
        'operating_temp_c': (-40, 120),
        'pressure_bar': (1, 30),
        'gravimetric_density_wt_pct': (1, 7),
        'volumetric_density_kg_per_m3': (90, 150),
        'cost': 'Medium',
    }),
    StorageType.UNDERGROUND: MappingProxyType({
        'name': 'Underground Storage (Salt Caverns)',
        'depth_m': (500, 2000),
        'pressure_bar': (50, 200),
        'capacity_kg': (100_000, 1_000_000),
        'cost': 'Very Low (per kg)',
    }),
})


@dataclass(frozen=True)
class CapacityFactorRange:
    typical: float
    low: float
    high: float


RENEWABLE_CAPACITY_FACTORS: Final[Mapping[RenewableType, CapacityFactorRange]] = MappingProxyType({
    RenewableType.SOLAR: CapacityFactorRange(typical=0.25, low=0.15, high=0.35),
    RenewableType.WIND: CapacityFactorRange(typical=0.35, low=0.25, high=0.50),
    RenewableType.HYDRO: CapacityFactorRange(typical=0.60, low=0.40, high=0.90),
})

CARBON_INTENSITY_KG_CO2_PER_KG_H2: Final[Mapping[str, tuple[float, float]]] = MappingProxyType({
    'gray': (9.0, 12.0),
    'blue': (2.0, 5.0),
    'green': (0.0, 0.5),  # Equipment manufacturing only
})

TRANSPORTATION_METHODS: Final[Mapping[TransportType, Mapping[str, object]]] = MappingProxyType({
    TransportType.TUBE_TRAILER: MappingProxyType({
        'name': 'Compressed Gas Tube Trailer',
        'pressure_bar': (200, 500),
        'capacity_kg': (200, 500),
        'economic_distance_km': (0, 500),
    }),
    TransportType.TANKER: MappingProxyType({
        'name': 'Liquid Hydrogen Tanker',
        'temperature_c': -253,
        'capacity_kg': (3000, 4500),
        'economic_distance_km': (500, 5000),
        'boil_off_rate_pct_per_day': 0.3,
    }),
    TransportType.PIPELINE: MappingProxyType({
        'name': 'Hydrogen Pipeline',
        'pressure_bar': (10, 100),
        'diameter_mm': (100, 600),
        'economic_distance_km': (0, 1000),
    }),
})

ECONOMIC_PARAMETERS: Final[Mapping[str, object]] = MappingProxyType({
    'capex_usd_per_kw': MappingProxyType({
        ElectrolyzerType.PEM: (800, 1400),
        ElectrolyzerType.ALKALINE: (500, 900),
        ElectrolyzerType.SOEC: (1000, 2000),
    }),
    'storage_capex_usd_per_kg': MappingProxyType({
        StorageType.COMPRESSED: (500, 1000),
        StorageType.LIQUID: (1500, 2500),
    }),
    'fixed_opex_pct_capex': (2, 4),
    'electricity_cost_usd_per_kwh': (0.02, 0.10),
    'water_cost_usd_per_l': (0.001, 0.005),
    'maintenance_pct_capex': (1.5, 3),
    'plant_lifetime_years': (20, 30),
    'discount_rate': (0.05, 0.10),
    'target_lcoh_usd_per_kg': (2, 4),
})


class ConversionFactors:
    KWH_TO_MJ: Final[float] = 3.6
    MJ_TO_KWH: Final[float] = 1 / 3.6
    KWH_TO_GJ: Final[float] = 0.0036
    KG_TO_TON: Final[float] = 0.001
    KG_TO_LB: Final[float] = 2.20462
    LITER_TO_M3: Final[float] = 0.001
    LITER_TO_GALLON: Final[float] = 0.264172
    BAR_TO_PSI: Final[float] = 14.5038
    BAR_TO_MPA: Final[float] = 0.1
    MW_TO_KW: Final[float] = 1000.0
    HOURS_PER_DAY: Final[int] = 24
