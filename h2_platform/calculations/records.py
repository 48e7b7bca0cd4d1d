"""
Immutable value records passed into and returned from the calculators.

Records are frozen dataclasses: every call allocates a fresh result and
callers cannot mutate it afterwards.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from h2_platform.core.types import ElectrolyzerTypeLike


@dataclass(frozen=True)
class HydrogenProductionInput:
    """
    Electrolysis run parameters.

    Attributes:
        energy_input: Electrical energy supplied (kWh, >= 0).
        efficiency: Electrolyzer efficiency (percent, 0-100).
        electrolyzer_type: PEM, Alkaline or SOEC. PEM when omitted.
        temperature: Stack temperature (°C). No correction when omitted.
        pressure: Operating pressure (bar). Recorded, not used in the yield.
    """
    energy_input: float
    efficiency: float
    electrolyzer_type: Optional[ElectrolyzerTypeLike] = None
    temperature: Optional[float] = None
    pressure: Optional[float] = None


@dataclass(frozen=True)
class HydrogenProductionResult:
    hydrogen_produced: float   # kg
    energy_efficiency: float   # percent, echo of input
    water_required: float      # liters (theoretical)
    carbon_offset: float       # kg CO2 (green displacement)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WaterConsumptionResult:
    theoretical: float  # liters
    practical: float    # liters

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CarbonOffsetResult:
    total_offset: float   # kg CO2
    offset_per_kg: float  # kg CO2 per kg H2

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CompressionEnergyResult:
    energy_required: float     # kWh
    energy_per_kg: float       # kWh/kg
    compression_ratio: float   # dimensionless

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
