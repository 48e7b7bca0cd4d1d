"""
Configuration dataclasses for calculation scenarios.

A scenario describes one electrolysis run plus the optional downstream
steps (storage, transport, economics) the runner should evaluate for it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from h2_platform.core.enums import ElectrolyzerType, ProductionType, StorageType, TransportType


@dataclass
class StorageConfig:
    """Storage step: compression to a target pressure or liquefaction."""
    method: str = StorageType.COMPRESSED.value
    target_pressure_bar: float = 350.0
    source_pressure_bar: float = 1.0

    def validate(self) -> None:
        if self.method not in (StorageType.COMPRESSED.value, StorageType.LIQUID.value):
            raise ValueError(f"Storage method must be 'compressed' or 'liquid', got {self.method!r}")
        if self.method == StorageType.COMPRESSED.value:
            if self.source_pressure_bar <= 0:
                raise ValueError(f"Source pressure must be positive, got {self.source_pressure_bar}")
            if self.target_pressure_bar <= 0:
                raise ValueError(f"Target pressure must be positive, got {self.target_pressure_bar}")


@dataclass
class TransportConfig:
    """Delivery step."""
    distance_km: float = 100.0
    transport_type: str = TransportType.TUBE_TRAILER.value

    def validate(self) -> None:
        if self.distance_km <= 0:
            raise ValueError(f"Transport distance must be positive, got {self.distance_km}")


@dataclass
class EconomicsConfig:
    """
    LCOH step.

    When ``annual_production_kg`` is omitted it is derived from the
    scenario's hydrogen output times ``runs_per_year``.
    """
    capex_usd: float = 0.0
    annual_opex_usd: float = 0.0
    lifetime_years: float = 20.0
    discount_rate: float = 0.08
    annual_production_kg: Optional[float] = None
    runs_per_year: float = 365.0

    def validate(self) -> None:
        if self.capex_usd < 0 or self.annual_opex_usd < 0:
            raise ValueError("CAPEX and OPEX must be non-negative")
        if self.lifetime_years <= 0:
            raise ValueError(f"Lifetime must be positive, got {self.lifetime_years}")
        if self.discount_rate <= 0:
            raise ValueError(f"Discount rate must be positive, got {self.discount_rate}")
        if self.annual_production_kg is not None and self.annual_production_kg <= 0:
            raise ValueError(f"Annual production must be positive, got {self.annual_production_kg}")
        if self.runs_per_year <= 0:
            raise ValueError(f"Runs per year must be positive, got {self.runs_per_year}")


@dataclass
class ScenarioConfig:
    """Single electrolysis scenario."""
    name: str
    energy_input_kwh: float
    electrolyzer_efficiency: float
    electrolyzer_type: str = ElectrolyzerType.PEM.value
    temperature_celsius: Optional[float] = None
    pressure_bar: Optional[float] = None
    current_density_acm2: Optional[float] = None
    production_type: str = ProductionType.GREEN.value
    apply_performance_model: bool = False
    storage: Optional[StorageConfig] = None
    transport: Optional[TransportConfig] = None
    economics: Optional[EconomicsConfig] = None

    def validate(self) -> None:
        if not self.name:
            raise ValueError("Scenario name must be specified")
        if self.energy_input_kwh < 0:
            raise ValueError(f"Energy input must be non-negative, got {self.energy_input_kwh}")
        if not 0 <= self.electrolyzer_efficiency <= 100:
            raise ValueError(f"Efficiency must be in [0, 100], got {self.electrolyzer_efficiency}")
        if self.production_type not in (ProductionType.GREEN.value, ProductionType.BLUE.value):
            raise ValueError(f"Production type must be 'green' or 'blue', got {self.production_type!r}")
        for step in (self.storage, self.transport, self.economics):
            if step is not None:
                step.validate()


@dataclass
class ScenarioFile:
    """Top-level scenario file."""
    name: str = "H2 Scenarios"
    version: str = "1.0"
    description: str = ""
    scenarios: List[ScenarioConfig] = field(default_factory=list)

    def validate(self) -> None:
        if not self.scenarios:
            raise ValueError("At least one scenario must be defined")
        names = [s.name for s in self.scenarios]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate scenario names: {', '.join(duplicates)}")
        for scenario in self.scenarios:
            scenario.validate()
