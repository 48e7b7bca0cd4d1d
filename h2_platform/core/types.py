"""
Type aliases for static type checking.

Units are carried in the alias name so signatures read like the formulas.
"""

from typing import TypeAlias, Union

import numpy as np
import numpy.typing as npt

from h2_platform.core.enums import ElectrolyzerType, ProductionType, TransportType

# Scalar types
MassKg: TypeAlias = float            # kg
EnergyKWh: TypeAlias = float         # kWh
PressureBar: TypeAlias = float       # bar
TemperatureC: TypeAlias = float      # °C
Percent: TypeAlias = float           # 0-100
DistanceKm: TypeAlias = float        # km
CostUSD: TypeAlias = float           # USD
VolumeLiters: TypeAlias = float      # L

# Array types
FloatArray: TypeAlias = npt.NDArray[np.float64]

# Enum-or-string inputs accepted at the API boundary
ElectrolyzerTypeLike: TypeAlias = Union[ElectrolyzerType, str]
ProductionTypeLike: TypeAlias = Union[ProductionType, str]
TransportTypeLike: TypeAlias = Union[TransportType, str]
