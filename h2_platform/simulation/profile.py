"""
Multi-day production profile.

Renewable input is modelled as a half-sine swing of ±10 % around the
nominal daily energy:

    E_i = E * (sin(i / (N - 1) * pi) * 0.2 + 0.9),   i = 0 .. N-1

and each day's hydrogen uses the same yield formula as the production
calculator.
"""

from dataclasses import dataclass
from typing import Optional
import logging

import numpy as np

from h2_platform.calculations.production import calculate_hydrogen_production, electrolyzer_energy_per_kg
from h2_platform.core.exceptions import InvalidInputError
from h2_platform.core.types import ElectrolyzerTypeLike, FloatArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductionProfile:
    days: FloatArray               # Day index 1..N
    energy_kwh: FloatArray         # Daily energy input
    hydrogen_kg: FloatArray        # Daily hydrogen output

    @property
    def total_energy_kwh(self) -> float:
        return float(self.energy_kwh.sum())

    @property
    def total_hydrogen_kg(self) -> float:
        return float(self.hydrogen_kg.sum())

    @property
    def peak_day(self) -> int:
        return int(self.days[int(np.argmax(self.hydrogen_kg))])


def simulate_weekly_profile(
    energy_input_kwh_per_day: float,
    efficiency: float,
    days: int = 7,
    electrolyzer_type: Optional[ElectrolyzerTypeLike] = None,
) -> ProductionProfile:
    """
    Daily energy and hydrogen series for a fluctuating renewable supply.

    Args:
        energy_input_kwh_per_day: Nominal daily energy (kWh).
        efficiency: Electrolyzer efficiency (percent).
        days: Number of days; at least 2.
        electrolyzer_type: PEM when omitted.

    Raises:
        InvalidInputError: If ``days < 2`` or the production inputs are invalid.
    """
    if days < 2:
        raise InvalidInputError(f"Profile needs at least 2 days, got {days}")

    # Validates energy and efficiency once for the nominal day
    calculate_hydrogen_production(
        energy_input=energy_input_kwh_per_day,
        efficiency=efficiency,
        electrolyzer_type=electrolyzer_type,
    )

    index = np.arange(days, dtype=np.float64)
    fluctuation = np.sin(index / (days - 1) * np.pi) * 0.2 + 0.9
    energy = energy_input_kwh_per_day * fluctuation
    hydrogen = energy * (efficiency / 100) / electrolyzer_energy_per_kg(electrolyzer_type)

    logger.debug(f"Simulated {days}-day profile: {hydrogen.sum():.2f} kg H2")
    return ProductionProfile(days=index + 1, energy_kwh=energy, hydrogen_kg=hydrogen)
