"""Compression, liquefaction and storage utilization calculators."""

import logging

from h2_platform.calculations.records import CompressionEnergyResult
from h2_platform.core.constants import COMPRESSION_ENERGY_KWH_PER_KG, CompressionConstants
from h2_platform.core.exceptions import DegenerateInputError
from h2_platform.core.types import EnergyKWh, MassKg, Percent, PressureBar

logger = logging.getLogger(__name__)


def compression_energy_per_kg(to_pressure_bar: PressureBar) -> float:
    """
    Specific compression energy (kWh/kg) to reach a target pressure.

    Exact table pressures (200, 350, 700, 870 bar) use tabulated values.
    Any other pressure scales linearly from the 700 bar point.
    """
    tabulated = COMPRESSION_ENERGY_KWH_PER_KG.get(to_pressure_bar)
    if tabulated is not None:
        return tabulated

    logger.debug(f"No tabulated compression energy for {to_pressure_bar} bar, using linear fallback")
    return (
        to_pressure_bar / CompressionConstants.FALLBACK_REFERENCE_PRESSURE_BAR
    ) * CompressionConstants.FALLBACK_REFERENCE_ENERGY_KWH_PER_KG


def calculate_compression_energy(
    hydrogen_kg: MassKg,
    from_pressure_bar: PressureBar,
    to_pressure_bar: PressureBar,
) -> CompressionEnergyResult:
    """
    Energy to compress a hydrogen mass to a target pressure.

    Args:
        hydrogen_kg: Mass to compress (kg).
        from_pressure_bar: Suction pressure (bar).
        to_pressure_bar: Discharge pressure (bar).

    Raises:
        DegenerateInputError: If the suction pressure is zero (infinite ratio).
    """
    if from_pressure_bar == 0:
        raise DegenerateInputError(
            "Inlet pressure must be non-zero to compute a compression ratio"
        )

    energy_per_kg = compression_energy_per_kg(to_pressure_bar)
    return CompressionEnergyResult(
        energy_required=hydrogen_kg * energy_per_kg,
        energy_per_kg=energy_per_kg,
        compression_ratio=to_pressure_bar / from_pressure_bar,
    )


def calculate_liquefaction_energy(hydrogen_kg: MassKg) -> EnergyKWh:
    """Liquefaction energy (kWh) at a flat 11 kWh/kg."""
    return hydrogen_kg * CompressionConstants.LIQUEFACTION_ENERGY_KWH_PER_KG


def calculate_storage_utilization(current_level_kg: MassKg, total_capacity_kg: MassKg) -> Percent:
    """Fill level as a percentage of capacity; 0 for a zero-capacity store."""
    if total_capacity_kg == 0:
        return 0
    return (current_level_kg / total_capacity_kg) * 100
