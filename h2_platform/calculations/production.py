"""
Hydrogen production, water consumption and carbon offset calculators.

Production yield:
    H2 (kg) = E (kWh) * (eta / 100 * f_T) / e_spec (kWh/kg)

where ``e_spec`` is the specific energy consumption of the electrolyzer
technology and ``f_T`` a mild temperature gain above 25 °C. Water and
carbon side outputs are derived from the same hydrogen mass so the three
figures of a result always agree.
"""

import logging
from typing import Any, Mapping, Optional, Union

from h2_platform.calculations.records import (
    CarbonOffsetResult,
    HydrogenProductionInput,
    HydrogenProductionResult,
    WaterConsumptionResult,
)
from h2_platform.core.constants import (
    DEFAULT_ELECTROLYZER_TYPE,
    ELECTROLYZER_ENERGY_KWH_PER_KG,
    PHYSICAL_CONSTANTS,
    ProductionConstants,
)
from h2_platform.core.enums import ElectrolyzerType, ProductionType
from h2_platform.core.exceptions import InvalidInputError
from h2_platform.core.types import ElectrolyzerTypeLike, MassKg, ProductionTypeLike

logger = logging.getLogger(__name__)


def resolve_electrolyzer_type(electrolyzer_type: Optional[ElectrolyzerTypeLike]) -> ElectrolyzerType:
    """
    Resolve an optional electrolyzer type to a table key.

    Omitted and unrecognised types both resolve to PEM.
    """
    if electrolyzer_type is None:
        return DEFAULT_ELECTROLYZER_TYPE
    try:
        return ElectrolyzerType(electrolyzer_type)
    except ValueError:
        logger.debug(
            f"Unknown electrolyzer type {electrolyzer_type!r}, "
            f"using {DEFAULT_ELECTROLYZER_TYPE.value}"
        )
        return DEFAULT_ELECTROLYZER_TYPE


def electrolyzer_energy_per_kg(electrolyzer_type: Optional[ElectrolyzerTypeLike] = None) -> float:
    """Specific energy consumption (kWh/kg H2) for an electrolyzer type."""
    return ELECTROLYZER_ENERGY_KWH_PER_KG[resolve_electrolyzer_type(electrolyzer_type)]


def temperature_factor(temperature: Optional[float]) -> float:
    """Efficiency multiplier for operation above the 25 °C reference."""
    if temperature is None or temperature <= ProductionConstants.TEMPERATURE_REFERENCE_C:
        return 1.0
    excess = temperature - ProductionConstants.TEMPERATURE_REFERENCE_C
    return 1.0 + excess * ProductionConstants.TEMPERATURE_COEFFICIENT_PER_C


def _coerce_input(
    production_input: Union[HydrogenProductionInput, Mapping[str, Any], None],
    overrides: Mapping[str, Any],
) -> HydrogenProductionInput:
    if production_input is None:
        return HydrogenProductionInput(**overrides)
    if isinstance(production_input, HydrogenProductionInput):
        if overrides:
            raise TypeError("Pass either a HydrogenProductionInput or keyword arguments, not both")
        return production_input
    return HydrogenProductionInput(**{**production_input, **overrides})


def calculate_hydrogen_production(
    production_input: Union[HydrogenProductionInput, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> HydrogenProductionResult:
    """
    Calculate hydrogen produced by an electrolysis run.

    Args:
        production_input: Run parameters, as a record or a mapping with the
            same field names. Keyword arguments may be used instead.

    Returns:
        HydrogenProductionResult with the produced mass and the water and
        carbon figures for that mass.

    Raises:
        InvalidInputError: If energy input is negative or efficiency is
            outside [0, 100].

    Example:
        >>> result = calculate_hydrogen_production(energy_input=1000, efficiency=70,
        ...                                        electrolyzer_type='PEM')
        >>> round(result.hydrogen_produced, 2)
        14.0
    """
    params = _coerce_input(production_input, kwargs)

    if params.energy_input < 0:
        raise InvalidInputError("Energy input must be positive")
    if params.efficiency < 0 or params.efficiency > 100:
        raise InvalidInputError("Efficiency must be between 0 and 100")

    energy_per_kg = electrolyzer_energy_per_kg(params.electrolyzer_type)
    effective_efficiency = params.efficiency / 100 * temperature_factor(params.temperature)

    hydrogen_produced = params.energy_input * effective_efficiency / energy_per_kg

    water = calculate_water_consumption(hydrogen_produced)
    offset = calculate_carbon_offset(hydrogen_produced, ProductionType.GREEN)

    return HydrogenProductionResult(
        hydrogen_produced=hydrogen_produced,
        energy_efficiency=params.efficiency,
        water_required=water.theoretical,
        carbon_offset=offset.total_offset,
    )


def calculate_water_consumption(hydrogen_kg: MassKg) -> WaterConsumptionResult:
    """
    Water needed to electrolyse a hydrogen mass.

    Theoretical use is the 9 L/kg stoichiometric figure; practical use adds a
    fixed 10 % for system losses. Negative masses are passed through.
    """
    theoretical = hydrogen_kg * PHYSICAL_CONSTANTS.WATER_CONSUMPTION_L_PER_KG_H2
    practical = theoretical * ProductionConstants.WATER_PRACTICAL_OVERHEAD_FACTOR
    return WaterConsumptionResult(theoretical=theoretical, practical=practical)


def carbon_offset_per_kg(production_type: ProductionTypeLike = ProductionType.GREEN) -> float:
    """kg CO2 avoided per kg of low-carbon H2 displacing gray H2."""
    try:
        production_type = ProductionType(production_type)
    except ValueError:
        raise InvalidInputError(
            f"Production type must be 'green' or 'blue', got {production_type!r}"
        ) from None

    gray = PHYSICAL_CONSTANTS.GRAY_HYDROGEN_CO2_KG_PER_KG_H2
    if production_type is ProductionType.BLUE:
        # Net of blue hydrogen's own residual emissions
        return gray - PHYSICAL_CONSTANTS.BLUE_HYDROGEN_CO2_KG_PER_KG_H2
    return gray


def calculate_carbon_offset(
    hydrogen_kg: MassKg,
    production_type: ProductionTypeLike = ProductionType.GREEN,
) -> CarbonOffsetResult:
    """Emissions avoided by green or blue hydrogen relative to gray hydrogen."""
    offset_per_kg = carbon_offset_per_kg(production_type)
    return CarbonOffsetResult(
        total_offset=hydrogen_kg * offset_per_kg,
        offset_per_kg=offset_per_kg,
    )
