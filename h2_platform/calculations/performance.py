"""
Electrolyzer performance adjusters.

Each technology is modelled as a flat optimal plateau with a linear penalty
outside it:

    f(x) = 1                          if low <= x <= high
    f(x) = 1 - k * |x_centre - x|     otherwise

Band edges are inclusive and the factors are not clamped.

Reference bands:
    PEM       temperature 50-80 °C (centre 65, k=0.002), pressure 1 % per 100 bar
    Alkaline  current density 200-400 (centre 300, k=0.0005),
              temperature 70-90 °C (centre 80, k=0.003)
    SOEC      temperature 750-850 °C (centre 800, k=0.005)
"""

from typing import Optional

from h2_platform.calculations.production import resolve_electrolyzer_type
from h2_platform.core.enums import ElectrolyzerType
from h2_platform.core.types import ElectrolyzerTypeLike


def plateau_factor(value: float, low: float, high: float, centre: float, slope: float) -> float:
    """Derating factor: 1.0 inside [low, high], linear penalty from ``centre`` outside."""
    if low <= value <= high:
        return 1.0
    return 1.0 - abs(centre - value) * slope


def calculate_pem_performance(base_efficiency: float, temperature_c: float, pressure_bar: float) -> float:
    temp_factor = plateau_factor(temperature_c, 50, 80, centre=65, slope=0.002)
    # Higher pressure slightly reduces efficiency
    pressure_factor = 1.0 - (pressure_bar / 100) * 0.01
    return base_efficiency * temp_factor * pressure_factor


def calculate_alkaline_performance(base_efficiency: float, current_density: float, temperature_c: float) -> float:
    current_factor = plateau_factor(current_density, 200, 400, centre=300, slope=0.0005)
    temp_factor = plateau_factor(temperature_c, 70, 90, centre=80, slope=0.003)
    return base_efficiency * current_factor * temp_factor


def calculate_soec_performance(base_efficiency: float, temperature_c: float) -> float:
    temp_factor = plateau_factor(temperature_c, 750, 850, centre=800, slope=0.005)
    return base_efficiency * temp_factor


def adjust_efficiency(
    electrolyzer_type: Optional[ElectrolyzerTypeLike],
    base_efficiency: float,
    *,
    temperature_c: Optional[float] = None,
    pressure_bar: Optional[float] = None,
    current_density: Optional[float] = None,
) -> float:
    """
    Apply the derating curve of an electrolyzer technology.

    Operating parameters that are not given default to the centre of the
    technology's optimal band (and zero pressure for PEM), so an omitted
    parameter never penalises the efficiency.
    """
    kind = resolve_electrolyzer_type(electrolyzer_type)

    if kind is ElectrolyzerType.ALKALINE:
        return calculate_alkaline_performance(
            base_efficiency,
            300.0 if current_density is None else current_density,
            80.0 if temperature_c is None else temperature_c,
        )
    if kind is ElectrolyzerType.SOEC:
        return calculate_soec_performance(
            base_efficiency,
            800.0 if temperature_c is None else temperature_c,
        )
    return calculate_pem_performance(
        base_efficiency,
        65.0 if temperature_c is None else temperature_c,
        0.0 if pressure_bar is None else pressure_bar,
    )
