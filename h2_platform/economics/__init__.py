"""
H2 Platform Economics Package

Hydrogen cost estimation with:
- Type-safe, immutable Pydantic parameter/result models
- Levelized cost of hydrogen (plant and facility level)
- Transportation cost by delivery method
"""

from h2_platform.economics.models import (
    LCOHParams,
    LCOHResult,
    TransportationCostParams,
    TransportationCostResult,
    FacilityLCOHInputs,
    FacilityLCOHResult,
)
from h2_platform.economics.lcoh import (
    calculate_lcoh,
    capital_recovery_factor,
    estimate_facility_lcoh,
)
from h2_platform.economics.transport import (
    calculate_transportation_cost,
    transport_cost_rate,
)

__all__ = [
    "LCOHParams",
    "LCOHResult",
    "TransportationCostParams",
    "TransportationCostResult",
    "FacilityLCOHInputs",
    "FacilityLCOHResult",
    "calculate_lcoh",
    "capital_recovery_factor",
    "estimate_facility_lcoh",
    "calculate_transportation_cost",
    "transport_cost_rate",
]
