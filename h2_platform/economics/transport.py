"""
Transportation Cost Estimation

Simplified per-kg-per-km cost model:

    total = kg * km * rate(transport_type)

Rates (USD/kg/km): tube trailer 0.15, liquid tanker 0.25, pipeline 0.05.
Unrecognised transport types are charged at the tube trailer rate.
"""

from typing import Any, Mapping, Optional, Union
import logging

from h2_platform.core.constants import (
    DEFAULT_TRANSPORT_COST_USD_PER_KG_KM,
    TRANSPORT_COST_USD_PER_KG_KM,
)
from h2_platform.core.enums import TransportType
from h2_platform.core.exceptions import DegenerateInputError
from h2_platform.core.types import TransportTypeLike
from h2_platform.economics.models import TransportationCostParams, TransportationCostResult

logger = logging.getLogger(__name__)


def transport_cost_rate(transport_type: Optional[TransportTypeLike]) -> float:
    """Cost rate (USD per kg per km) for a transport type."""
    try:
        return TRANSPORT_COST_USD_PER_KG_KM[TransportType(transport_type)]
    except ValueError:
        pass

    logger.debug(
        f"Unknown transport type {transport_type!r}, "
        f"using default rate {DEFAULT_TRANSPORT_COST_USD_PER_KG_KM} USD/kg/km"
    )
    return DEFAULT_TRANSPORT_COST_USD_PER_KG_KM


def calculate_transportation_cost(
    params: Union[TransportationCostParams, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> TransportationCostResult:
    """
    Estimate the cost of delivering a hydrogen mass over a distance.

    Args:
        params: TransportationCostParams or a mapping with the same fields.
            Keyword arguments may be used instead.

    Raises:
        DegenerateInputError: If mass or distance is zero (per-unit costs
            undefined).
    """
    if params is None:
        params = TransportationCostParams(**kwargs)
    elif not isinstance(params, TransportationCostParams):
        params = TransportationCostParams(**{**params, **kwargs})

    if params.hydrogen_kg == 0:
        raise DegenerateInputError("Hydrogen mass must be non-zero to compute cost per kg")
    if params.distance_km == 0:
        raise DegenerateInputError("Distance must be non-zero to compute cost per km")

    rate = transport_cost_rate(params.transport_type)
    total_cost = params.hydrogen_kg * params.distance_km * rate

    return TransportationCostResult(
        total_cost=total_cost,
        cost_per_kg=total_cost / params.hydrogen_kg,
        cost_per_km=total_cost / params.distance_km,
    )
