"""
Pydantic Models for Hydrogen Economics

Type-safe, immutable parameter and result records for levelized cost of
hydrogen (LCOH) and transportation cost calculations.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field

from h2_platform.core.constants import EconomicConstants


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class LCOHParams(_FrozenModel):
    """
    Plant-level inputs for the levelized cost of hydrogen.

    Capital is annualised with the capital recovery factor
    CRF = r / (1 - (1 + r)^-n).
    """
    capex_usd: float = Field(..., description="Capital expenditure (USD)")
    annual_opex_usd: float = Field(..., description="Annual operating expenditure (USD/yr)")
    annual_production_kg: float = Field(..., description="Annual hydrogen production (kg/yr)")
    lifetime_years: float = Field(..., description="Plant lifetime (years)")
    discount_rate: float = Field(..., description="Discount rate as a fraction (0.08 = 8%)")


class LCOHResult(_FrozenModel):
    lcoh_usd_per_kg: float = Field(..., description="Levelized cost (USD/kg H2)")
    total_npv: float = Field(..., description="Undiscounted lifetime cost: CAPEX + OPEX * lifetime (USD)")


class TransportationCostParams(_FrozenModel):
    hydrogen_kg: float = Field(..., description="Mass delivered (kg)")
    distance_km: float = Field(..., description="Delivery distance (km)")
    transport_type: str = Field(..., description="tube_trailer, tanker or pipeline")


class TransportationCostResult(_FrozenModel):
    total_cost: float = Field(..., description="Total delivery cost (USD)")
    cost_per_kg: float = Field(..., description="USD per kg delivered")
    cost_per_km: float = Field(..., description="USD per km travelled")


class FacilityLCOHInputs(_FrozenModel):
    """
    Facility-level LCOH inputs as entered for a production site.

    Annual production assumes ``availability`` of nameplate daily capacity;
    electricity use is 50 kWh/kg scaled by the electrolyzer efficiency.
    """
    capacity_kg_per_day: float = Field(..., description="Nameplate capacity (kg/day)")
    electrolyzer_efficiency: float = Field(70.0, description="Electrolyzer efficiency (percent)")
    electricity_cost_usd_per_kwh: float = Field(..., description="Electricity price (USD/kWh)")
    water_cost_usd_per_liter: float = Field(..., description="Water price (USD/L)")
    maintenance_fraction: float = Field(..., description="Maintenance cost per year as a fraction of CAPEX")
    capital_cost_usd: float = Field(..., description="Capital cost (USD)")
    operating_years: float = Field(..., description="Operating lifetime (years)")
    availability: float = Field(EconomicConstants.FACILITY_AVAILABILITY, description="Fraction of the year at nameplate output")
    discount_rate: float = Field(EconomicConstants.FACILITY_DISCOUNT_RATE, description="Discount rate as a fraction")
    water_l_per_kg: float = Field(EconomicConstants.FACILITY_WATER_L_PER_KG_H2, description="Practical water use (L/kg H2)")


class FacilityLCOHResult(_FrozenModel):
    annual_production_kg: float
    energy_kwh_per_kg: float
    annual_electricity_cost_usd: float
    annual_water_cost_usd: float
    annual_maintenance_cost_usd: float
    annual_opex_usd: float
    lcoh: LCOHResult

    @property
    def lcoh_usd_per_kg(self) -> float:
        return self.lcoh.lcoh_usd_per_kg

    def to_summary_dict(self) -> Dict[str, Any]:
        """Return summary figures for quick review."""
        return {
            "lcoh": f"${self.lcoh.lcoh_usd_per_kg:,.2f}/kg",
            "annual_production": f"{self.annual_production_kg:,.0f} kg",
            "annual_opex": f"${self.annual_opex_usd:,.0f}",
        }
