"""
Pydantic models for fan operating-cost estimates.
"""

from fanselect.models.base import CamelModel


class EnergyCostOutput(CamelModel):
    """Estimated yearly running cost of a fan at its rated power."""

    power_kw: float
    cost_per_kwh: float  # rial/kWh
    hours_per_day: float
    days_per_year: float
    annual_hours: float
    annual_energy_kwh: float
    annual_cost: float   # rial
