"""
Fan operating-cost estimate.

  annual_cost = P [kW] × hours/day × days/year × tariff [rial/kWh]
"""

from fanselect.config import (
    DEFAULT_ENERGY_COST,
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_DAYS_PER_YEAR,
)
from fanselect.models.economics import EnergyCostOutput


def annual_energy_cost(
    power_kw: float,
    cost_per_kwh: float = DEFAULT_ENERGY_COST,
    hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    days_per_year: float = DEFAULT_DAYS_PER_YEAR,
) -> EnergyCostOutput:
    if power_kw < 0:
        raise ValueError("power_kw must be non-negative")
    if cost_per_kwh < 0:
        raise ValueError("cost_per_kwh must be non-negative")
    if not 0 <= hours_per_day <= 24:
        raise ValueError("hours_per_day must be between 0 and 24")
    if not 0 <= days_per_year <= 366:
        raise ValueError("days_per_year must be between 0 and 366")

    annual_hours = hours_per_day * days_per_year
    annual_kwh = power_kw * annual_hours

    return EnergyCostOutput(
        power_kw=power_kw,
        cost_per_kwh=cost_per_kwh,
        hours_per_day=hours_per_day,
        days_per_year=days_per_year,
        annual_hours=annual_hours,
        annual_energy_kwh=round(annual_kwh, 4),
        annual_cost=round(annual_kwh * cost_per_kwh, 2),
    )
