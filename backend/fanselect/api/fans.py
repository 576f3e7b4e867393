"""
API routes for the fan catalog: admin CRUD, customer search, per-fan
simulation, comparison and operating-cost estimates.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fanselect.config import (
    AirflowUnit,
    PressureUnit,
    DEFAULT_ENERGY_COST,
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_DAYS_PER_YEAR,
)
from fanselect.engine.catalog import FanCatalog, FanNotFoundError, filter_fans, seed_catalog
from fanselect.engine.comparison import compare_fans
from fanselect.engine.economics import annual_energy_cost
from fanselect.engine.operating_point import default_requirement, simulate
from fanselect.models.comparison import ComparisonInput, ComparisonOutput
from fanselect.models.economics import EnergyCostOutput
from fanselect.models.fan import Fan, FanBase, FanFilter
from fanselect.models.simulation import SimulationOutput, SystemRequirement

router = APIRouter(prefix="/api/v1/fans", tags=["fans"])

_catalog = seed_catalog()


def get_catalog() -> FanCatalog:
    return _catalog


def _get_fan(catalog: FanCatalog, fan_id: int) -> Fan:
    try:
        return catalog.get(fan_id)
    except FanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=list[Fan])
async def list_fans(catalog: FanCatalog = Depends(get_catalog)) -> list[Fan]:
    return catalog.all()


@router.post("", response_model=Fan, status_code=201)
async def create_fan(data: FanBase, catalog: FanCatalog = Depends(get_catalog)) -> Fan:
    return catalog.add(data)


@router.post("/batch", response_model=list[Fan], status_code=201)
async def create_fans(
    data: list[FanBase], catalog: FanCatalog = Depends(get_catalog)
) -> list[Fan]:
    """Add several fans at once, e.g. rows parsed from an import file."""
    return catalog.add_batch(data)


@router.post("/search", response_model=list[Fan])
async def search_fans(
    data: FanFilter, catalog: FanCatalog = Depends(get_catalog)
) -> list[Fan]:
    """Fans meeting the project's airflow, static pressure and temperature."""
    return filter_fans(catalog.all(), data)


@router.post("/compare", response_model=ComparisonOutput)
async def compare(
    data: ComparisonInput, catalog: FanCatalog = Depends(get_catalog)
) -> ComparisonOutput:
    """
    Compare 2-4 catalog fans.

    Returns their pressure curves on a shared airflow axis and a side-by-side
    specification table with the best value of each ranked row.
    """
    try:
        fans = catalog.get_many(data.fan_ids)
        return compare_fans(fans, data.airflow_unit, data.pressure_unit)
    except FanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/{fan_id}", response_model=Fan)
async def get_fan(fan_id: int, catalog: FanCatalog = Depends(get_catalog)) -> Fan:
    return _get_fan(catalog, fan_id)


@router.put("/{fan_id}", response_model=Fan)
async def update_fan(
    fan_id: int, data: FanBase, catalog: FanCatalog = Depends(get_catalog)
) -> Fan:
    try:
        return catalog.update(fan_id, data)
    except FanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{fan_id}", status_code=204)
async def delete_fan(fan_id: int, catalog: FanCatalog = Depends(get_catalog)) -> None:
    try:
        catalog.delete(fan_id)
    except FanNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{fan_id}/simulate", response_model=SimulationOutput)
async def simulate_fan(
    fan_id: int,
    airflow: Optional[float] = Query(default=None, description="Required airflow (m³/h)"),
    pressure: Optional[float] = Query(default=None, description="Required pressure (Pa)"),
    airflow_unit: AirflowUnit = AirflowUnit.M3H,
    pressure_unit: PressureUnit = PressureUnit.PA,
    refine: bool = False,
    catalog: FanCatalog = Depends(get_catalog),
) -> SimulationOutput:
    """
    Simulate a catalog fan against a system requirement.

    Airflow and pressure default to the fan's suggested design point.
    """
    fan = _get_fan(catalog, fan_id)
    suggested = default_requirement(fan)
    requirement = SystemRequirement(
        airflow=airflow if airflow is not None else suggested.airflow,
        pressure=pressure if pressure is not None else suggested.pressure,
    )

    try:
        return simulate(
            fan.performance_curve,
            requirement,
            airflow_unit=airflow_unit,
            pressure_unit=pressure_unit,
            refine=refine,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/{fan_id}/energy-cost", response_model=EnergyCostOutput)
async def energy_cost(
    fan_id: int,
    cost_per_kwh: float = DEFAULT_ENERGY_COST,
    hours_per_day: float = DEFAULT_HOURS_PER_DAY,
    days_per_year: float = DEFAULT_DAYS_PER_YEAR,
    catalog: FanCatalog = Depends(get_catalog),
) -> EnergyCostOutput:
    """Estimated yearly running cost at the fan's rated power."""
    fan = _get_fan(catalog, fan_id)
    try:
        return annual_energy_cost(
            fan.power_consumption, cost_per_kwh, hours_per_day, days_per_year
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
