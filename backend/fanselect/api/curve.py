"""
API routes for curve interpolation, system curves and fan simulation on
caller-supplied performance curves.
"""

from fastapi import APIRouter, HTTPException

from fanselect.engine.comparison import align_curves
from fanselect.engine.curve import build_curve
from fanselect.engine.interpolation import interpolate, interpolate_field
from fanselect.engine.operating_point import simulate
from fanselect.engine.system_curve import sample_system_curve
from fanselect.models.comparison import AlignedRow, AlignInput
from fanselect.models.curve import InterpolateInput, InterpolateOutput
from fanselect.models.simulation import (
    SimulationInput,
    SimulationOutput,
    SystemCurveInput,
    SystemCurveOutput,
)

router = APIRouter(prefix="/api/v1", tags=["curve"])


@router.post("/interpolate", response_model=InterpolateOutput)
async def interpolate_curve(data: InterpolateInput) -> InterpolateOutput:
    """
    Evaluate a performance curve at any airflow.

    Values outside the sampled range are reported as 0 with in_range=False.
    """
    try:
        curve = build_curve(data.curve)
        in_range = bool(curve) and curve[0].airflow <= data.airflow <= curve[-1].airflow
        return InterpolateOutput(
            airflow=data.airflow,
            static_pressure=interpolate(curve, data.airflow),
            power=interpolate_field(curve, data.airflow, "power"),
            in_range=in_range,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/system-curve", response_model=SystemCurveOutput)
async def system_curve(data: SystemCurveInput) -> SystemCurveOutput:
    """Sample the quadratic system curve through the requirement point."""
    try:
        return sample_system_curve(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/simulate", response_model=SimulationOutput)
async def simulate_curve(data: SimulationInput) -> SimulationOutput:
    """
    Simulate a fan curve against a system requirement.

    Returns chart samples with system pressure and the operating point.
    An invalid requirement (airflow <= 0) yields no operating point and a
    warning rather than an error.
    """
    try:
        curve = build_curve(data.curve)
        return simulate(
            curve,
            data.requirement,
            airflow_unit=data.airflow_unit,
            pressure_unit=data.pressure_unit,
            refine=data.refine,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/align", response_model=list[AlignedRow])
async def align(data: AlignInput) -> list[AlignedRow]:
    """Evaluate several curves on the union of their sample airflows."""
    try:
        curves = {fan_id: build_curve(points) for fan_id, points in data.curves.items()}
        return align_curves(curves)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
