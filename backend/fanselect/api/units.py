"""
API routes for unit conversion.
"""

from fastapi import APIRouter, HTTPException

from fanselect.engine.units import convert
from fanselect.models.units import ConvertInput, ConvertOutput

router = APIRouter(prefix="/api/v1", tags=["units"])


@router.post("/convert", response_model=ConvertOutput)
async def convert_value(data: ConvertInput) -> ConvertOutput:
    """Convert an airflow (m³/h, CFM) or pressure (Pa, inWG) value."""
    try:
        value = convert(data.value, data.from_unit, data.to_unit)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ConvertOutput(value=value, unit=data.to_unit)
