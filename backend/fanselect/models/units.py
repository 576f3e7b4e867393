"""
Pydantic models for unit conversion.
"""

from fanselect.models.base import CamelModel


class ConvertInput(CamelModel):
    value: float
    from_unit: str  # "m³/h", "CFM", "Pa" or "inWG"
    to_unit: str


class ConvertOutput(CamelModel):
    value: float
    unit: str
