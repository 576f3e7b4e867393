"""
Pydantic models for catalog fan records.
"""

from pydantic import Field, field_validator

from fanselect.config import (
    DEFAULT_FILTER_AIRFLOW,
    DEFAULT_FILTER_PRESSURE,
    DEFAULT_FILTER_TEMPERATURE,
)
from fanselect.engine.curve import build_curve
from fanselect.models.base import CamelModel
from fanselect.models.curve import PerformanceCurve, PerformancePoint


class ElectricalSpecs(CamelModel):
    voltage: float = 380.0   # V
    phase: int = 3
    frequency: float = 50.0  # Hz


class Dimensions(CamelModel):
    height: float = 0.0  # mm
    width: float = 0.0   # mm
    depth: float = 0.0   # mm


class FanBase(CamelModel):
    """A catalog fan without identity, as submitted by the admin editor."""

    model: str = Field(..., min_length=1)
    type: str = "Axial"
    manufacturer: str = ""
    image_url: str = ""
    description: str = ""

    # Rated values
    max_airflow: float = Field(..., ge=0, description="m³/h")
    max_static_pressure: float = Field(default=0.0, ge=0, description="Pa")
    power_consumption: float = Field(default=0.0, ge=0, description="kW")
    motor_rpm: float = 0.0
    noise_level: float = 0.0  # dB
    min_temp: float = -20.0   # °C
    max_temp: float = 60.0    # °C
    fluid_type: list[str] = Field(default_factory=list)
    price: float = 0.0        # rial

    electrical_specs: ElectricalSpecs = Field(default_factory=ElectricalSpecs)
    dimensions: Dimensions = Field(default_factory=Dimensions)

    performance_curve: PerformanceCurve = ()

    @field_validator("performance_curve", mode="after")
    @classmethod
    def _normalize_curve(cls, curve: tuple[PerformancePoint, ...]) -> PerformanceCurve:
        return build_curve(curve)


class Fan(FanBase):
    """A catalog fan with its identity."""

    id: int


class FanFilter(CamelModel):
    """Customer project requirements used to narrow the catalog."""

    airflow: float = DEFAULT_FILTER_AIRFLOW          # m³/h
    static_pressure: float = DEFAULT_FILTER_PRESSURE  # Pa
    temperature: float = DEFAULT_FILTER_TEMPERATURE   # °C
