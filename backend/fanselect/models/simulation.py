"""
Pydantic models for system curves and fan performance simulation.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from fanselect.config import AirflowUnit, PressureUnit, SECONDS_PER_HOUR
from fanselect.models.base import CamelModel
from fanselect.models.curve import OperatingPoint, PerformancePoint, SimulatedPoint


class SystemRequirement(CamelModel):
    """The user's design point: airflow must be > 0 for a usable system curve."""

    airflow: float = Field(..., description="Required airflow (m³/h)")
    pressure: float = Field(..., description="Static pressure at that airflow (Pa)")


class SystemCurve(CamelModel):
    """
    Quadratic system resistance curve anchored at one design point.

      Δp_sys(Q) = k × (Q / 3600)²     Q in m³/h, k in Pa/(m³/s)²
    """

    model_config = ConfigDict(frozen=True)

    k: float
    requirement: SystemRequirement

    def __call__(self, airflow: float) -> float:
        q = airflow / SECONDS_PER_HOUR
        return self.k * q * q


class SystemCurveInput(CamelModel):
    """Input for sampling a system curve."""

    requirement: SystemRequirement
    max_airflow: Optional[float] = Field(
        default=None,
        description="Upper end of the sampled range (m³/h); defaults to 2× requirement airflow",
    )
    n_points: int = Field(default=21, ge=2, le=500)


class SystemCurveOutput(CamelModel):
    """Sampled system curve, or valid=False when the requirement is unusable."""

    valid: bool
    k: Optional[float] = None
    points: list[tuple[float, float]] = Field(default_factory=list)  # (m³/h, Pa)


class SimulationInput(CamelModel):
    """Input for simulating a fan against a system requirement."""

    curve: list[PerformancePoint]
    requirement: SystemRequirement
    airflow_unit: AirflowUnit = AirflowUnit.M3H
    pressure_unit: PressureUnit = PressureUnit.PA
    refine: bool = False


class SimulationOutput(CamelModel):
    """
    Result of a fan simulation.

    All airflow and pressure values are expressed in the requested units;
    power stays in kW and efficiency in %.
    """

    airflow_unit: AirflowUnit
    pressure_unit: PressureUnit
    requirement: SystemRequirement
    system_curve_k: Optional[float] = None
    chart_points: list[SimulatedPoint]
    operating_point: Optional[OperatingPoint] = None
    warnings: list[str] = Field(default_factory=list)
