"""
Pydantic models for fan performance curves.

A performance curve is an immutable tuple of PerformancePoint sorted by
ascending airflow with unique airflow values (see engine.curve.build_curve).
"""

from typing import Optional

from pydantic import ConfigDict, Field

from fanselect.models.base import CamelModel


class PerformancePoint(CamelModel):
    """One measured sample on a fan's characteristic curve."""

    model_config = ConfigDict(frozen=True)

    airflow: float = Field(..., ge=0, description="Airflow (m³/h)")
    static_pressure: float = Field(..., ge=0, description="Static pressure (Pa)")
    power: float = Field(default=0.0, ge=0, description="Shaft power (kW)")
    efficiency: Optional[float] = Field(
        default=None,
        description="Static efficiency (%), derived from the other three fields",
    )


PerformanceCurve = tuple[PerformancePoint, ...]


class SimulatedPoint(PerformancePoint):
    """A curve sample with the system-curve pressure at the same airflow."""

    system_pressure: Optional[float] = None  # Pa; None without a system curve


class OperatingPoint(SimulatedPoint):
    """The sample where the fan curve and the system curve meet."""

    system_pressure: float
    pressure_difference: float  # |static_pressure - system_pressure| (Pa)
    interpolated: bool = False  # True when located between samples


class InterpolateInput(CamelModel):
    """Input for evaluating a curve at an arbitrary airflow."""

    curve: list[PerformancePoint]
    airflow: float  # m³/h


class InterpolateOutput(CamelModel):
    """Curve values at the queried airflow; zeros outside the sampled range."""

    airflow: float
    static_pressure: float
    power: float
    in_range: bool
