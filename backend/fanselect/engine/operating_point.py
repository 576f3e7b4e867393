"""
Fan operating point solver and performance simulation.

The operating point is where the fan's performance curve meets the system
resistance curve. The baseline solver evaluates the system curve at each of
the fan's own samples and picks the sample with the smallest pressure
difference:

  diff_i = |Δp_fan(Q_i) − k × (Q_i / 3600)²|

Ties go to the lower airflow. The result is only as fine as the fan's
samples; refine_operating_point locates the actual crossing between two
samples with scipy root-finding.
"""

import logging
import math
from typing import Optional, Sequence

from scipy.optimize import brentq

from fanselect.config import (
    AirflowUnit,
    PressureUnit,
    DEFAULT_REQUIREMENT_FRACTION,
)
from fanselect.engine.curve import calculate_efficiency
from fanselect.engine.interpolation import interpolate, interpolate_field
from fanselect.engine.system_curve import build_system_curve
from fanselect.engine.units import airflow_to_display, pressure_to_display
from fanselect.models.curve import OperatingPoint, PerformancePoint, SimulatedPoint
from fanselect.models.fan import Fan
from fanselect.models.simulation import (
    SimulationOutput,
    SystemCurve,
    SystemRequirement,
)

logger = logging.getLogger(__name__)


def evaluate_system_curve(
    curve: Sequence[PerformancePoint], system_curve: SystemCurve
) -> list[SimulatedPoint]:
    """Attach the system-curve pressure to every sample of the fan curve."""
    return [
        SimulatedPoint(
            **point.model_dump(),
            system_pressure=system_curve(point.airflow),
        )
        for point in curve
    ]


def solve_operating_point(
    curve: Sequence[PerformancePoint], system_curve: Optional[SystemCurve]
) -> Optional[OperatingPoint]:
    """
    Find the fan sample closest to the system curve.

    Returns None for a missing system curve or an empty fan curve.
    """
    if system_curve is None or not curve:
        return None

    points = evaluate_system_curve(curve, system_curve)
    best = points[0]
    min_diff = abs(best.static_pressure - best.system_pressure)
    for point in points[1:]:
        diff = abs(point.static_pressure - point.system_pressure)
        if diff < min_diff:
            min_diff = diff
            best = point

    return OperatingPoint(**best.model_dump(), pressure_difference=min_diff)


def refine_operating_point(
    curve: Sequence[PerformancePoint], system_curve: Optional[SystemCurve]
) -> Optional[OperatingPoint]:
    """
    Locate the crossing of the interpolated fan curve and the system curve.

    Searches adjacent sample pairs for a sign change of
    Δp_fan(Q) − Δp_sys(Q) and solves it with Brent's method. Power is
    interpolated and efficiency re-derived at the crossing. Falls back to
    the sampled solver when the curves do not cross inside the sampled range.
    """
    if system_curve is None or not curve:
        return None

    def objective(airflow: float) -> float:
        return interpolate(curve, airflow) - system_curve(airflow)

    for lo, hi in zip(curve, curve[1:]):
        f_lo = lo.static_pressure - system_curve(lo.airflow)
        f_hi = hi.static_pressure - system_curve(hi.airflow)
        if not (math.isfinite(f_lo) and math.isfinite(f_hi)):
            continue
        if f_lo == 0.0 or f_hi == 0.0:
            # The crossing sits exactly on a sample
            return solve_operating_point(curve, system_curve)
        if (f_lo > 0) == (f_hi > 0):
            continue

        airflow = brentq(objective, lo.airflow, hi.airflow, xtol=1e-8)
        pressure = interpolate(curve, airflow)
        power = interpolate_field(curve, airflow, "power")
        system_pressure = system_curve(airflow)
        return OperatingPoint(
            airflow=airflow,
            static_pressure=pressure,
            power=power,
            efficiency=calculate_efficiency(airflow, pressure, power),
            system_pressure=system_pressure,
            pressure_difference=abs(pressure - system_pressure),
            interpolated=True,
        )

    logger.debug("No crossing between samples; using the closest sample instead")
    return solve_operating_point(curve, system_curve)


def default_requirement(fan: Fan) -> SystemRequirement:
    """
    Initial design point offered by the simulator for a fan.

    Airflow is 60% of the rated maximum rounded to 100 m³/h; pressure is
    taken from the first curve sample at or beyond that airflow, or half the
    rated static pressure when there is none.
    """
    target = fan.max_airflow * DEFAULT_REQUIREMENT_FRACTION
    airflow = round(target / 100.0) * 100.0

    pressure = None
    for point in fan.performance_curve:
        if point.airflow >= target:
            pressure = point.static_pressure
            break
    if not pressure:
        pressure = fan.max_static_pressure * 0.5

    return SystemRequirement(airflow=airflow, pressure=pressure)


def _to_display(
    point: SimulatedPoint, airflow_unit: AirflowUnit, pressure_unit: PressureUnit
) -> dict:
    data = point.model_dump()
    data["airflow"] = airflow_to_display(point.airflow, airflow_unit)
    data["static_pressure"] = pressure_to_display(point.static_pressure, pressure_unit)
    if point.system_pressure is not None:
        data["system_pressure"] = pressure_to_display(point.system_pressure, pressure_unit)
    if "pressure_difference" in data:
        data["pressure_difference"] = pressure_to_display(
            data["pressure_difference"], pressure_unit
        )
    return data


def simulate(
    curve: Sequence[PerformancePoint],
    requirement: SystemRequirement,
    airflow_unit: AirflowUnit = AirflowUnit.M3H,
    pressure_unit: PressureUnit = PressureUnit.PA,
    refine: bool = False,
) -> SimulationOutput:
    """
    Simulate a fan curve against a system requirement.

    Returns the chart samples (with system pressure when a system curve
    exists), the operating point and any warnings, in the requested units.
    """
    warnings: list[str] = []
    system_curve = build_system_curve(requirement)

    if system_curve is None:
        logger.warning(
            "Invalid system requirement (airflow=%s m³/h, pressure=%s Pa); "
            "no operating point",
            requirement.airflow,
            requirement.pressure,
        )
        if requirement.airflow <= 0:
            warnings.append("Requirement airflow must be greater than 0.")
        else:
            warnings.append("Requirement is outside the computable range.")
        chart = [SimulatedPoint(**p.model_dump()) for p in curve]
        operating_point = None
    else:
        chart = evaluate_system_curve(curve, system_curve)
        if refine:
            operating_point = refine_operating_point(curve, system_curve)
        else:
            operating_point = solve_operating_point(curve, system_curve)

    if not curve:
        warnings.append("Fan has no performance data.")
    elif operating_point is not None and not operating_point.interpolated:
        if operating_point.airflow in (curve[0].airflow, curve[-1].airflow):
            warnings.append(
                "Operating point lies at the edge of the sampled curve; "
                "the fan may not meet this requirement."
            )

    return SimulationOutput(
        airflow_unit=airflow_unit,
        pressure_unit=pressure_unit,
        requirement=requirement,
        system_curve_k=system_curve.k if system_curve is not None else None,
        chart_points=[
            SimulatedPoint(**_to_display(p, airflow_unit, pressure_unit)) for p in chart
        ],
        operating_point=(
            OperatingPoint(**_to_display(operating_point, airflow_unit, pressure_unit))
            if operating_point is not None else None
        ),
        warnings=warnings,
    )
