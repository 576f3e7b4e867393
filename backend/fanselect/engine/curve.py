"""
Performance curve construction and editing.

Curves are immutable: every edit returns a new tuple sorted by ascending
airflow. Efficiency is always derived from airflow, static pressure and
power:

  η = (Q [m³/s] × Δp [Pa]) / (P [W]) × 100
"""

from typing import Iterable

import numpy as np

from fanselect.config import (
    SECONDS_PER_HOUR,
    DEFAULT_RESAMPLE_POINTS,
    NEXT_POINT_AIRFLOW_STEP,
    NEXT_POINT_PRESSURE_FACTOR,
    NEXT_POINT_POWER_STEP,
)
from fanselect.engine.interpolation import interpolate, interpolate_field
from fanselect.models.curve import PerformanceCurve, PerformancePoint


def calculate_efficiency(airflow: float, static_pressure: float, power: float) -> float:
    """Static efficiency in percent, rounded to 0.1; 0 when any input is zero."""
    if not airflow or not static_pressure or not power:
        return 0.0
    airflow_m3s = airflow / SECONDS_PER_HOUR
    power_w = power * 1000.0
    return round(airflow_m3s * static_pressure / power_w * 100.0, 1)


def with_efficiency(point: PerformancePoint) -> PerformancePoint:
    """Return a copy of the point with its efficiency re-derived."""
    efficiency = calculate_efficiency(point.airflow, point.static_pressure, point.power)
    return point.model_copy(update={"efficiency": efficiency})


def build_curve(points: Iterable[PerformancePoint]) -> PerformanceCurve:
    """
    Build a sorted, validated curve from arbitrary points.

    Raises ValueError if two points share the same airflow, since
    interpolation between them would be undefined.
    """
    ordered = sorted(points, key=lambda p: p.airflow)
    for prev, curr in zip(ordered, ordered[1:]):
        if prev.airflow == curr.airflow:
            raise ValueError(
                f"Duplicate airflow {curr.airflow:g} m³/h in performance curve"
            )
    return tuple(with_efficiency(p) for p in ordered)


def add_point(curve: PerformanceCurve, point: PerformancePoint) -> PerformanceCurve:
    return build_curve((*curve, point))


def remove_point(curve: PerformanceCurve, airflow: float) -> PerformanceCurve:
    """
    Remove the sample at the given airflow.

    Raises ValueError when no sample sits at that airflow. The last remaining
    point is never removed; the curve is returned as is.
    """
    remaining = [p for p in curve if p.airflow != airflow]
    if len(remaining) == len(curve):
        raise ValueError(f"No point at airflow {airflow:g} m³/h")
    if not remaining:
        return curve
    return build_curve(remaining)


def replace_point(
    curve: PerformanceCurve, airflow: float, point: PerformancePoint
) -> PerformanceCurve:
    """Replace the sample at the given airflow; the curve is re-sorted."""
    remaining = [p for p in curve if p.airflow != airflow]
    if len(remaining) == len(curve):
        raise ValueError(f"No point at airflow {airflow:g} m³/h")
    return build_curve((*remaining, point))


def suggest_next_point(curve: PerformanceCurve) -> PerformancePoint:
    """
    Propose the next editor row after the last sample.

    Airflow steps up and is rounded to 100 m³/h, pressure drops by 10% and is
    rounded to 10 Pa, power steps up by 0.5 kW.
    """
    if not curve:
        return PerformancePoint(airflow=0.0, static_pressure=0.0, power=0.0, efficiency=0.0)

    last = curve[-1]
    airflow = round((last.airflow + NEXT_POINT_AIRFLOW_STEP) / 100.0) * 100.0
    pressure = max(0.0, round(last.static_pressure * NEXT_POINT_PRESSURE_FACTOR / 10.0) * 10.0)
    power = round(last.power + NEXT_POINT_POWER_STEP, 1)
    return with_efficiency(
        PerformancePoint(airflow=airflow, static_pressure=pressure, power=power)
    )


def resample_curve(
    curve: PerformanceCurve, n_points: int = DEFAULT_RESAMPLE_POINTS
) -> PerformanceCurve:
    """
    Resample the curve at evenly spaced airflows across its sampled range.

    Pressure and power are linearly interpolated; efficiency is re-derived.
    Both end samples are kept exactly.
    """
    if n_points < 2:
        raise ValueError("n_points must be at least 2")
    if len(curve) < 2:
        return tuple(curve)

    airflows = np.linspace(curve[0].airflow, curve[-1].airflow, n_points)
    points = []
    for q in airflows:
        q = float(q)
        points.append(PerformancePoint(
            airflow=q,
            static_pressure=interpolate(curve, q),
            power=interpolate_field(curve, q, "power"),
        ))
    return build_curve(points)
