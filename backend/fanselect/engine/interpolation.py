"""
Linear interpolation on a fan performance curve.

Given the discrete samples of a curve, returns the value of a field
(static pressure by default) at an arbitrary airflow:

  1. an exact airflow match returns the sample's value unchanged;
  2. otherwise the nearest samples below (lo) and above (hi) the query are
     joined by a straight line;
  3. a query outside the sampled range, or on an empty curve, returns 0.

There is no extrapolation. Curves are short (typically < 20 points), so each
call is a plain linear scan.
"""

from typing import Optional, Sequence

from fanselect.models.curve import PerformancePoint

_FIELDS = ("static_pressure", "power", "efficiency")


def interpolate_between(
    x: float, p1: tuple[float, float], p2: tuple[float, float]
) -> float:
    """Two-point linear interpolation; returns y1 when x1 == x2."""
    x1, y1 = p1
    x2, y2 = p2
    if x1 == x2:
        return y1
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def _bracket(
    curve: Sequence[PerformancePoint], airflow: float
) -> tuple[Optional[PerformancePoint], Optional[PerformancePoint], Optional[PerformancePoint]]:
    """Return (exact, lo, hi) samples around the query airflow."""
    exact = lo = hi = None
    for point in curve:
        if point.airflow == airflow:
            if exact is None:
                exact = point
        elif point.airflow < airflow:
            if lo is None or point.airflow > lo.airflow:
                lo = point
        elif hi is None or point.airflow < hi.airflow:
            hi = point
    return exact, lo, hi


def interpolate_field(
    curve: Sequence[PerformancePoint], airflow: float, field: str
) -> float:
    """
    Interpolate any numeric field of the curve at the given airflow.

    A missing efficiency is treated as 0.
    """
    if field not in _FIELDS:
        raise ValueError(f"Cannot interpolate field '{field}'")

    exact, lo, hi = _bracket(curve, airflow)
    if exact is not None:
        return getattr(exact, field) or 0.0
    if lo is None or hi is None:
        return 0.0

    return interpolate_between(
        airflow,
        (lo.airflow, getattr(lo, field) or 0.0),
        (hi.airflow, getattr(hi, field) or 0.0),
    )


def interpolate(curve: Sequence[PerformancePoint], airflow: float) -> float:
    """Fan static pressure (Pa) at the given airflow (m³/h)."""
    return interpolate_field(curve, airflow, "static_pressure")
