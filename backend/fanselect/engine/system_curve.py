"""
System resistance curve model.

Duct and damper resistance is modelled with the fan affinity law: pressure
rises with the square of airflow. The single coefficient k is fixed by the
user's design point, so the curve passes exactly through it:

  q = airflow / 3600          (m³/s)
  k = pressure / q²
"""

import math
from typing import Optional

import numpy as np

from fanselect.config import SECONDS_PER_HOUR
from fanselect.models.simulation import (
    SystemCurve,
    SystemCurveInput,
    SystemCurveOutput,
    SystemRequirement,
)


def build_system_curve(requirement: SystemRequirement) -> Optional[SystemCurve]:
    """
    Build the system curve through the requirement point.

    Returns None when the requirement airflow is not positive, or when k
    cannot be represented as a finite float (airflow so small that q²
    underflows, or pressure so large that k overflows). There is then no
    meaningful curve and callers must treat it as "no operating point".
    """
    q = requirement.airflow / SECONDS_PER_HOUR
    if q <= 0 or q * q == 0:
        return None
    k = requirement.pressure / (q * q)
    if not math.isfinite(k):
        return None
    return SystemCurve(k=k, requirement=requirement)


def sample_system_curve(curve_input: SystemCurveInput) -> SystemCurveOutput:
    """Sample the system curve from zero airflow up to max_airflow."""
    system_curve = build_system_curve(curve_input.requirement)
    if system_curve is None:
        return SystemCurveOutput(valid=False)

    max_airflow = curve_input.max_airflow
    if max_airflow is None:
        max_airflow = 2.0 * curve_input.requirement.airflow
    if max_airflow <= 0:
        raise ValueError("max_airflow must be positive")

    airflows = np.linspace(0.0, max_airflow, curve_input.n_points)
    points = [
        (round(float(q), 4), round(system_curve(float(q)), 4))
        for q in airflows
    ]
    return SystemCurveOutput(valid=True, k=round(system_curve.k, 6), points=points)
