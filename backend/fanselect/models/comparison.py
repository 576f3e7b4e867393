"""
Pydantic models for multi-fan comparison.
"""

from typing import Literal, Optional, Union

from pydantic import Field

from fanselect.config import AirflowUnit, PressureUnit, MIN_COMPARE_FANS, MAX_COMPARE_FANS
from fanselect.models.base import CamelModel
from fanselect.models.curve import PerformancePoint


class AlignedRow(CamelModel):
    """Every compared fan's pressure at one shared airflow."""

    airflow: float
    pressure_by_fan: dict[int, float]


class AlignInput(CamelModel):
    """Curves to align, keyed by fan id."""

    curves: dict[int, list[PerformancePoint]]


class ComparisonInput(CamelModel):
    """Input for comparing catalog fans."""

    fan_ids: list[int] = Field(..., min_length=MIN_COMPARE_FANS, max_length=MAX_COMPARE_FANS)
    airflow_unit: AirflowUnit = AirflowUnit.M3H
    pressure_unit: PressureUnit = PressureUnit.PA


class SpecRow(CamelModel):
    """One row of the side-by-side specification table."""

    key: str
    label: str
    values: list[Union[float, str]]  # One per fan, in fan_ids order
    highlight: Optional[Literal["min", "max"]] = None
    best_value: Optional[float] = None
    best_fan_ids: list[int] = Field(default_factory=list)


class ComparisonOutput(CamelModel):
    """Aligned pressure curves plus the specification table."""

    fan_ids: list[int]
    airflow_unit: AirflowUnit
    pressure_unit: PressureUnit
    rows: list[AlignedRow]
    spec_rows: list[SpecRow]
