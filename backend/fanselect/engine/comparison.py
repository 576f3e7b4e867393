"""
Multi-fan comparison.

Fans are measured at different airflows, so their curves cannot share a
chart axis directly. align_curves builds the sorted union of every fan's
sample airflows and evaluates each fan at each of them with the curve
interpolator (exact sample, linear interpolation, or 0 outside that fan's
range).
"""

from typing import Callable, Mapping, Optional, Sequence, Union

from fanselect.config import (
    AirflowUnit,
    PressureUnit,
    MIN_COMPARE_FANS,
    MAX_COMPARE_FANS,
)
from fanselect.engine.interpolation import interpolate
from fanselect.engine.units import airflow_to_display, pressure_to_display
from fanselect.models.comparison import AlignedRow, ComparisonOutput, SpecRow
from fanselect.models.curve import PerformancePoint
from fanselect.models.fan import Fan


def align_curves(curves: Mapping[int, Sequence[PerformancePoint]]) -> list[AlignedRow]:
    """
    Evaluate every curve on the union of all curves' sample airflows.

    Returns one row per distinct airflow, ascending.
    """
    airflows = sorted({p.airflow for curve in curves.values() for p in curve})
    return [
        AlignedRow(
            airflow=airflow,
            pressure_by_fan={
                fan_id: interpolate(curve, airflow) for fan_id, curve in curves.items()
            },
        )
        for airflow in airflows
    ]


# (key, label, highlight, value getter); getters receive the fan and the units
_SPEC_ROWS: list[tuple[str, str, Optional[str], Callable]] = [
    ("type", "Fan type", None, lambda f, au, pu: f.type),
    ("manufacturer", "Manufacturer", None, lambda f, au, pu: f.manufacturer),
    ("max_airflow", "Max airflow ({au})", "max",
     lambda f, au, pu: airflow_to_display(f.max_airflow, au)),
    ("max_static_pressure", "Max static pressure ({pu})", "max",
     lambda f, au, pu: pressure_to_display(f.max_static_pressure, pu)),
    ("power_consumption", "Power consumption (kW)", "min",
     lambda f, au, pu: f.power_consumption),
    ("motor_rpm", "Motor speed (RPM)", None, lambda f, au, pu: f.motor_rpm),
    ("noise_level", "Noise level (dB)", "min", lambda f, au, pu: f.noise_level),
    ("temp_range", "Operating temperature (°C)", None,
     lambda f, au, pu: f"{f.min_temp:g} to {f.max_temp:g}"),
    ("dimensions", "Dimensions (HxWxD mm)", None,
     lambda f, au, pu: f"{f.dimensions.height:g}x{f.dimensions.width:g}x{f.dimensions.depth:g}"),
    ("electrical", "Electrical", None,
     lambda f, au, pu: (
         f"{f.electrical_specs.voltage:g}V / {f.electrical_specs.phase}Ph / "
         f"{f.electrical_specs.frequency:g}Hz"
     )),
    ("price", "Estimated price (rial)", "min", lambda f, au, pu: f.price),
]


def _spec_row(
    key: str,
    label: str,
    highlight: Optional[str],
    fans: Sequence[Fan],
    values: list[Union[float, str]],
) -> SpecRow:
    row = SpecRow(key=key, label=label, values=values, highlight=highlight)
    if highlight is None:
        return row

    numeric = [(fan.id, v) for fan, v in zip(fans, values) if isinstance(v, (int, float))]
    if len(numeric) < 2:
        return row

    pick = max if highlight == "max" else min
    best = pick(v for _, v in numeric)
    row.best_value = best
    row.best_fan_ids = [fan_id for fan_id, v in numeric if v == best]
    return row


def build_spec_rows(
    fans: Sequence[Fan], airflow_unit: AirflowUnit, pressure_unit: PressureUnit
) -> list[SpecRow]:
    """Side-by-side specification table with the best value of each ranked row."""
    rows = []
    for key, label, highlight, getter in _SPEC_ROWS:
        values = [getter(fan, airflow_unit, pressure_unit) for fan in fans]
        rows.append(_spec_row(
            key,
            label.format(au=airflow_unit.value, pu=pressure_unit.value),
            highlight,
            fans,
            values,
        ))
    return rows


def compare_fans(
    fans: Sequence[Fan],
    airflow_unit: AirflowUnit = AirflowUnit.M3H,
    pressure_unit: PressureUnit = PressureUnit.PA,
) -> ComparisonOutput:
    """
    Compare 2-4 fans on a shared airflow axis and a specification table.

    Raises ValueError for fewer than 2 or more than 4 fans, or a fan listed
    twice.
    """
    if not MIN_COMPARE_FANS <= len(fans) <= MAX_COMPARE_FANS:
        raise ValueError(
            f"Comparison needs between {MIN_COMPARE_FANS} and {MAX_COMPARE_FANS} fans, "
            f"got {len(fans)}"
        )
    fan_ids = [fan.id for fan in fans]
    if len(set(fan_ids)) != len(fan_ids):
        raise ValueError("Each fan can only be compared once")

    aligned = align_curves({fan.id: fan.performance_curve for fan in fans})
    rows = [
        AlignedRow(
            airflow=airflow_to_display(row.airflow, airflow_unit),
            pressure_by_fan={
                fan_id: pressure_to_display(p, pressure_unit)
                for fan_id, p in row.pressure_by_fan.items()
            },
        )
        for row in aligned
    ]

    return ComparisonOutput(
        fan_ids=fan_ids,
        airflow_unit=airflow_unit,
        pressure_unit=pressure_unit,
        rows=rows,
        spec_rows=build_spec_rows(fans, airflow_unit, pressure_unit),
    )
