"""
Unit conversion for airflow and pressure.

Base units are m³/h (airflow) and Pa (pressure). Each conversion is the
exact inverse of its pair:

  CFM  = m³/h × 0.588578
  inWG = Pa   × 0.00401463

No validation is applied: negative and zero values convert like any other.
"""

from typing import Union

from fanselect.config import AirflowUnit, PressureUnit, M3H_TO_CFM, PA_TO_INWG

Unit = Union[AirflowUnit, PressureUnit]


def m3h_to_cfm(value: float) -> float:
    return value * M3H_TO_CFM


def cfm_to_m3h(value: float) -> float:
    return value / M3H_TO_CFM


def pa_to_inwg(value: float) -> float:
    return value * PA_TO_INWG


def inwg_to_pa(value: float) -> float:
    return value / PA_TO_INWG


def airflow_to_display(value: float, unit: AirflowUnit) -> float:
    """Convert a base airflow (m³/h) to the given display unit."""
    if unit == AirflowUnit.CFM:
        return m3h_to_cfm(value)
    return value


def airflow_from_display(value: float, unit: AirflowUnit) -> float:
    """Convert an airflow in the given display unit back to m³/h."""
    if unit == AirflowUnit.CFM:
        return cfm_to_m3h(value)
    return value


def pressure_to_display(value: float, unit: PressureUnit) -> float:
    """Convert a base pressure (Pa) to the given display unit."""
    if unit == PressureUnit.INWG:
        return pa_to_inwg(value)
    return value


def pressure_from_display(value: float, unit: PressureUnit) -> float:
    """Convert a pressure in the given display unit back to Pa."""
    if unit == PressureUnit.INWG:
        return inwg_to_pa(value)
    return value


def _parse_unit(unit: Union[Unit, str]) -> Unit:
    if isinstance(unit, (AirflowUnit, PressureUnit)):
        return unit
    for enum_cls in (AirflowUnit, PressureUnit):
        try:
            return enum_cls(unit)
        except ValueError:
            continue
    raise ValueError(f"Unknown unit: {unit!r}")


def convert(value: float, from_unit: Union[Unit, str], to_unit: Union[Unit, str]) -> float:
    """
    Convert a value between two airflow units or two pressure units.

    Raises ValueError for unknown units or when mixing an airflow unit with
    a pressure unit.
    """
    src = _parse_unit(from_unit)
    dst = _parse_unit(to_unit)

    if type(src) is not type(dst):
        raise ValueError(
            f"Cannot convert between {src.value} and {dst.value}: "
            "units measure different quantities"
        )
    if src == dst:
        return value

    if isinstance(src, AirflowUnit):
        return airflow_to_display(airflow_from_display(value, src), dst)
    return pressure_to_display(pressure_from_display(value, src), dst)
