"""
Tests for airflow and pressure unit conversion.
"""

import pytest

from fanselect.config import AirflowUnit, PressureUnit
from fanselect.engine.units import (
    m3h_to_cfm,
    cfm_to_m3h,
    pa_to_inwg,
    inwg_to_pa,
    airflow_to_display,
    airflow_from_display,
    pressure_to_display,
    pressure_from_display,
    convert,
)


class TestAirflowConversion:
    def test_m3h_to_cfm(self):
        assert m3h_to_cfm(1000.0) == pytest.approx(588.578)

    def test_cfm_to_m3h(self):
        assert cfm_to_m3h(588.578) == pytest.approx(1000.0)

    def test_zero(self):
        assert m3h_to_cfm(0.0) == 0.0
        assert cfm_to_m3h(0.0) == 0.0

    def test_negative_values_are_not_rejected(self):
        assert m3h_to_cfm(-100.0) == pytest.approx(-58.8578)

    def test_round_trip(self):
        for x in [1.0, 1500.0, 25000.0, 123456.789]:
            assert cfm_to_m3h(m3h_to_cfm(x)) == pytest.approx(x, rel=1e-6)


class TestPressureConversion:
    def test_pa_to_inwg(self):
        """249.09 Pa ≈ 1 inWG."""
        assert pa_to_inwg(249.0889) == pytest.approx(1.0, rel=1e-4)

    def test_inwg_to_pa(self):
        assert inwg_to_pa(1.0) == pytest.approx(249.0889, rel=1e-4)

    def test_round_trip(self):
        for x in [0.5, 50.0, 400.0, 2000.0]:
            assert inwg_to_pa(pa_to_inwg(x)) == pytest.approx(x, rel=1e-6)


class TestDisplayHelpers:
    def test_base_units_are_identity(self):
        assert airflow_to_display(15000.0, AirflowUnit.M3H) == 15000.0
        assert pressure_to_display(400.0, PressureUnit.PA) == 400.0
        assert airflow_from_display(15000.0, AirflowUnit.M3H) == 15000.0
        assert pressure_from_display(400.0, PressureUnit.PA) == 400.0

    def test_cfm_display(self):
        assert airflow_to_display(10000.0, AirflowUnit.CFM) == pytest.approx(5885.78)
        assert airflow_from_display(5885.78, AirflowUnit.CFM) == pytest.approx(10000.0)

    def test_inwg_display(self):
        assert pressure_to_display(1000.0, PressureUnit.INWG) == pytest.approx(4.01463)
        assert pressure_from_display(4.01463, PressureUnit.INWG) == pytest.approx(1000.0)


class TestConvert:
    def test_airflow_enum_units(self):
        assert convert(1000.0, AirflowUnit.M3H, AirflowUnit.CFM) == pytest.approx(588.578)

    def test_string_units(self):
        assert convert(588.578, "CFM", "m³/h") == pytest.approx(1000.0)
        assert convert(1000.0, "Pa", "inWG") == pytest.approx(4.01463)
        assert convert(4.01463, "inWG", "Pa") == pytest.approx(1000.0)

    def test_same_unit_is_identity(self):
        assert convert(123.4, "Pa", "Pa") == 123.4

    def test_mixed_quantities_rejected(self):
        with pytest.raises(ValueError, match="different quantities"):
            convert(100.0, "Pa", "CFM")

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError, match="Unknown unit"):
            convert(100.0, "mmH2O", "Pa")
