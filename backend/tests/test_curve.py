"""
Tests for performance curve construction and editing.

Covers efficiency derivation, sorting, duplicate rejection, immutable point
edits, next-point suggestion and resampling.
"""

import pytest

from fanselect.engine.curve import (
    calculate_efficiency,
    build_curve,
    add_point,
    remove_point,
    replace_point,
    suggest_next_point,
    resample_curve,
)
from fanselect.engine.interpolation import interpolate
from fanselect.models.curve import PerformancePoint


def point(q, p, w=1.0):
    return PerformancePoint(airflow=q, static_pressure=p, power=w)


class TestEfficiency:
    def test_known_value(self):
        """1 m³/s × 1000 Pa / 2000 W = 50%."""
        assert calculate_efficiency(3600.0, 1000.0, 2.0) == 50.0

    def test_rounded_to_one_decimal(self):
        # 2.7778 m³/s × 400 Pa / 3400 W = 32.68%
        assert calculate_efficiency(10000.0, 400.0, 3.4) == 32.7

    @pytest.mark.parametrize("q, p, w", [(0, 400, 3.4), (10000, 0, 3.4), (10000, 400, 0)])
    def test_zero_inputs_give_zero(self, q, p, w):
        assert calculate_efficiency(q, p, w) == 0.0


class TestBuildCurve:
    def test_sorted_by_airflow(self):
        curve = build_curve([point(25000, 150), point(0, 480), point(10000, 400)])
        assert [p.airflow for p in curve] == [0, 10000, 25000]

    def test_efficiency_derived(self):
        curve = build_curve([point(3600, 1000, 2.0)])
        assert curve[0].efficiency == 50.0

    def test_supplied_efficiency_is_overwritten(self):
        p = PerformancePoint(airflow=3600, static_pressure=1000, power=2.0, efficiency=99.0)
        assert build_curve([p])[0].efficiency == 50.0

    def test_duplicate_airflow_rejected(self):
        with pytest.raises(ValueError, match="Duplicate airflow"):
            build_curve([point(10000, 400), point(10000, 380)])

    def test_returns_tuple(self):
        assert isinstance(build_curve([point(0, 480)]), tuple)

    def test_empty(self):
        assert build_curve([]) == ()


class TestCurveEdits:
    def setup_method(self):
        self.curve = build_curve([point(0, 480), point(10000, 400), point(25000, 150)])

    def test_add_point_keeps_order(self):
        new = add_point(self.curve, point(5000, 450))
        assert [p.airflow for p in new] == [0, 5000, 10000, 25000]

    def test_add_point_leaves_original_untouched(self):
        add_point(self.curve, point(5000, 450))
        assert len(self.curve) == 3

    def test_add_duplicate_rejected(self):
        with pytest.raises(ValueError, match="Duplicate airflow"):
            add_point(self.curve, point(10000, 300))

    def test_remove_point(self):
        new = remove_point(self.curve, 10000)
        assert [p.airflow for p in new] == [0, 25000]

    def test_remove_missing_point(self):
        with pytest.raises(ValueError, match="No point"):
            remove_point(self.curve, 12345)

    def test_last_point_is_never_removed(self):
        """A curve always keeps at least one sample."""
        single = build_curve([point(0, 480)])
        assert remove_point(single, 0) == single

    def test_remove_missing_point_from_single_point_curve(self):
        """A missing airflow is reported even when only one sample is left."""
        single = build_curve([point(0, 480)])
        with pytest.raises(ValueError, match="No point"):
            remove_point(single, 12345)

    def test_replace_point_resorts(self):
        new = replace_point(self.curve, 0, point(30000, 50))
        assert [p.airflow for p in new] == [10000, 25000, 30000]
        assert new[-1].static_pressure == 50


class TestSuggestNextPoint:
    def test_empty_curve(self):
        p = suggest_next_point(())
        assert (p.airflow, p.static_pressure, p.power) == (0.0, 0.0, 0.0)

    def test_steps_from_last_point(self):
        curve = build_curve([point(0, 480, 2.5), point(10000, 400, 3.4)])
        p = suggest_next_point(curve)
        assert p.airflow == 15000.0
        assert p.static_pressure == 360.0
        assert p.power == pytest.approx(3.9)
        assert p.efficiency == calculate_efficiency(15000.0, 360.0, p.power)


class TestResample:
    def setup_method(self):
        self.curve = build_curve([
            point(0, 480, 2.5), point(10000, 400, 3.4), point(25000, 150, 4.5),
        ])

    def test_point_count_and_range(self):
        resampled = resample_curve(self.curve, 6)
        assert len(resampled) == 6
        assert resampled[0].airflow == 0
        assert resampled[-1].airflow == 25000

    def test_values_follow_interpolation(self):
        resampled = resample_curve(self.curve, 6)
        for p in resampled:
            assert p.static_pressure == pytest.approx(interpolate(self.curve, p.airflow))

    def test_end_samples_preserved(self):
        resampled = resample_curve(self.curve, 11)
        assert resampled[0].static_pressure == 480
        assert resampled[-1].static_pressure == 150

    def test_short_curve_returned_as_is(self):
        single = build_curve([point(0, 480)])
        assert resample_curve(single, 10) == single

    def test_too_few_points_rejected(self):
        with pytest.raises(ValueError, match="at least 2"):
            resample_curve(self.curve, 1)
