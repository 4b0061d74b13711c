"""Tests for one-dimensional intervals."""

import pytest
from hypothesis import given, strategies as st

from stitchclass.regions import Interval, InvalidIntervalError


def intervals():
    return st.tuples(
        st.integers(min_value=-1000, max_value=1000),
        st.integers(min_value=0, max_value=500),
    ).map(lambda t: Interval(t[0], t[0] + t[1]))


class TestIntervalConstruction:
    def test_valid_interval(self):
        interval = Interval(2, 7)
        assert interval.start == 2
        assert interval.end == 7
        assert interval.length == 5

    def test_degenerate_interval_allowed(self):
        assert Interval(3, 3).length == 0

    def test_reversed_bounds_rejected(self):
        with pytest.raises(InvalidIntervalError):
            Interval(10, 0)

    def test_non_numeric_bounds_rejected(self):
        with pytest.raises(InvalidIntervalError):
            Interval("a", 3)  # type: ignore[arg-type]
        with pytest.raises(InvalidIntervalError):
            Interval(0, None)  # type: ignore[arg-type]

    def test_nan_rejected(self):
        with pytest.raises(InvalidIntervalError):
            Interval(float("nan"), 1.0)

    def test_invalid_interval_is_value_error(self):
        with pytest.raises(ValueError):
            Interval(1, 0)

    def test_interval_immutable(self):
        interval = Interval(0, 1)
        with pytest.raises(AttributeError):
            interval.start = 5  # type: ignore

    def test_contains(self):
        interval = Interval(0, 10)
        assert interval.contains(0)
        assert interval.contains(10)
        assert not interval.contains(10.5)

    def test_str(self):
        assert str(Interval(0, 10)) == "[0, 10]"


class TestIntervalIntersection:
    def test_overlapping(self):
        assert Interval(0, 10).intersects(Interval(5, 15))

    def test_disjoint(self):
        assert not Interval(0, 10).intersects(Interval(20, 30))
        assert not Interval(0, 10).intersects(Interval(20, 30), exclusive=True)

    def test_touching_boundaries(self):
        """Closed intervals overlap at a shared boundary, exclusive ones do not."""
        a = Interval(0, 10)
        b = Interval(10, 20)
        assert a.intersects(b)
        assert not a.intersects(b, exclusive=True)

    def test_zero_length_interval(self):
        """A point overlaps closed ranges but is an empty partition when exclusive."""
        point = Interval(5, 5)
        around = Interval(0, 10)

        assert point.intersects(point)
        assert point.intersects(around)
        assert not point.intersects(point, exclusive=True)
        assert not point.intersects(around, exclusive=True)
        assert not around.intersects(point, exclusive=True)

    def test_containment(self):
        outer = Interval(0, 100)
        inner = Interval(10, 20)
        assert outer.intersects(inner)
        assert outer.intersects(inner, exclusive=True)
        assert inner.intersects(outer, exclusive=True)

    def test_missing_other_rejected(self):
        with pytest.raises(InvalidIntervalError):
            Interval(0, 1).intersects(None)  # type: ignore[arg-type]

    @given(a=intervals(), b=intervals(), exclusive=st.booleans())
    def test_intersection_symmetric(self, a, b, exclusive):
        """For any two intervals, intersection does not depend on argument order."""
        assert a.intersects(b, exclusive) == b.intersects(a, exclusive)

    @given(a=intervals(), b=intervals())
    def test_exclusive_implies_inclusive(self, a, b):
        """Exclusive overlap is never looser than inclusive overlap."""
        if a.intersects(b, exclusive=True):
            assert a.intersects(b)
