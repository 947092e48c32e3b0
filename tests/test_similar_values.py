"""Tests for the similar-values (run-length) strategy."""

import math

from tspack.codec.similar import similar_values_pack, similar_values_refine


SENSOR_SAMPLES = [
    (35.0, 0.03),
    (59.0, 0.03),
    (71.0, 0.04),
    (83.0, 0.05),
    (95.0, 0.05),
    (107.0, 0.05),
    (119.0, 0.05),
    (130.0, 0.06),
    (142.0, 0.07),
    (166.0, 0.07),
    (178.0, 0.07),
    (214.0, 0.07),
    (226.0, 0.08),
    (250.0, 0.08),
    (261.0, 0.09),
]


class TestSimilarValuesPack:
    """Test similar_values_pack()."""

    def test_exact_runs(self):
        """Equal consecutive values collapse into one range."""
        samples = [(0.0, 100.0), (0.1, 100.0), (0.2, 100.0),
                   (0.3, 101.0), (0.4, 101.0), (0.5, 100.0)]
        assert similar_values_pack(samples, 0.0) == [
            ((0.0, 0.2), 100.0),
            ((0.3, 0.4), 101.0),
            ((0.5, 0.5), 100.0),
        ]

    def test_three_digit_precision(self):
        """A tight epsilon keeps every distinct reading apart."""
        assert similar_values_pack(SENSOR_SAMPLES, 0.001) == [
            ((35.0, 59.0), 0.03),
            ((71.0, 71.0), 0.04),
            ((83.0, 119.0), 0.05),
            ((130.0, 130.0), 0.06),
            ((142.0, 214.0), 0.07),
            ((226.0, 250.0), 0.08),
            ((261.0, 261.0), 0.09),
        ]

    def test_two_digit_precision(self):
        """A wider epsilon folds neighbouring readings into the run's first value."""
        assert similar_values_pack(SENSOR_SAMPLES, 0.02) == [
            ((35.0, 71.0), 0.03),
            ((83.0, 130.0), 0.05),
            ((142.0, 261.0), 0.07),
        ]

    def test_compares_against_run_start(self):
        """Slow drift opens a new run once it leaves the first value's tolerance."""
        samples = [(0.0, 1.0), (1.0, 1.4), (2.0, 1.8), (3.0, 2.2)]
        assert similar_values_pack(samples, 0.5) == [
            ((0.0, 1.0), 1.0),
            ((2.0, 3.0), 1.8),
        ]

    def test_nan_runs(self):
        """NaN values form a run with each other."""
        samples = [(0.0, float("nan")), (1.0, float("nan")), (2.0, 5.0)]
        packed = similar_values_pack(samples, 0.0)
        assert len(packed) == 2
        assert packed[0][0] == (0.0, 1.0)
        assert math.isnan(packed[0][1])
        assert packed[1] == ((2.0, 2.0), 5.0)

    def test_infinities_do_not_form_runs(self):
        """Repeated infinities each stay a point range."""
        inf = float("inf")
        samples = [(0.0, inf), (1.0, inf), (2.0, 5.0)]
        assert similar_values_pack(samples, 0.0) == [
            ((0.0, 0.0), inf),
            ((1.0, 1.0), inf),
            ((2.0, 2.0), 5.0),
        ]

    def test_empty(self):
        """Empty input packs to nothing."""
        assert similar_values_pack([], 0.1) == []

    def test_single_sample(self):
        """A single sample becomes a point range."""
        assert similar_values_pack([(4.0, 2.0)], 0.0) == [((4.0, 4.0), 2.0)]


class TestSimilarValuesRefine:
    """Test similar_values_refine() on packed ranges."""

    def test_joins_close_ranges(self):
        """Ranges within epsilon of the run's value are joined."""
        ranges = [((0.0, 1.0), 10.0), ((2.0, 3.0), 10.01), ((4.0, 4.0), 12.0)]
        assert similar_values_refine(ranges, 0.05) == [
            ((0.0, 3.0), 10.0),
            ((4.0, 4.0), 12.0),
        ]

    def test_exact_keeps_distinct(self):
        """With zero epsilon distinct values stay apart."""
        ranges = [((0.0, 1.0), 10.0), ((2.0, 3.0), 10.01)]
        assert similar_values_refine(ranges, 0.0) == ranges

    def test_empty(self):
        """Empty input refines to nothing."""
        assert similar_values_refine([], 0.1) == []
