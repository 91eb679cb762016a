"""Unit tests for ParameterNormalizer"""
import math
import pytest
import numpy as np
from image_url_builder.components.normalizer import ParameterNormalizer, normalize
from image_url_builder.core import InvalidArgumentError


class TestNormalize:
    """Tests for rounding and clamping"""

    def test_value_within_bounds_unchanged(self):
        """Test integers inside the bounds pass through"""
        assert normalize(0, 100, 42) == 42

    def test_value_above_upper_bound_clamped(self):
        assert normalize(0, 100, 101) == 100

    def test_value_below_lower_bound_clamped(self):
        assert normalize(0, 100, -1) == 0

    def test_negative_range(self):
        assert normalize(-100, 100, -170) == -100
        assert normalize(-100, 100, 170) == 100

    def test_fraction_rounded_to_nearest(self):
        assert normalize(0, 150, 2.454) == 2
        assert normalize(0, 150, 2.6) == 3

    def test_half_rounds_up(self):
        """Test .5 rounds towards positive infinity"""
        assert normalize(0, 100, 50.5) == 51
        assert normalize(0, 100, 0.5) == 1
        assert normalize(-100, 100, -2.5) == -2

    def test_rounding_happens_before_clamping(self):
        """Test 100.4 rounds to 100 and stays in range"""
        assert normalize(0, 100, 100.4) == 100

    def test_unbounded_upper(self):
        """Test dimension bounds with no upper limit"""
        assert normalize(0, math.inf, 14.2) == 14
        assert normalize(0, math.inf, 123456) == 123456
        assert normalize(0, math.inf, -13) == 0

    def test_returns_python_int(self):
        result = normalize(0, 100, 42.0)
        assert isinstance(result, int)
        assert result == 42

    def test_numpy_scalar_accepted(self):
        assert normalize(0, 100, np.float64(99.6)) == 100

    def test_numpy_integer_accepted(self):
        assert normalize(0, 100, np.int64(50)) == 50
        assert normalize(0, 100, np.int32(150)) == 100

    def test_large_integer_kept_exact(self):
        """Test integers beyond float precision are not rounded through a float"""
        assert normalize(0, math.inf, 2 ** 53 + 1) == 2 ** 53 + 1

    def test_integer_too_large_for_float(self):
        assert normalize(0, math.inf, 10 ** 400) == 10 ** 400
        assert normalize(0, 100, 10 ** 400) == 100
        assert normalize(-100, 100, -10 ** 400) == -100


class TestNormalizeInvalidInput:
    """Tests for input that cannot be normalized"""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize(0, 100, value)
        assert "finite" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["10", None, True, [1], np.bool_(True)])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize(0, 100, value)

    def test_parameter_name_in_error(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ParameterNormalizer.normalize(0, 100, float("nan"), "quality")
        assert exc_info.value.parameter_name == "quality"


class TestRound:
    """Tests for rounding without clamping"""

    def test_round_does_not_clamp(self):
        assert ParameterNormalizer.round(60) == 60
        assert ParameterNormalizer.round(-450) == -450
        assert ParameterNormalizer.round(89.7) == 90
