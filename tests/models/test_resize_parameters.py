"""Unit tests for ResizeParameters and resize modes"""

import pytest
from image_url_builder.core import InvalidArgumentError, ParameterConflictError
from image_url_builder.models import (
    FitInMode,
    FocalPointMode,
    PlainMode,
    Rect,
    ResizeParameters,
    SMART,
)


class TestResizeParameters:
    """Tests for ResizeParameters class"""

    def test_default_mode_is_plain(self):
        """Test ResizeParameters default initialization"""
        resize = ResizeParameters(width=200)
        assert resize.mode == PlainMode()
        assert resize.fit_in is False
        assert resize.fill is None
        assert resize.focal_point is None
        assert resize.is_smart is False

    def test_has_both_dimensions(self):
        assert ResizeParameters(height=1, width=2).has_both_dimensions is True
        assert ResizeParameters(height=1).has_both_dimensions is False

    def test_no_dimensions_rejected(self):
        """Test at least one dimension is required"""
        with pytest.raises(ParameterConflictError) as exc_info:
            ResizeParameters()
        assert "resize.height" in exc_info.value.parameter_names
        assert "resize.width" in exc_info.value.parameter_names

    def test_fit_in_with_fill(self):
        resize = ResizeParameters(height=200, width=200, mode=FitInMode(fill="CCCCCC"))
        assert resize.fit_in is True
        assert resize.fill == "CCCCCC"
        assert resize.focal_point is None

    def test_fit_in_requires_both_dimensions(self):
        with pytest.raises(ParameterConflictError):
            ResizeParameters(height=100, mode=FitInMode())

    def test_focal_point_requires_both_dimensions(self):
        with pytest.raises(ParameterConflictError):
            ResizeParameters(width=100, mode=FocalPointMode(Rect(left=1, top=4, right=3, bottom=2)))

    def test_focal_rect(self):
        rect = Rect(left=100, top=200, right=400, bottom=300)
        resize = ResizeParameters(height=200, width=300, mode=FocalPointMode(rect))
        assert resize.focal_point == rect
        assert resize.focal_rect == rect
        assert resize.is_smart is False
        assert resize.fit_in is False

    def test_smart_focal_point(self):
        resize = ResizeParameters(height=130, width=600, mode=FocalPointMode(SMART))
        assert resize.is_smart is True
        assert resize.focal_point == "smart"
        assert resize.focal_rect is None


class TestFocalPointMode:
    """Tests for FocalPointMode"""

    def test_unknown_keyword_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            FocalPointMode("center")
        assert exc_info.value.parameter_name == "resize.focal_point"

    def test_non_rect_rejected(self):
        with pytest.raises(InvalidArgumentError):
            FocalPointMode({"left": 1, "top": 2, "right": 3, "bottom": 4})
