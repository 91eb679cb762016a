"""Tests for core enums and parameter bounds"""
import math
from image_url_builder.core.enums import (
    FilterName,
    ImageFormat,
    ParameterBounds,
    SegmentToken,
    RectSide,
    RECT_SIDES,
    CROP_VALIDATION_ORDER,
)


class TestImageFormat:
    """Test suite for ImageFormat enum"""

    def test_values(self):
        """Test all accepted formats"""
        assert {f.value for f in ImageFormat} == {"webp", "jpeg", "png"}


class TestFilterName:
    """Test suite for FilterName enum"""

    def test_filter_order(self):
        """Test filters are declared in URL order"""
        assert [f.value for f in FilterName] == [
            "fill", "format", "quality", "focal", "grayscale", "blur", "rotate", "brightness",
        ]


class TestSegmentToken:
    """Test suite for SegmentToken enum"""

    def test_values(self):
        assert SegmentToken.MEDIA.value == "m"
        assert SegmentToken.FIT_IN.value == "fit-in"
        assert SegmentToken.SMART.value == "smart"
        assert SegmentToken.FILTERS.value == "filters:"


class TestRectOrders:
    """Test suite for rectangle side orders"""

    def test_declared_order(self):
        assert RECT_SIDES == (RectSide.LEFT, RectSide.TOP, RectSide.RIGHT, RectSide.BOTTOM)

    def test_crop_validation_order(self):
        assert [s.value for s in CROP_VALIDATION_ORDER] == ["bottom", "left", "right", "top"]


class TestParameterBounds:
    """Test suite for ParameterBounds"""

    def test_bounds(self):
        assert ParameterBounds.quality() == (0, 100)
        assert ParameterBounds.brightness() == (-100, 100)
        assert ParameterBounds.blur() == (0, 150)
        assert ParameterBounds.dimension() == (0, math.inf)
        assert ParameterBounds.ROTATION_STEP == 90
