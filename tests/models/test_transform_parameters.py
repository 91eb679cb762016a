"""Unit tests for TransformParameters, FlipParameters, Rect and ImageReference"""

import pytest
from image_url_builder.core import (
    ImageFormat,
    InvalidArgumentError,
    ParameterConflictError,
    RectSide,
)
from image_url_builder.models import (
    BlurParameters,
    FlipParameters,
    ImageReference,
    Rect,
    ResizeParameters,
    TransformParameters,
)


class TestTransformParameters:
    """Tests for TransformParameters class"""

    def test_default_initialization(self):
        params = TransformParameters()
        assert params.format is None
        assert params.quality is None
        assert params.resize is None
        assert params.crop is None
        assert params == TransformParameters()

    def test_differs_from_default_with_values(self):
        assert TransformParameters(grayscale=True) != TransformParameters()

    def test_resize_and_crop_rejected(self):
        """Test resize and crop cannot be combined"""
        with pytest.raises(ParameterConflictError) as exc_info:
            TransformParameters(
                resize=ResizeParameters(height=100),
                crop=Rect(left=3, top=1, right=4, bottom=2),
            )
        assert exc_info.value.parameter_names == ("resize", "crop")

    def test_format_string_converted(self):
        assert TransformParameters(format="png").format is ImageFormat.PNG

    def test_unknown_format_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            TransformParameters(format="gif")
        assert exc_info.value.parameter_name == "format"

    def test_immutable(self):
        params = TransformParameters(quality=80)
        with pytest.raises(AttributeError):
            params.quality = 90

    def test_equality(self):
        """Test identical inputs compare equal"""
        assert TransformParameters(blur=BlurParameters(radius=4)) == TransformParameters(blur=BlurParameters(radius=4))


class TestFlipParameters:
    """Tests for FlipParameters class"""

    def test_horizontal_only(self):
        flip = FlipParameters(horizontal=True)
        assert flip.horizontal is True
        assert flip.vertical is None

    def test_false_counts_as_set(self):
        flip = FlipParameters(vertical=False)
        assert flip.vertical is False

    def test_empty_flip_rejected(self):
        with pytest.raises(ParameterConflictError) as exc_info:
            FlipParameters()
        assert exc_info.value.parameter_names == ("flip",)


class TestRect:
    """Tests for Rect class"""

    def test_get_by_side(self):
        rect = Rect(left=1, top=2, right=3, bottom=4)
        assert rect.get(RectSide.LEFT) == 1
        assert rect.get(RectSide.BOTTOM) == 4



class TestImageReference:
    """Tests for ImageReference.resolve"""

    URL = "https://a.storyblok.com/f/39898/3310x2192/e4ec08624e/demo-image.jpeg"

    def test_string(self):
        assert ImageReference.resolve(self.URL) == self.URL

    def test_mapping_with_filename(self):
        assert ImageReference.resolve({"filename": self.URL, "alt": "demo"}) == self.URL

    def test_object_with_filename(self):
        class Asset:
            filename = TestImageReference.URL

        assert ImageReference.resolve(Asset()) == self.URL

    @pytest.mark.parametrize("image_ref", [None, 42, {"src": "x"}, {"filename": None}])
    def test_unsupported_reference_rejected(self, image_ref):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ImageReference.resolve(image_ref)
        assert exc_info.value.parameter_name == "image"
