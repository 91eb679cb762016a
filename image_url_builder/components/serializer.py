"""
URL serializer for image transformations.

Output grammar:

    <base_url>/<non-filter segments>/<filter segments>

Non-filter segments are "/"-joined: m, fit-in, {-}WxH{-}H, crop rectangle, smart.
Filter segments are "filters:" followed by ":"-joined name(args) tokens, or
empty when no filter applies. Numeric values are clamped on the way out so the
URL is always well formed, whatever the validator reported.
"""
from typing import Callable, Dict, List, Optional

from image_url_builder.core import (
    FilterName,
    ParameterBounds,
    ParameterName,
    SegmentToken,
    RECT_SIDES,
)
from image_url_builder.components.normalizer import ParameterNormalizer
from image_url_builder.models import Rect, TransformParameters

FLIP_SIGN = "-"


class UrlSerializer:
    """Renders TransformParameters into the image service path"""

    def __init__(self):
        # Iteration order of FilterName is the order filters appear in the URL
        self._filter_builders: Dict[FilterName, Callable[[TransformParameters], Optional[str]]] = {
            FilterName.FILL: self._build_fill_filter,
            FilterName.FORMAT: self._build_format_filter,
            FilterName.QUALITY: self._build_quality_filter,
            FilterName.FOCAL: self._build_focal_filter,
            FilterName.GRAYSCALE: self._build_grayscale_filter,
            FilterName.BLUR: self._build_blur_filter,
            FilterName.ROTATE: self._build_rotate_filter,
            FilterName.BRIGHTNESS: self._build_brightness_filter,
        }

    def serialize(self, base_url: str, params: TransformParameters) -> str:
        """
        Build the transform URL.

        Args:
            base_url: Resolved image URL
            params: Transformations to apply

        Returns:
            base_url followed by the transform path
        """
        non_filter_segments = "/".join(self.build_non_filter_segments(params))
        filter_segments = self.build_filter_segment(params)
        return f"{base_url}/{non_filter_segments}/{filter_segments}"

    def build_non_filter_segments(self, params: TransformParameters) -> List[str]:
        segments = [
            SegmentToken.MEDIA.value,
            self._build_fit_in_segment(params),
            self._build_resize_and_flip_segment(params),
            self._build_crop_segment(params),
            self._build_smart_segment(params),
        ]
        return [segment for segment in segments if segment]

    def build_filters(self, params: TransformParameters) -> List[str]:
        filters = [self._filter_builders[name](params) for name in FilterName]
        return [f for f in filters if f]

    def build_filter_segment(self, params: TransformParameters) -> str:
        filters = self.build_filters(params)
        if not filters:
            return ""
        return SegmentToken.FILTERS.value + ":".join(filters)

    # Non-filter segments

    @staticmethod
    def _build_fit_in_segment(params: TransformParameters) -> Optional[str]:
        if params.resize is not None and params.resize.fit_in:
            return SegmentToken.FIT_IN.value
        return None

    @staticmethod
    def _build_resize_and_flip_segment(params: TransformParameters) -> Optional[str]:
        resize, flip = params.resize, params.flip
        if resize is None and flip is None:
            return None

        lower, upper = ParameterBounds.dimension()
        width = ParameterNormalizer.normalize(
            lower, upper, resize.width if resize and resize.width is not None else 0,
            ParameterName.RESIZE_WIDTH.value,
        )
        height = ParameterNormalizer.normalize(
            lower, upper, resize.height if resize and resize.height is not None else 0,
            ParameterName.RESIZE_HEIGHT.value,
        )

        horizontal_sign = FLIP_SIGN if flip and flip.horizontal else ""
        vertical_sign = FLIP_SIGN if flip and flip.vertical else ""
        return f"{horizontal_sign}{width}x{vertical_sign}{height}"

    @classmethod
    def _build_crop_segment(cls, params: TransformParameters) -> Optional[str]:
        if params.crop is None:
            return None
        return cls._format_rect(params.crop, ParameterName.CROP.value)

    @staticmethod
    def _build_smart_segment(params: TransformParameters) -> Optional[str]:
        if params.resize is not None and params.resize.is_smart:
            return SegmentToken.SMART.value
        return None

    # Filters

    @staticmethod
    def _filter(name: FilterName, *args) -> str:
        return f"{name.value}({','.join(str(arg) for arg in args)})"

    def _build_fill_filter(self, params: TransformParameters) -> Optional[str]:
        if params.resize is None or params.resize.fill is None:
            return None
        return self._filter(FilterName.FILL, params.resize.fill)

    def _build_format_filter(self, params: TransformParameters) -> Optional[str]:
        if params.format is None:
            return None
        return self._filter(FilterName.FORMAT, params.format.value)

    def _build_quality_filter(self, params: TransformParameters) -> Optional[str]:
        if params.quality is None:
            return None
        lower, upper = ParameterBounds.quality()
        quality = ParameterNormalizer.normalize(lower, upper, params.quality, ParameterName.QUALITY.value)
        return self._filter(FilterName.QUALITY, quality)

    def _build_focal_filter(self, params: TransformParameters) -> Optional[str]:
        if params.resize is None or params.resize.focal_rect is None:
            return None
        rect = self._format_rect(params.resize.focal_rect, ParameterName.RESIZE_FOCAL_POINT.value)
        return self._filter(FilterName.FOCAL, rect)

    def _build_grayscale_filter(self, params: TransformParameters) -> Optional[str]:
        if not params.grayscale:
            return None
        return self._filter(FilterName.GRAYSCALE)

    def _build_blur_filter(self, params: TransformParameters) -> Optional[str]:
        if params.blur is None:
            return None
        lower, upper = ParameterBounds.blur()
        args = [ParameterNormalizer.normalize(lower, upper, params.blur.radius, ParameterName.BLUR_RADIUS.value)]
        if params.blur.sigma is not None:
            args.append(
                ParameterNormalizer.normalize(lower, upper, params.blur.sigma, ParameterName.BLUR_SIGMA.value)
            )
        return self._filter(FilterName.BLUR, *args)

    def _build_rotate_filter(self, params: TransformParameters) -> Optional[str]:
        if params.rotate is None:
            return None
        # Rounded only: non multiples of 90 are passed through
        rotate = ParameterNormalizer.round(params.rotate, ParameterName.ROTATE.value)
        return self._filter(FilterName.ROTATE, rotate)

    def _build_brightness_filter(self, params: TransformParameters) -> Optional[str]:
        if params.brightness is None:
            return None
        lower, upper = ParameterBounds.brightness()
        brightness = ParameterNormalizer.normalize(
            lower, upper, params.brightness, ParameterName.BRIGHTNESS.value
        )
        return self._filter(FilterName.BRIGHTNESS, brightness)

    @staticmethod
    def _format_rect(rect: Rect, parameter_prefix: str) -> str:
        """Format a rectangle as LxT:RxB with clamped integer coordinates"""
        lower, upper = ParameterBounds.dimension()
        left, top, right, bottom = (
            ParameterNormalizer.normalize(lower, upper, rect.get(side), f"{parameter_prefix}.{side.value}")
            for side in RECT_SIDES
        )
        return f"{left}x{top}:{right}x{bottom}"
