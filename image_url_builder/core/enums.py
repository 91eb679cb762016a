import math
from enum import Enum


class ImageFormat(Enum):
    """Output formats accepted by the image service"""
    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"


class SegmentToken(Enum):
    """Literal path tokens of the transform URL"""
    MEDIA = "m"
    FIT_IN = "fit-in"
    SMART = "smart"
    FILTERS = "filters:"


class FilterName(Enum):
    """Filter names in the order they are written to the URL"""
    FILL = "fill"
    FORMAT = "format"
    QUALITY = "quality"
    FOCAL = "focal"
    GRAYSCALE = "grayscale"
    BLUR = "blur"
    ROTATE = "rotate"
    BRIGHTNESS = "brightness"


class ParameterName(Enum):
    """
    Field paths used in diagnostics and errors.

    Paths follow the Python attribute names of TransformParameters
    (snake_case, e.g. "resize.focal_point.left", "resize.fit_in"), also when
    the input came in as a camelCase mapping ("focalPoint", "fitIn").
    """
    FORMAT = "format"
    QUALITY = "quality"
    ROTATE = "rotate"
    GRAYSCALE = "grayscale"
    BRIGHTNESS = "brightness"

    # Blur
    BLUR = "blur"
    BLUR_RADIUS = "blur.radius"
    BLUR_SIGMA = "blur.sigma"

    # Flip
    FLIP = "flip"

    # Resize
    RESIZE = "resize"
    RESIZE_HEIGHT = "resize.height"
    RESIZE_WIDTH = "resize.width"
    RESIZE_FIT_IN = "resize.fit_in"
    RESIZE_FILL = "resize.fill"
    RESIZE_FOCAL_POINT = "resize.focal_point"

    # Crop
    CROP = "crop"

    # Image reference
    IMAGE = "image"


class RectSide(Enum):
    """Rectangle coordinate keys"""
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


# Declared field order of a rectangle
RECT_SIDES = (RectSide.LEFT, RectSide.TOP, RectSide.RIGHT, RectSide.BOTTOM)

# Order in which crop coordinates are reported
CROP_VALIDATION_ORDER = (RectSide.BOTTOM, RectSide.LEFT, RectSide.RIGHT, RectSide.TOP)


class ParameterBounds:
    """
    Numeric contracts of the image service filters.

    Shared by the validator (to report) and the serializer (to clamp).
    """
    QUALITY_MIN = 0
    QUALITY_MAX = 100

    BRIGHTNESS_MIN = -100
    BRIGHTNESS_MAX = 100

    BLUR_MIN = 0
    BLUR_MAX = 150

    DIMENSION_MIN = 0
    DIMENSION_MAX = math.inf

    ROTATION_STEP = 90

    @classmethod
    def quality(cls) -> tuple:
        return (cls.QUALITY_MIN, cls.QUALITY_MAX)

    @classmethod
    def brightness(cls) -> tuple:
        return (cls.BRIGHTNESS_MIN, cls.BRIGHTNESS_MAX)

    @classmethod
    def blur(cls) -> tuple:
        return (cls.BLUR_MIN, cls.BLUR_MAX)

    @classmethod
    def dimension(cls) -> tuple:
        return (cls.DIMENSION_MIN, cls.DIMENSION_MAX)


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
