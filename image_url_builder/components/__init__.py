from image_url_builder.components.normalizer import ParameterNormalizer, normalize
from image_url_builder.components.serializer import UrlSerializer

__all__ = [
    "ParameterNormalizer",
    "normalize",
    "UrlSerializer",
]
