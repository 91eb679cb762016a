from image_url_builder.services.logging import StructuredLogger
from image_url_builder.services.image_url_service import ImageUrlService, ImageUrlServiceFactory

__all__ = [
    "StructuredLogger",
    "ImageUrlService",
    "ImageUrlServiceFactory",
]
