"""Request validators for complete parameter sets"""
from image_url_builder.validation.request_validators.transform_parameters_validator import (
    TransformParametersValidator,
    validate,
)

__all__ = [
    "TransformParametersValidator",
    "validate",
]
