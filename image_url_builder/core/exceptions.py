"""
Custom exceptions for the image URL builder.

Out-of-range parameter values are never raised: they are reported as
diagnostics and clamped during serialization. The exceptions below cover
input that cannot be turned into a URL at all.
"""

from typing import Any, Optional, Sequence


class ImageUrlBuilderException(Exception):
    """Base exception class for all image URL builder errors"""
    pass


class ParameterConflictError(ImageUrlBuilderException, ValueError):
    """
    Exception raised when parameters are combined in a way the image service
    cannot express.

    Examples are resizing and cropping in the same request, an empty flip,
    or a fit-in/focal point resize that does not set both dimensions.
    """

    def __init__(self, parameter_names: Sequence[str], details: Optional[str] = None):
        """
        Initialize ParameterConflictError.

        Args:
            parameter_names: Names of the conflicting parameters
            details: Additional details about the conflict
        """
        self.parameter_names = tuple(parameter_names)
        self.details = details

        message = f"Conflicting parameters: {', '.join(self.parameter_names)}"
        if details:
            message += f". {details}"

        super().__init__(message)


class InvalidArgumentError(ImageUrlBuilderException, ValueError):
    """Exception raised when a value cannot be serialized (wrong type, NaN, infinity)"""

    def __init__(self, parameter_name: str, value: Any = None, details: Optional[str] = None):
        """
        Initialize InvalidArgumentError.

        Args:
            parameter_name: Name of the invalid parameter
            value: Offending value
            details: Additional details about the error
        """
        self.parameter_name = parameter_name
        self.value = value
        self.details = details

        message = f"Invalid argument for '{parameter_name}': {value!r}"
        if details:
            message += f" ({details})"

        super().__init__(message)
