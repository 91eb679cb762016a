from typing import Any, Callable, List, Mapping, Optional, Union

from image_url_builder.components import UrlSerializer
from image_url_builder.models import ImageReference, TransformParameters
from image_url_builder.schemas import parse_transform_parameters
from image_url_builder.services.logging import StructuredLogger
from image_url_builder.validation import TransformParametersValidator

DiagnosticsCallback = Callable[[List[str]], None]


class ImageUrlService:
    """
    Service for building image service URLs

    Validates the raw parameters, reports diagnostics, then serializes with
    clamping so a usable URL is returned even for out-of-contract input.
    Follows Dependency Injection and Single Responsibility principles.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None, log_diagnostics: bool = True):
        """
        Initialize image URL service

        Args:
            logger: Logger instance for structured logging
            log_diagnostics: Whether diagnostics are written to the log as warnings
        """
        self._logger = logger or StructuredLogger()
        self._log_diagnostics = log_diagnostics
        self._validator = TransformParametersValidator()
        self._serializer = UrlSerializer()

    def build_image_url(
        self,
        image_ref: Any,
        params: Optional[Union[TransformParameters, Mapping[str, Any]]] = None,
        on_diagnostics: Optional[DiagnosticsCallback] = None,
    ) -> str:
        """
        Build the transform URL for an image

        Args:
            image_ref: Base URL, or a record whose filename holds it
            params: TransformParameters or an equivalent mapping; None for no transformation
            on_diagnostics: Called once with the (possibly empty) diagnostics list before returning

        Returns:
            Transform URL

        Raises:
            ParameterConflictError: If params combine exclusive parameters (e.g. resize and crop)
            InvalidArgumentError: If image_ref or params cannot be serialized at all
        """
        base_url = ImageReference.resolve(image_ref)
        parameters = self.to_parameters(params)

        diagnostics = self.get_diagnostics(parameters)
        self._report(base_url, diagnostics, on_diagnostics)

        url = self._serializer.serialize(base_url, parameters)
        self._logger.debug("Image URL built", url=url, diagnostic_count=len(diagnostics))
        return url

    def get_diagnostics(self, params: TransformParameters) -> List[str]:
        """Get diagnostics for parameters without building a URL"""
        return self._validator.validate(params).messages

    @staticmethod
    def to_parameters(params: Optional[Union[TransformParameters, Mapping[str, Any]]]) -> TransformParameters:
        if params is None:
            return TransformParameters()
        if isinstance(params, TransformParameters):
            return params
        return parse_transform_parameters(params)

    def _report(
        self,
        base_url: str,
        diagnostics: List[str],
        on_diagnostics: Optional[DiagnosticsCallback],
    ) -> None:
        if self._log_diagnostics:
            for diagnostic in diagnostics:
                self._logger.warning(f"Image parameter out of contract: {diagnostic}", image=base_url)

        if on_diagnostics is not None:
            on_diagnostics(list(diagnostics))


class ImageUrlServiceFactory:
    """Factory for creating image URL service instances (Singleton Pattern)"""

    _instance: Optional[ImageUrlService] = None

    @classmethod
    def get_instance(cls, logger: Optional[StructuredLogger] = None) -> ImageUrlService:
        """
        Get singleton instance of image URL service

        Args:
            logger: Logger instance, used only when the instance is first created

        Returns:
            ImageUrlService instance
        """
        if cls._instance is None:
            cls._instance = ImageUrlService(logger)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (useful for testing)"""
        cls._instance = None
