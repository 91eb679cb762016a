from typing import Any, Mapping, Optional, Union

from image_url_builder.models import TransformParameters
from image_url_builder.services import ImageUrlServiceFactory
from image_url_builder.services.image_url_service import DiagnosticsCallback


def build_image_url(
    image_ref: Any,
    params: Optional[Union[TransformParameters, Mapping[str, Any]]] = None,
    *,
    on_diagnostics: Optional[DiagnosticsCallback] = None,
) -> str:
    """
    Build the image service URL for a transformed variant of an image.

    Out-of-contract values never fail the call: they are reported through
    on_diagnostics and the log, and clamped in the URL.

        >>> build_image_url("https://cdn.example.com/a.jpg", {"resize": {"width": 200}})
        'https://cdn.example.com/a.jpg/m/200x0/'

    Args:
        image_ref: Base URL, or a record whose filename holds it
        params: TransformParameters or an equivalent mapping
        on_diagnostics: Called with the list of diagnostics before returning

    Returns:
        Transform URL

    Raises:
        ParameterConflictError: If params combine exclusive parameters (e.g. resize and crop)
        InvalidArgumentError: If image_ref or params cannot be serialized at all
    """
    service = ImageUrlServiceFactory.get_instance()
    return service.build_image_url(image_ref, params, on_diagnostics=on_diagnostics)
