from typing import Any, Mapping

from image_url_builder.core import InvalidArgumentError, ParameterName

FILENAME_KEY = "filename"


class ImageReference:
    """Resolves an image reference (URL or CMS asset record) to its base URL"""

    @staticmethod
    def resolve(image_ref: Any) -> str:
        """
        Get base URL of an image reference

        Args:
            image_ref: URL string, mapping with a "filename" key, or object with
                a filename attribute

        Returns:
            Base URL string

        Raises:
            InvalidArgumentError: If the reference has none of the supported shapes
        """
        if isinstance(image_ref, str):
            return image_ref

        if isinstance(image_ref, Mapping):
            filename = image_ref.get(FILENAME_KEY)
        else:
            filename = getattr(image_ref, FILENAME_KEY, None)

        if not isinstance(filename, str):
            raise InvalidArgumentError(
                ParameterName.IMAGE.value,
                image_ref,
                f"expected a URL string or a record with a '{FILENAME_KEY}' string",
            )
        return filename
