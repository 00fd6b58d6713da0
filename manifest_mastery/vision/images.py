"""Decoding of uploaded vision board images into displayable data URLs."""

import base64
import io
import logging
import warnings
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..errors import InvalidFileError

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"


@dataclass
class DecodedImage:
    """An uploaded image ready for embedding."""
    mime_type: str
    width: int
    height: int
    data_url: str


def decode_image(
    file_bytes: Optional[bytes],
    max_bytes: Optional[int] = None,
) -> DecodedImage:
    """
    Check that the payload is an image Pillow can read and embed it.

    Uploaded bytes are embedded unchanged; Pillow only verifies them.

    Args:
        file_bytes: Raw uploaded file contents
        max_bytes: Reject payloads larger than this

    Returns:
        DecodedImage with a base64 data URL

    Raises:
        InvalidFileError: If no file was supplied or it is not a readable image
    """
    if not file_bytes:
        raise InvalidFileError("No file was supplied.")

    if max_bytes is not None and len(file_bytes) > max_bytes:
        raise InvalidFileError(
            f"File is {len(file_bytes)} bytes, larger than the {max_bytes} byte limit."
        )

    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", Image.DecompressionBombWarning)
            with Image.open(io.BytesIO(file_bytes)) as image:
                image.verify()
                image_format = image.format
                width, height = image.size
    except (UnidentifiedImageError, Image.DecompressionBombError,
            Image.DecompressionBombWarning, OSError, SyntaxError, ValueError) as e:
        raise InvalidFileError(f"Could not decode image: {e}") from e

    mime_type = Image.MIME.get(image_format or "", "application/octet-stream")
    encoded = base64.b64encode(file_bytes).decode("ascii")
    logger.debug(f"Decoded {image_format} image {width}x{height} ({len(file_bytes)} bytes)")

    return DecodedImage(
        mime_type=mime_type,
        width=width,
        height=height,
        data_url=f"{DATA_URL_PREFIX}{mime_type};base64,{encoded}",
    )


def load_data_url(data_url: str) -> Image.Image:
    """
    Open an embedded data URL as a Pillow image.

    Raises:
        InvalidFileError: If the string is not a base64 image data URL
    """
    if not data_url.startswith(DATA_URL_PREFIX) or ";base64," not in data_url:
        raise InvalidFileError("Not a base64 data URL.")

    _, encoded = data_url.split(";base64,", 1)
    try:
        image = Image.open(io.BytesIO(base64.b64decode(encoded)))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise InvalidFileError(f"Could not decode embedded image: {e}") from e
    return image
