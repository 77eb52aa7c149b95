import io
from typing import Union
from PIL import Image, UnidentifiedImageError
from ..core.errors import ImageEncodingError
from ..core.logging import get_logger

logger = get_logger("image-encoding")

DEFAULT_JPEG_QUALITY = 0.9

# The recognition endpoints reject request bodies above this size.
MAX_PAYLOAD_BYTES = 4 * 1024 * 1024

def encode_jpeg(image: Union[bytes, Image.Image], quality: float = DEFAULT_JPEG_QUALITY) -> bytes:
    """
    Re-encode an image as JPEG before it is uploaded for analysis.

    :param image: raw bytes in any format Pillow can read, or an already opened image
    :param quality: compression quality in (0, 1], scaled to Pillow's 1-100 range
    :return: JPEG bytes
    """
    if not 0.0 < quality <= 1.0:
        raise ValueError(f"JPEG quality must be in (0, 1], got {quality}")

    if isinstance(image, (bytes, bytearray)):
        try:
            image = Image.open(io.BytesIO(image))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"Could not decode the supplied image: {e}")
            raise ImageEncodingError(f"Could not decode the supplied image: {e}") from e

    # JPEG has no alpha channel or palette.
    if image.mode != "RGB":
        image = image.convert("RGB")

    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=round(quality * 100))
    data = buffer.getvalue()

    # Sent as-is; the service decides what to do with an oversized body.
    if len(data) > MAX_PAYLOAD_BYTES:
        logger.warning(
            f"Encoded image is {len(data)} bytes, above the {MAX_PAYLOAD_BYTES} byte service limit; "
            "the request will most likely be rejected."
        )
    return data
