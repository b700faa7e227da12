"""Image normalisation - every packaged image is stored as JPEG."""

import logging
from io import BytesIO

from PIL import Image

logger = logging.getLogger(__name__)


class ImageFormatError(Exception):
    """Bytes are not a decodable image."""

    pass


def detect_format(image_data: bytes) -> str:
    """Return the Pillow format name ("JPEG", "PNG", "WEBP", ...)."""
    try:
        with Image.open(BytesIO(image_data)) as img:
            return img.format or "UNKNOWN"
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageFormatError(f"Cannot identify image ({len(image_data)} bytes): {e}")


def ensure_jpeg(image_data: bytes, quality: int = 90) -> bytes:
    """
    Re-encode an image as JPEG unless it already is one.

    Args:
        image_data: Encoded image bytes (PNG, WEBP, GIF, ...).
        quality: JPEG quality for re-encoded images.

    Returns:
        JPEG bytes. JPEG input is returned unchanged.

    Raises:
        ImageFormatError: If the bytes cannot be decoded, including
            images whose header reads fine but whose pixel data is truncated.
    """
    if detect_format(image_data) == "JPEG":
        return image_data

    output = BytesIO()
    try:
        with Image.open(BytesIO(image_data)) as img:
            logger.info(f"Converting {img.format} image ({img.mode}, {img.width}x{img.height}) to JPEG")

            if img.mode in ("RGBA", "LA", "P"):
                # Flatten transparency onto white
                rgba = img.convert("RGBA")
                converted = Image.new("RGB", rgba.size, (255, 255, 255))
                converted.paste(rgba, mask=rgba.getchannel("A"))
            elif img.mode != "RGB":
                converted = img.convert("RGB")
            else:
                converted = img

            converted.save(output, format="JPEG", quality=quality)
    except (OSError, Image.DecompressionBombError) as e:
        raise ImageFormatError(f"Cannot decode image ({len(image_data)} bytes): {e}")

    return output.getvalue()
