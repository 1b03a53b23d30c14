import io
import logging
from typing import Optional, Tuple

from PIL import Image, ImageFile, UnidentifiedImageError

logger = logging.getLogger(__name__)
ImageFile.LOAD_TRUNCATED_IMAGES = True


def read_dimensions(image_data: bytes) -> Optional[Tuple[int, int]]:
    """
    Return (width, height) as displayed, honouring the EXIF orientation.

    Returns None when the bytes are not a readable image.
    """
    try:
        with Image.open(io.BytesIO(image_data)) as img:
            width, height = img.size
            orientation = img.getexif().get(0x0112)
    except (UnidentifiedImageError, OSError) as e:
        logger.debug(f"Could not read image dimensions: {e}")
        return None

    # Orientations 5-8 are rotated by 90 degrees.
    if orientation in (5, 6, 7, 8):
        width, height = height, width
    return width, height
