"""PNG encoding of grayscale rasters via Pillow."""

import logging
from pathlib import Path
from typing import Union

from PIL import Image

from .raster import Raster

logger = logging.getLogger(__name__)


def write_png(raster: Raster, path: Union[str, Path]) -> Path:
    """
    Encode a raster as an 8-bit grayscale PNG.

    Args:
        raster: Pixel buffer to encode
        path: Destination file (parent directories are created)

    Returns:
        The destination path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    image = Image.frombytes("L", (raster.width, raster.height), raster.data)
    image.save(path, format="PNG")

    logger.info(f"Wrote {raster.width}x{raster.height} PNG: {path}")
    return path


def read_png(path: Union[str, Path]) -> Raster:
    """Decode an image file into a grayscale Raster (converted to "L" if needed)."""
    with Image.open(path) as image:
        gray = image.convert("L")
        return Raster(width=gray.width, height=gray.height, data=gray.tobytes())
