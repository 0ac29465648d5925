"""Read-only RGBA raster wrapper and width padding."""

import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)


class RasterImage:
    """An RGBA image handed to the encoding pipeline.

    The wrapped Pillow image is a private RGBA copy, so later changes to
    the caller's image never affect a raster that already exists.
    """

    def __init__(self, image: Image.Image) -> None:
        logger.debug(f"Loading image: {image.width}x{image.height} ({image.mode})")
        self._image = image.convert("RGBA") if image.mode != "RGBA" else image.copy()
        self._pixels: list[RGBA] | None = None

    @classmethod
    def open(cls, path: str | Path) -> "RasterImage":
        """Load a raster from an image file."""
        with Image.open(path) as image:
            image.load()
            return cls(image)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def pixel(self, x: int, y: int) -> RGBA:
        """Return the (R, G, B, A) components of the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels()[y * self.width + x]

    def pixels(self) -> list[RGBA]:
        """Return all pixels in row-major order."""
        if self._pixels is None:
            data = self._image.tobytes()
            self._pixels = [
                (data[i], data[i + 1], data[i + 2], data[i + 3]) for i in range(0, len(data), 4)
            ]
        return self._pixels

    def to_image(self) -> Image.Image:
        """Return a copy of the underlying Pillow image."""
        return self._image.copy()


def pad_to_multiple_of_8(raster: RasterImage) -> RasterImage:
    """Pad a raster on the right so its width is a multiple of 8.

    Added columns are fully transparent. A raster that is already byte
    aligned is returned as is.
    """
    width, height = raster.size
    if width % 8 == 0:
        return raster

    new_width = (width // 8 + 1) * 8
    logger.debug(f"Padding image width from {width} to {new_width}")
    padded = Image.new("RGBA", (new_width, height), TRANSPARENT)
    padded.paste(raster.to_image(), (0, 0))
    return RasterImage(padded)
