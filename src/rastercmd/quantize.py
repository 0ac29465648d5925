"""Monochrome quantization of RGBA pixels."""

import logging

from rastercmd.models.config import QuantizationConfig, QuantizationMethod
from rastercmd.raster import RGBA, RasterImage

logger = logging.getLogger(__name__)

OPAQUE_BLACK: RGBA = (0, 0, 0, 255)


def luma(red: int, green: int, blue: int) -> int:
    """Weighted brightness of a color, 0 (black) to 255 (white)."""
    return (red * 299 + green * 587 + blue * 114) // 1000


def is_black(pixel: RGBA, config: QuantizationConfig) -> bool:
    """Decide whether a pixel prints as a black dot.

    Args:
        pixel: (R, G, B, A) components, each 0-255.
        config: Quantization method and thresholds.

    Returns:
        True if the pixel should be printed.
    """
    red, green, blue, alpha = pixel
    method = config.method

    if method == QuantizationMethod.CHECK_LUMA:
        # Pixels less opaque than the luma threshold are background
        if alpha < config.luma_threshold:
            return False
        return luma(red, green, blue) < config.luma_threshold
    if method == QuantizationMethod.CHECK_ALPHA:
        return alpha > config.alpha_threshold
    return tuple(pixel) == OPAQUE_BLACK


def classify(raster: RasterImage, config: QuantizationConfig, invert: bool = False) -> tuple[bool, ...]:
    """Convert a raster into a row-major grid of black/white flags.

    Args:
        raster: Image to convert.
        config: Quantization method and thresholds.
        invert: Flip every result, for languages where 0 is a printed dot.

    Returns:
        One flag per pixel, width * height entries.
    """
    logger.debug(f"Converting image to monochrome ({config.method}, invert={invert})")
    return tuple(is_black(pixel, config) != invert for pixel in raster.pixels())
