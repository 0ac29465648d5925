"""Raster image to printer command pipeline."""

import logging

from PIL import Image

from rastercmd.converters import MonochromeBitmap, UnsupportedFormatError, create_encoder
from rastercmd.models.config import ImageCommandConfig
from rastercmd.models.language import PrinterLanguage
from rastercmd.quantize import classify
from rastercmd.raster import RasterImage, pad_to_multiple_of_8

logger = logging.getLogger(__name__)


def resolve_language(language: PrinterLanguage | str, charset: str) -> PrinterLanguage:
    """Map a language name onto a supported PrinterLanguage.

    Raises:
        UnsupportedFormatError: If the name is not a known language.
    """
    try:
        return PrinterLanguage.parse(language)
    except ValueError:
        raise UnsupportedFormatError(
            f"{charset} image conversion is not yet supported for language '{language}'."
        ) from None


def build_bitmap(raster: RasterImage, config: ImageCommandConfig) -> MonochromeBitmap:
    """Pad and classify a raster the way the configured language expects."""
    language = config.language
    if language.requires_width_multiple_of_8:
        raster = pad_to_multiple_of_8(raster)
    pixels = classify(raster, config.quantization, invert=language.requires_bit_inversion)
    return MonochromeBitmap(width=raster.width, height=raster.height, pixels=pixels)


def get_image_command(
    image: Image.Image | RasterImage,
    config: ImageCommandConfig | None = None,
    language: PrinterLanguage | str | None = None,
) -> bytes:
    """Convert an image into printer commands.

    Each call works from its own copy of the image, so the result always
    reflects the pixels at call time.

    Args:
        image: Pillow image or RasterImage to convert.
        config: Language, quantization and placement settings.
        language: Overrides the language from `config`.

    Returns:
        The complete command stream. Empty if the image has no pixels.

    Raises:
        UnsupportedFormatError: If no encoder exists for the language.
        EncodingError: If command text cannot be encoded in the charset.
    """
    config = config or ImageCommandConfig()
    charset = config.params.charset
    requested = config.language if language is None else language
    config = config.model_copy(update={"language": resolve_language(requested, charset)})

    encoder = create_encoder(config.language, charset)

    raster = image if isinstance(image, RasterImage) else RasterImage(image)
    if raster.width == 0 or raster.height == 0:
        logger.warning(f"Image is {raster.width}x{raster.height}, nothing to encode")
        return b""

    bitmap = build_bitmap(raster, config)
    return encoder.encode(bitmap, config.params)
