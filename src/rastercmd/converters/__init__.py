"""Bitmap to printer command encoders."""

from rastercmd.converters.base import (
    BaseImageEncoder,
    EncodingError,
    ImageCommandError,
    MonochromeBitmap,
    UnsupportedFormatError,
)
from rastercmd.converters.buffer import CommandBuffer
from rastercmd.converters.cpcl import CPCLEncoder
from rastercmd.converters.epl import EPLEncoder
from rastercmd.converters.escp import EscPEncoder
from rastercmd.converters.zpl import ZPLEncoder
from rastercmd.models.language import PrinterLanguage

__all__ = [
    "BaseImageEncoder",
    "CommandBuffer",
    "CPCLEncoder",
    "EncodingError",
    "EPLEncoder",
    "EscPEncoder",
    "ImageCommandError",
    "MonochromeBitmap",
    "UnsupportedFormatError",
    "ZPLEncoder",
    "create_encoder",
]

_ENCODER_CLASSES: tuple[type[BaseImageEncoder], ...] = (
    EscPEncoder,
    ZPLEncoder,
    EPLEncoder,
    CPCLEncoder,
)


def create_encoder(language: PrinterLanguage | str, charset: str = "ascii") -> BaseImageEncoder:
    """Factory function to create the encoder for a printer language."""
    for encoder_class in _ENCODER_CLASSES:
        encoder = encoder_class()
        if encoder.supports_language(language):
            return encoder
    raise UnsupportedFormatError(f"{charset} image conversion is not yet supported for language '{language}'.")
