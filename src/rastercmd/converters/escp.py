"""ESC/P bit-image encoder for 24-pin dot-matrix printers."""

import logging

from rastercmd.converters.base import BaseImageEncoder, MonochromeBitmap
from rastercmd.converters.buffer import CommandBuffer
from rastercmd.models.config import EncodeParameters
from rastercmd.models.language import PrinterLanguage

logger = logging.getLogger(__name__)

ESC = 0x1B
LINE_FEED = 0x0A

# Dots per band: 24 pins = 3 bytes per column
BAND_HEIGHT = 24

# ESC 3 n: line spacing of n/180 inch. 24 matches one band, 30 is the default.
SET_LINE_SPACING = bytes([ESC, 0x33, BAND_HEIGHT])
RESTORE_LINE_SPACING = bytes([ESC, 0x33, 30])


class EscPEncoder(BaseImageEncoder):
    """Encode bitmaps as ESC * bit-image bands.

    The image is cut into bands 24 dots tall. Each band is one ESC *
    command followed by three bytes per column, top dot in bit 7 of the
    first byte. Line spacing is set to the band height so consecutive
    bands print without gaps, then restored.
    """

    SUPPORTED_LANGUAGES = frozenset({PrinterLanguage.ESCP, PrinterLanguage.ESCP2})

    def encode(self, bitmap: MonochromeBitmap, params: EncodeParameters) -> bytes:
        buffer = CommandBuffer()
        buffer.append(SET_LINE_SPACING)

        header = self._band_header(bitmap.width, params.dot_density)
        bands = 0
        offset = 0
        while offset < bitmap.height:
            buffer.append(header)
            buffer.append(self._band_columns(bitmap, offset))
            buffer.append(bytes([LINE_FEED]))
            offset += BAND_HEIGHT
            bands += 1

        buffer.append(RESTORE_LINE_SPACING)
        logger.debug(f"Encoded {bands} ESC/P band(s) at density {params.dot_density}")
        return buffer.to_bytes()

    @staticmethod
    def _band_header(width: int, dot_density: int) -> bytes:
        """ESC * m nL nH, where nL + nH * 256 is the column count."""
        return bytes([ESC, 0x2A, dot_density & 0xFF, width % 256, (width // 256) & 0xFF])

    @staticmethod
    def _band_columns(bitmap: MonochromeBitmap, offset: int) -> bytes:
        """Three bytes per column for the band starting at row `offset`."""
        width = bitmap.width
        pixels = bitmap.pixels
        total = len(pixels)
        out = bytearray()
        for x in range(width):
            for k in range(3):
                slice_val = 0
                for b in range(8):
                    y = ((offset // 8) + k) * 8 + b
                    i = y * width + x
                    # Rows below the image print white
                    if i < total and pixels[i]:
                        slice_val |= 1 << (7 - b)
                out.append(slice_val)
        return bytes(out)
