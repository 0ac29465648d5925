"""EPL GW graphic write encoder."""

import logging

from rastercmd.converters.base import BaseImageEncoder, MonochromeBitmap
from rastercmd.converters.buffer import CommandBuffer
from rastercmd.models.config import EncodeParameters
from rastercmd.models.language import PrinterLanguage

logger = logging.getLogger(__name__)


class EPLEncoder(BaseImageEncoder):
    """Encode bitmaps as an EPL Graphics Write (GW) command.

    EPL GW format:
    GW<x>,<y>,<bytes_per_row>,<height>,<binary_data>

    Note: EPL uses raw binary data, not hex encoding, and a 0 bit is a
    printed dot. The bitmap must already be byte aligned and inverted.
    """

    SUPPORTED_LANGUAGES = frozenset({PrinterLanguage.EPL, PrinterLanguage.EPL2})

    def encode(self, bitmap: MonochromeBitmap, params: EncodeParameters) -> bytes:
        bytes_per_row = bitmap.width // 8

        buffer = CommandBuffer()
        buffer.append_text(f"GW{params.x},{params.y},{bytes_per_row},{bitmap.height},", params.charset)
        buffer.append(bitmap.packed)
        logger.debug(f"Encoded EPL graphic: {bytes_per_row} bytes x {bitmap.height} rows")
        return buffer.to_bytes()
