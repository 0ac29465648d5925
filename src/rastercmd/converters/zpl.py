"""ZPL ^GFA graphic field encoder."""

import logging

from rastercmd.converters.base import BaseImageEncoder, MonochromeBitmap
from rastercmd.converters.buffer import CommandBuffer
from rastercmd.models.config import EncodeParameters
from rastercmd.models.language import PrinterLanguage
from rastercmd.packing import to_hex

logger = logging.getLogger(__name__)


class ZPLEncoder(BaseImageEncoder):
    """Encode bitmaps as a ZPL Graphics Field ASCII (^GFA) command.

    ZPL ^GFA format:
    ^GFA,<total_bytes>,<total_bytes>,<bytes_per_row>,<hex_data>

    Only the graphic field is produced; label framing (^XA/^FO/^XZ) is
    left to the caller.
    """

    SUPPORTED_LANGUAGES = frozenset({PrinterLanguage.ZPL, PrinterLanguage.ZPLII})

    def encode(self, bitmap: MonochromeBitmap, params: EncodeParameters) -> bytes:
        hex_string = to_hex(bitmap.packed)
        byte_len = len(hex_string) // 2
        per_row = byte_len // bitmap.height

        buffer = CommandBuffer()
        buffer.append_text(f"^GFA,{byte_len},{byte_len},{per_row},{hex_string}", params.charset)
        logger.debug(f"Encoded ZPL graphic field: {byte_len} bytes, {per_row} per row")
        return buffer.to_bytes()
