"""CPCL EG expanded graphics encoder."""

from rastercmd.converters.base import BaseImageEncoder, MonochromeBitmap
from rastercmd.converters.buffer import CommandBuffer
from rastercmd.models.config import EncodeParameters
from rastercmd.models.language import PrinterLanguage
from rastercmd.packing import to_hex


class CPCLEncoder(BaseImageEncoder):
    """Encode bitmaps as a CPCL EXPANDED-GRAPHICS (EG) command.

    CPCL EG format:
    EG <bytes_per_row> <height> <x> <y> <hex_data>
    """

    SUPPORTED_LANGUAGES = frozenset({PrinterLanguage.CPCL})

    def encode(self, bitmap: MonochromeBitmap, params: EncodeParameters) -> bytes:
        hex_string = to_hex(bitmap.packed)
        command = f"EG {bitmap.width // 8} {bitmap.height} {params.x} {params.y} {hex_string}"
        return CommandBuffer().append_text(command, params.charset).to_bytes()
