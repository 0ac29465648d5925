"""Abstract base class for image command encoders."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property

from rastercmd.models.config import EncodeParameters
from rastercmd.models.language import PrinterLanguage
from rastercmd.packing import pack_bits


@dataclass(frozen=True)
class MonochromeBitmap:
    """A classified image: one flag per pixel, row-major."""

    width: int
    height: int
    pixels: tuple[bool, ...]

    @cached_property
    def packed(self) -> bytes:
        """The flags packed MSB first, trailing partial byte dropped."""
        return pack_bits(self.pixels)


class BaseImageEncoder(ABC):
    """Abstract base class for printer language encoders."""

    SUPPORTED_LANGUAGES: frozenset[PrinterLanguage] = frozenset()

    @abstractmethod
    def encode(self, bitmap: MonochromeBitmap, params: EncodeParameters) -> bytes:
        """Encode a bitmap as printer commands.

        Args:
            bitmap: Classified image, already padded and inverted as the
                language requires.
            params: Placement, density and charset settings.

        Returns:
            The complete command stream.

        Raises:
            EncodingError: If the command text cannot be encoded.
        """
        pass

    def supports_language(self, language: PrinterLanguage) -> bool:
        """Check if this encoder handles the given language."""
        return language in self.SUPPORTED_LANGUAGES


class ImageCommandError(Exception):
    """Base exception for image command generation errors."""

    pass


class UnsupportedFormatError(ImageCommandError):
    """Raised when no encoder exists for the requested language."""

    pass


class EncodingError(ImageCommandError):
    """Raised when command text cannot be encoded in the configured charset."""

    pass
