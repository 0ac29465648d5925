"""Byte accumulator for mixed binary and text printer commands."""

from rastercmd.converters.base import EncodingError


class CommandBuffer:
    """Append-only byte buffer that also accepts charset-encoded text."""

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, data: bytes | bytearray) -> "CommandBuffer":
        """Append raw bytes."""
        self._data.extend(data)
        return self

    def append_text(self, text: str, charset: str) -> "CommandBuffer":
        """Append text encoded with the given charset.

        Raises:
            EncodingError: If the charset is unknown or cannot represent the text.
        """
        try:
            encoded = text.encode(charset)
        except LookupError as e:
            raise EncodingError(f"Unsupported charset: {charset}") from e
        except UnicodeEncodeError as e:
            raise EncodingError(f"Cannot encode command text as {charset}: {e}") from e
        self._data.extend(encoded)
        return self

    def clear(self) -> None:
        """Discard everything appended so far."""
        self._data.clear()

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
