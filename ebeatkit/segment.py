"""Data segments of a QR Code symbol, each with a mode and encoded bits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .bitbuffer import BitBuffer

_ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_ALPHANUMERIC_CODES = {char: code for code, char in enumerate(_ALPHANUMERIC_CHARSET)}
_DIGITS = frozenset("0123456789")


class Mode(Enum):
    """Segment encoding mode: indicator bits and character count widths."""

    NUMERIC = (0x1, (10, 12, 14))
    ALPHANUMERIC = (0x2, (9, 11, 13))
    BYTE = (0x4, (8, 16, 16))
    KANJI = (0x8, (8, 10, 12))

    def __init__(self, mode_bits: int, count_bits: tuple[int, int, int]) -> None:
        self.mode_bits = mode_bits
        self._count_bits = count_bits

    def char_count_bits(self, version: int) -> int:
        """Width of the character count field at a version from 1 to 40."""
        if 1 <= version <= 9:
            return self._count_bits[0]
        if 10 <= version <= 26:
            return self._count_bits[1]
        if 27 <= version <= 40:
            return self._count_bits[2]
        raise ValueError(f"version number out of range: {version}")


@dataclass(frozen=True)
class QrSegment:
    """A run of characters already encoded as bits in one mode."""

    mode: Mode
    num_chars: int
    data: bytes
    bit_length: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        if (
            self.num_chars < 0
            or self.bit_length < 0
            or len(self.data) != (self.bit_length + 7) // 8
        ):
            raise ValueError("invalid segment value")


def make_bytes(data: bytes | bytearray | Iterable[int]) -> QrSegment:
    """Segment holding binary data in byte mode."""
    raw = bytes(data)
    return QrSegment(Mode.BYTE, len(raw), raw, len(raw) * 8)


def make_numeric(digits: str) -> QrSegment:
    """Segment holding a string of decimal digits in numeric mode."""
    if not is_numeric(digits):
        raise ValueError("string contains non-numeric characters")
    buffer = BitBuffer()
    for start in range(0, len(digits), 3):
        group = digits[start:start + 3]
        buffer.append_bits(int(group), len(group) * 3 + 1)
    return QrSegment(Mode.NUMERIC, len(digits), buffer.to_bytes(), buffer.bit_length)


def make_alphanumeric(text: str) -> QrSegment:
    """Segment holding text in alphanumeric mode.

    Allowed characters: 0-9, A-Z, space, $ % * + - . / :
    """
    if not is_alphanumeric(text):
        raise ValueError("string contains unencodable characters in alphanumeric mode")
    buffer = BitBuffer()
    for start in range(0, len(text), 2):
        pair = text[start:start + 2]
        if len(pair) == 2:
            value = _ALPHANUMERIC_CODES[pair[0]] * 45 + _ALPHANUMERIC_CODES[pair[1]]
            buffer.append_bits(value, 11)
        else:
            buffer.append_bits(_ALPHANUMERIC_CODES[pair], 6)
    return QrSegment(Mode.ALPHANUMERIC, len(text), buffer.to_bytes(), buffer.bit_length)


def make_segments(text: str) -> list[QrSegment]:
    """Encode text in the most compact single mode; empty text gives no segments."""
    if not text:
        return []
    if is_numeric(text):
        return [make_numeric(text)]
    if is_alphanumeric(text):
        return [make_alphanumeric(text)]
    return [make_bytes(text.encode("utf-8"))]


def is_numeric(text: str) -> bool:
    """True if every character is an ASCII decimal digit."""
    return all(char in _DIGITS for char in text)


def is_alphanumeric(text: str) -> bool:
    """True if every character belongs to the alphanumeric mode charset."""
    return all(char in _ALPHANUMERIC_CODES for char in text)


def total_bits(segments: Iterable[QrSegment], version: int) -> int | None:
    """Bits needed to encode the segments at a version.

    Returns None when a segment's length does not fit its count field.
    """
    if not 1 <= version <= 40:
        raise ValueError(f"version number out of range: {version}")
    result = 0
    for segment in segments:
        count_bits = segment.mode.char_count_bits(version)
        if segment.num_chars >= 1 << count_bits:
            return None
        result += 4 + count_bits + segment.bit_length
    return result