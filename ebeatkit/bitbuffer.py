"""An appendable sequence of bits, packed big-endian within each byte."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .segment import QrSegment


class BitBuffer:
    """A growable bit sequence; bits fill each byte from the most significant end."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._bit_length = 0

    @property
    def bit_length(self) -> int:
        """Number of bits appended so far."""
        return self._bit_length

    def __len__(self) -> int:
        return self._bit_length

    def _append_bit(self, bit: int) -> None:
        index, offset = divmod(self._bit_length, 8)
        if index == len(self._data):
            self._data.append(0)
        if bit:
            self._data[index] |= 1 << (7 - offset)
        self._bit_length += 1

    def append_bits(self, value: int, length: int) -> None:
        """Append the low `length` bits of `value`, most significant first.

        Raises ValueError unless 0 <= length <= 32 and 0 <= value < 2**length.
        """
        if length < 0 or length > 32 or value < 0 or value >> length:
            raise ValueError("value out of range")
        for shift in reversed(range(length)):
            self._append_bit((value >> shift) & 1)

    def append_data(self, segment: QrSegment) -> None:
        """Append the encoded bits of a segment."""
        data = segment.data
        for i in range(segment.bit_length):
            self._append_bit((data[i >> 3] >> (7 - (i & 7))) & 1)

    def to_bytes(self) -> bytes:
        """Return the bits as bytes, zero-padded up to a whole byte."""
        return bytes(self._data)