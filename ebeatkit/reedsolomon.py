"""Reed-Solomon error correction over GF(2^8) with the QR Code polynomial 0x11D."""

from __future__ import annotations

from typing import Iterable

_FIELD_POLY = 0x11D


def gf_multiply(x: int, y: int) -> int:
    """Product of two field elements modulo GF(2^8/0x11D).

    Raises ValueError when either argument is not a byte value.
    """
    if not (0 <= x <= 0xFF and 0 <= y <= 0xFF):
        raise ValueError(f"field elements must be in 0..255: {x}, {y}")
    z = 0
    for shift in reversed(range(8)):
        z = (z << 1) ^ ((z >> 7) * _FIELD_POLY)
        z ^= ((y >> shift) & 1) * x
    return z


class ReedSolomonGenerator:
    """Computes error correction codewords for data at a fixed degree."""

    def __init__(self, degree: int) -> None:
        if not 1 <= degree <= 255:
            raise ValueError(f"degree out of range: {degree}")
        # Product of (x - r^i) for i < degree, leading term dropped,
        # coefficients stored from highest to lowest power.
        coefficients = [0] * degree
        coefficients[-1] = 1
        root = 1
        for _ in range(degree):
            for j in range(degree):
                coefficients[j] = gf_multiply(coefficients[j], root)
                if j + 1 < degree:
                    coefficients[j] ^= coefficients[j + 1]
            root = (root << 1) ^ ((root >> 7) * _FIELD_POLY)
        self._coefficients = tuple(coefficients)

    @property
    def degree(self) -> int:
        return len(self._coefficients)

    @property
    def coefficients(self) -> tuple[int, ...]:
        """Divisor coefficients without the leading 1, highest power first."""
        return self._coefficients

    def remainder(self, data: bytes | bytearray | Iterable[int]) -> bytes:
        """Error correction codewords for the given data codewords."""
        result = [0] * self.degree
        for byte in bytes(data):
            factor = byte ^ result[0]
            result = result[1:] + [0]
            result = [
                value ^ gf_multiply(coefficient, factor)
                for value, coefficient in zip(result, self._coefficients)
            ]
        return bytes(result)