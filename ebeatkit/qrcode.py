"""QR Code symbols: a square grid of dark and light modules built from data segments."""

from __future__ import annotations

import copy
from itertools import chain, groupby
from typing import Callable, Iterable

from .bitbuffer import BitBuffer
from .qrtables import (
    Ecc,
    alignment_pattern_positions,
    num_data_codewords,
    num_error_correction_blocks,
    num_error_correction_codewords,
    num_raw_data_modules,
)
from .reedsolomon import ReedSolomonGenerator
from .segment import QrSegment, make_bytes, make_segments, total_bits

_PENALTY_N1 = 3
_PENALTY_N2 = 3
_PENALTY_N3 = 40
_PENALTY_N4 = 10

_MASK_PATTERNS: tuple[Callable[[int, int], bool], ...] = (
    lambda x, y: (x + y) % 2 == 0,
    lambda x, y: y % 2 == 0,
    lambda x, y: x % 3 == 0,
    lambda x, y: (x + y) % 3 == 0,
    lambda x, y: (x // 3 + y // 2) % 2 == 0,
    lambda x, y: x * y % 2 + x * y % 3 == 0,
    lambda x, y: (x * y % 2 + x * y % 3) % 2 == 0,
    lambda x, y: ((x + y) % 2 + x * y % 3) % 2 == 0,
)


class DataTooLongError(ValueError):
    """The data does not fit in any QR Code version of the allowed range."""


def _check_mask(mask: int) -> None:
    if not -1 <= mask <= 7:
        raise ValueError(f"mask value out of range: {mask}")


class QrCode:
    """An immutable QR Code symbol (model 2, versions 1 to 40)."""

    def __init__(
        self,
        version: int,
        ecl: Ecc,
        data_codewords: bytes | bytearray | Iterable[int],
        mask: int = -1,
    ) -> None:
        if not 1 <= version <= 40:
            raise ValueError(f"version number out of range: {version}")
        _check_mask(mask)
        self.version = version
        self.size = version * 4 + 17
        self.error_correction_level = ecl
        self._modules = [[False] * self.size for _ in range(self.size)]
        self._is_function = [[False] * self.size for _ in range(self.size)]

        self._draw_function_patterns()
        all_codewords = self._append_error_correction(bytes(data_codewords))
        self._draw_codewords(all_codewords)
        self.mask = self._handle_masking(mask)

    def with_mask(self, mask: int) -> QrCode:
        """A copy of this symbol with another mask (-1 chooses the best one)."""
        _check_mask(mask)
        other = copy.copy(self)
        other._modules = [row[:] for row in self._modules]
        other._is_function = [row[:] for row in self._is_function]
        other._apply_mask(self.mask)
        other.mask = other._handle_masking(mask)
        return other

    def module(self, x: int, y: int) -> bool:
        """True for a dark module; coordinates outside the symbol are light."""
        if 0 <= x < self.size and 0 <= y < self.size:
            return self._modules[y][x]
        return False

    def to_svg(self, border: int) -> str:
        """SVG document drawing the symbol with a light border of `border` modules."""
        if border < 0:
            raise ValueError("border must be non-negative")
        commands = [
            f"M{x + border},{y + border}h1v1h-1z"
            for y in range(-border, self.size + border)
            for x in range(-border, self.size + border)
            if self.module(x, y)
        ]
        dimension = self.size + border * 2
        path = " ".join(commands)
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'viewBox="0 0 {dimension} {dimension}">\n'
            '\t<rect width="100%" height="100%" fill="#FFFFFF" stroke-width="0"/>\n'
            f'\t<path d="{path}" fill="#000000" stroke-width="0"/>\n'
            "</svg>\n"
        )

    # Function patterns

    def _set_function_module(self, x: int, y: int, dark: bool) -> None:
        self._modules[y][x] = dark
        self._is_function[y][x] = True

    def _draw_function_patterns(self) -> None:
        for i in range(self.size):
            self._set_function_module(6, i, i % 2 == 0)
            self._set_function_module(i, 6, i % 2 == 0)

        self._draw_finder_pattern(3, 3)
        self._draw_finder_pattern(self.size - 4, 3)
        self._draw_finder_pattern(3, self.size - 4)

        positions = alignment_pattern_positions(self.version)
        last = len(positions) - 1
        for i, px in enumerate(positions):
            for j, py in enumerate(positions):
                if (i, j) in ((0, 0), (0, last), (last, 0)):
                    continue
                self._draw_alignment_pattern(px, py)

        self._draw_format_bits(0)
        self._draw_version()

    def _draw_format_bits(self, mask: int) -> None:
        data = self.error_correction_level.format_bits << 3 | mask
        rem = data
        for _ in range(10):
            rem = (rem << 1) ^ ((rem >> 9) * 0x537)
        bits = (data << 10 | rem) ^ 0x5412

        def bit(i: int) -> bool:
            return (bits >> i) & 1 != 0

        for i in range(6):
            self._set_function_module(8, i, bit(i))
        self._set_function_module(8, 7, bit(6))
        self._set_function_module(8, 8, bit(7))
        self._set_function_module(7, 8, bit(8))
        for i in range(9, 15):
            self._set_function_module(14 - i, 8, bit(i))

        for i in range(8):
            self._set_function_module(self.size - 1 - i, 8, bit(i))
        for i in range(8, 15):
            self._set_function_module(8, self.size - 15 + i, bit(i))
        self._set_function_module(8, self.size - 8, True)

    def _draw_version(self) -> None:
        if self.version < 7:
            return
        rem = self.version
        for _ in range(12):
            rem = (rem << 1) ^ ((rem >> 11) * 0x1F25)
        bits = self.version << 12 | rem
        for i in range(18):
            dark = (bits >> i) & 1 != 0
            a, b = self.size - 11 + i % 3, i // 3
            self._set_function_module(a, b, dark)
            self._set_function_module(b, a, dark)

    def _draw_finder_pattern(self, x: int, y: int) -> None:
        for dy in range(-4, 5):
            for dx in range(-4, 5):
                xx, yy = x + dx, y + dy
                if 0 <= xx < self.size and 0 <= yy < self.size:
                    distance = max(abs(dx), abs(dy))
                    self._set_function_module(xx, yy, distance not in (2, 4))

    def _draw_alignment_pattern(self, x: int, y: int) -> None:
        for dy in range(-2, 3):
            for dx in range(-2, 3):
                self._set_function_module(x + dx, y + dy, max(abs(dx), abs(dy)) != 1)

    # Codewords and masking

    def _append_error_correction(self, data: bytes) -> bytes:
        version, ecl = self.version, self.error_correction_level
        if len(data) != num_data_codewords(version, ecl):
            raise ValueError("data codeword count does not match version and level")

        num_blocks = num_error_correction_blocks(version, ecl)
        block_ecc_len = num_error_correction_codewords(version, ecl) // num_blocks
        raw_codewords = num_raw_data_modules(version) // 8
        num_short_blocks = num_blocks - raw_codewords % num_blocks
        short_block_len = raw_codewords // num_blocks

        generator = ReedSolomonGenerator(block_ecc_len)
        blocks: list[list[int]] = []
        start = 0
        for i in range(num_blocks):
            is_short = i < num_short_blocks
            end = start + short_block_len - block_ecc_len + (0 if is_short else 1)
            chunk = data[start:end]
            start = end
            block = list(chunk) + ([0] if is_short else []) + list(generator.remainder(chunk))
            blocks.append(block)

        padding_index = short_block_len - block_ecc_len
        result = bytes(
            block[i]
            for i in range(len(blocks[0]))
            for j, block in enumerate(blocks)
            if i != padding_index or j >= num_short_blocks
        )
        if len(result) != raw_codewords:
            raise AssertionError("interleaved codeword count mismatch")
        return result

    def _draw_codewords(self, data: bytes) -> None:
        total = len(data) * 8
        index = 0
        right = self.size - 1
        while right >= 1:
            if right == 6:
                right = 5
            for vert in range(self.size):
                for j in range(2):
                    x = right - j
                    upwards = ((right & 2) == 0) ^ (x < 6)
                    y = self.size - 1 - vert if upwards else vert
                    if not self._is_function[y][x] and index < total:
                        self._modules[y][x] = (data[index >> 3] >> (7 - (index & 7))) & 1 != 0
                        index += 1
            right -= 2
        if index != total:
            raise AssertionError("not every codeword bit was placed")

    def _apply_mask(self, mask: int) -> None:
        if not 0 <= mask <= 7:
            raise ValueError(f"mask value out of range: {mask}")
        pattern = _MASK_PATTERNS[mask]
        for y, (row, functions) in enumerate(zip(self._modules, self._is_function)):
            for x, is_function in enumerate(functions):
                if not is_function and pattern(x, y):
                    row[x] = not row[x]

    def _penalty_for_mask(self, mask: int) -> int:
        self._draw_format_bits(mask)
        self._apply_mask(mask)
        penalty = self._penalty_score()
        self._apply_mask(mask)
        return penalty

    def _handle_masking(self, mask: int) -> int:
        if mask == -1:
            mask = min(range(8), key=self._penalty_for_mask)
        self._draw_format_bits(mask)
        self._apply_mask(mask)
        return mask

    def _penalty_score(self) -> int:
        result = 0
        rows = self._modules
        columns = [list(column) for column in zip(*rows)]

        for line in chain(rows, columns):
            for _, group in groupby(line):
                run = sum(1 for _ in group)
                if run >= 5:
                    result += _PENALTY_N1 + run - 5
            bits = 0
            for i, dark in enumerate(line):
                bits = ((bits << 1) & 0x7FF) | int(dark)
                if i >= 10 and bits in (0x05D, 0x5D0):
                    result += _PENALTY_N3

        for upper, lower in zip(rows, rows[1:]):
            for a, b, c, d in zip(upper, upper[1:], lower, lower[1:]):
                if a == b == c == d:
                    result += _PENALTY_N2

        dark_count = sum(sum(row) for row in rows)
        total = self.size * self.size
        k = 0
        while dark_count * 20 < (9 - k) * total or dark_count * 20 > (11 + k) * total:
            result += _PENALTY_N4
            k += 1
        return result


def encode_segments(
    segments: Iterable[QrSegment],
    ecl: Ecc,
    min_version: int = 1,
    max_version: int = 40,
    mask: int = -1,
    boost_ecl: bool = True,
) -> QrCode:
    """Encode segments in the smallest version within the range.

    The level is raised when that costs no extra version and boost_ecl is set.
    Raises DataTooLongError when no allowed version holds the data.
    """
    segments = list(segments)
    if not 1 <= min_version <= max_version <= 40:
        raise ValueError(f"invalid version range: {min_version}..{max_version}")
    _check_mask(mask)

    for version in range(min_version, max_version + 1):
        used_bits = total_bits(segments, version)
        if used_bits is not None and used_bits <= num_data_codewords(version, ecl) * 8:
            break
    else:
        raise DataTooLongError("data too long")

    if boost_ecl:
        for candidate in (Ecc.MEDIUM, Ecc.QUARTILE, Ecc.HIGH):
            if used_bits <= num_data_codewords(version, candidate) * 8:
                ecl = candidate

    capacity = num_data_codewords(version, ecl) * 8
    buffer = BitBuffer()
    for segment in segments:
        buffer.append_bits(segment.mode.mode_bits, 4)
        buffer.append_bits(segment.num_chars, segment.mode.char_count_bits(version))
        buffer.append_data(segment)

    buffer.append_bits(0, min(4, capacity - buffer.bit_length))
    buffer.append_bits(0, (8 - buffer.bit_length % 8) % 8)

    pad_byte = 0xEC
    while buffer.bit_length < capacity:
        buffer.append_bits(pad_byte, 8)
        pad_byte ^= 0xEC ^ 0x11

    return QrCode(version, ecl, buffer.to_bytes(), mask)


def encode_text(text: str, ecl: Ecc) -> QrCode:
    """Encode text in the smallest version, at ecl or a higher level."""
    return encode_segments(make_segments(text), ecl)


def encode_binary(data: bytes | bytearray | Iterable[int], ecl: Ecc) -> QrCode:
    """Encode binary data in byte mode, at ecl or a higher level."""
    return encode_segments([make_bytes(data)], ecl)