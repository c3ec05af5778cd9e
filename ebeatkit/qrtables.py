"""Capacity tables and layout figures of QR Code versions 1 to 40."""

from __future__ import annotations

from enum import Enum


class Ecc(Enum):
    """Error correction level, in ascending order of protection."""

    LOW = (0, 1)
    MEDIUM = (1, 0)
    QUARTILE = (2, 3)
    HIGH = (3, 2)

    def __init__(self, ordinal: int, format_bits: int) -> None:
        self.ordinal = ordinal
        self.format_bits = format_bits


# Index 0 of each row is padding and holds an illegal value.
_ECC_CODEWORDS: tuple[tuple[int, ...], ...] = (
    (-1, 7, 10, 15, 20, 26, 36, 40, 48, 60, 72, 80, 96, 104, 120, 132, 144, 168, 180, 196, 224,
     224, 252, 270, 300, 312, 336, 360, 390, 420, 450, 480, 510, 540, 570, 570, 600, 630, 660,
     720, 750),
    (-1, 10, 16, 26, 36, 48, 64, 72, 88, 110, 130, 150, 176, 198, 216, 240, 280, 308, 338, 364,
     416, 442, 476, 504, 560, 588, 644, 700, 728, 784, 812, 868, 924, 980, 1036, 1064, 1120,
     1204, 1260, 1316, 1372),
    (-1, 13, 22, 36, 52, 72, 96, 108, 132, 160, 192, 224, 260, 288, 320, 360, 408, 448, 504,
     546, 600, 644, 690, 750, 810, 870, 952, 1020, 1050, 1140, 1200, 1290, 1350, 1440, 1530,
     1590, 1680, 1770, 1860, 1950, 2040),
    (-1, 17, 28, 44, 64, 88, 112, 130, 156, 192, 224, 264, 308, 352, 384, 432, 480, 532, 588,
     650, 700, 750, 816, 900, 960, 1050, 1110, 1200, 1260, 1350, 1440, 1530, 1620, 1710, 1800,
     1890, 1980, 2100, 2220, 2310, 2430),
)

_ECC_BLOCKS: tuple[tuple[int, ...], ...] = (
    (-1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 4, 4, 4, 4, 4, 6, 6, 6, 6, 7, 8, 8, 9, 9, 10, 12, 12, 12, 13,
     14, 15, 16, 17, 18, 19, 19, 20, 21, 22, 24, 25),
    (-1, 1, 1, 1, 2, 2, 4, 4, 4, 5, 5, 5, 8, 9, 9, 10, 10, 11, 13, 14, 16, 17, 17, 18, 20, 21,
     23, 25, 26, 28, 29, 31, 33, 35, 37, 38, 40, 43, 45, 47, 49),
    (-1, 1, 1, 2, 2, 4, 4, 6, 6, 8, 8, 8, 10, 12, 16, 12, 17, 16, 18, 21, 20, 23, 23, 25, 27,
     29, 34, 34, 35, 38, 40, 43, 45, 48, 51, 53, 56, 59, 62, 65, 68),
    (-1, 1, 1, 2, 4, 4, 4, 5, 6, 8, 8, 11, 11, 16, 16, 18, 16, 19, 21, 25, 25, 25, 34, 30, 32,
     35, 37, 40, 42, 45, 48, 51, 54, 57, 60, 63, 66, 70, 74, 77, 81),
)


def _check_version(version: int) -> None:
    if not 1 <= version <= 40:
        raise ValueError(f"version number out of range: {version}")


def alignment_pattern_positions(version: int) -> list[int]:
    """Ascending centre coordinates of alignment patterns, used on both axes."""
    _check_version(version)
    if version == 1:
        return []
    count = version // 7 + 2
    if version == 32:
        step = 26
    else:
        step = (version * 4 + count * 2 + 1) // (2 * count - 2) * 2
    size = version * 4 + 17
    positions = [size - 7 - i * step for i in range(count - 1)]
    return [6] + positions[::-1]


def num_raw_data_modules(version: int) -> int:
    """Modules available for data and error correction bits at a version."""
    _check_version(version)
    result = (16 * version + 128) * version + 64
    if version >= 2:
        count = version // 7 + 2
        result -= (25 * count - 10) * count - 55
        if version >= 7:
            result -= 18 * 2
    return result


def num_error_correction_codewords(version: int, ecl: Ecc) -> int:
    """Total error correction codewords at a version and level."""
    _check_version(version)
    return _ECC_CODEWORDS[ecl.ordinal][version]


def num_error_correction_blocks(version: int, ecl: Ecc) -> int:
    """Number of error correction blocks at a version and level."""
    _check_version(version)
    return _ECC_BLOCKS[ecl.ordinal][version]


def num_data_codewords(version: int, ecl: Ecc) -> int:
    """Data codewords held at a version and level, remainder bits discarded."""
    _check_version(version)
    return num_raw_data_modules(version) // 8 - num_error_correction_codewords(version, ecl)