import pytest

from ebeatkit.qrcode import (
    DataTooLongError,
    QrCode,
    encode_binary,
    encode_segments,
    encode_text,
)
from ebeatkit.qrtables import Ecc, num_data_codewords
from ebeatkit.segment import make_bytes, make_segments, total_bits


def grid(qr):
    return [[qr.module(x, y) for x in range(qr.size)] for y in range(qr.size)]


def read_format_copies(qr):
    size = qr.size
    first = [qr.module(8, i) for i in range(6)]
    first += [qr.module(8, 7), qr.module(8, 8), qr.module(7, 8)]
    first += [qr.module(14 - i, 8) for i in range(9, 15)]
    second = [qr.module(size - 1 - i, 8) for i in range(8)]
    second += [qr.module(8, size - 15 + i) for i in range(8, 15)]

    def value(bits):
        return sum(int(bit) << i for i, bit in enumerate(bits))

    return value(first), value(second)


@pytest.mark.parametrize("text", ["", "12345", "HELLO WORLD", "Hello, world!", "x" * 120])
def test_size_follows_version(text):
    qr = encode_text(text, Ecc.LOW)
    assert qr.size == qr.version * 4 + 17
    assert 1 <= qr.version <= 40
    assert 0 <= qr.mask <= 7


def test_short_text_fits_version_one():
    assert encode_text("Hello, world!", Ecc.LOW).version == 1


def test_finder_patterns():
    qr = encode_text("HELLO", Ecc.MEDIUM)
    size = qr.size
    for cx, cy in ((3, 3), (size - 4, 3), (3, size - 4)):
        assert qr.module(cx, cy)
        assert qr.module(cx - 3, cy - 3)
        assert not qr.module(cx - 2, cy - 2)
        assert qr.module(cx - 1, cy)
    assert not qr.module(7, 7)
    assert not qr.module(size - 8, 7)


def test_dark_module_and_timing():
    qr = encode_text("ebeat", Ecc.QUARTILE)
    size = qr.size
    assert qr.module(8, size - 8)
    for i in range(8, size - 8):
        assert qr.module(i, 6) == (i % 2 == 0)
        assert qr.module(6, i) == (i % 2 == 0)


def test_outside_is_light():
    qr = encode_text("A", Ecc.LOW)
    assert not qr.module(-1, 0)
    assert not qr.module(0, qr.size)
    assert not qr.module(qr.size, qr.size)


@pytest.mark.parametrize("ecl", list(Ecc))
def test_format_bits_encode_level_and_mask(ecl):
    qr = encode_text("format check", ecl)
    first, second = read_format_copies(qr)
    assert first == second
    expected = qr.error_correction_level.format_bits << 3 | qr.mask
    assert (first ^ 0x5412) >> 10 == expected


@pytest.mark.parametrize("mask", range(8))
def test_fixed_mask_is_used(mask):
    qr = encode_segments(make_segments("HELLO"), Ecc.LOW, mask=mask)
    assert qr.mask == mask
    first, _ = read_format_copies(qr)
    assert ((first ^ 0x5412) >> 10) & 7 == mask


def test_with_mask_round_trip():
    qr = encode_text("round trip", Ecc.MEDIUM)
    other_mask = (qr.mask + 3) % 8
    changed = qr.with_mask(other_mask)
    assert changed.mask == other_mask
    assert grid(changed) != grid(qr)
    restored = changed.with_mask(qr.mask)
    assert grid(restored) == grid(qr)
    assert grid(qr.with_mask(-1)) == grid(qr)


def test_with_mask_rejects_bad_mask():
    qr = encode_text("A", Ecc.LOW)
    with pytest.raises(ValueError):
        qr.with_mask(8)


def test_boost_never_lowers_level():
    for ecl in Ecc:
        qr = encode_text("boost", ecl)
        assert qr.error_correction_level.ordinal >= ecl.ordinal


def test_no_boost_keeps_level():
    qr = encode_segments(make_segments("boost"), Ecc.LOW, boost_ecl=False)
    assert qr.error_correction_level is Ecc.LOW


def test_smallest_version_is_chosen():
    segments = make_segments("x" * 100)
    qr = encode_segments(segments, Ecc.LOW, boost_ecl=False)
    used = total_bits(segments, qr.version)
    assert used <= num_data_codewords(qr.version, Ecc.LOW) * 8
    assert qr.version > 1
    smaller = total_bits(segments, qr.version - 1)
    assert smaller > num_data_codewords(qr.version - 1, Ecc.LOW) * 8


def test_min_version_is_respected():
    qr = encode_segments(make_segments("1"), Ecc.LOW, min_version=5)
    assert qr.version == 5


def test_encode_binary_matches_byte_segment():
    data = b"\x00\x01binary\xff"
    assert grid(encode_binary(data, Ecc.HIGH)) == grid(encode_segments([make_bytes(data)], Ecc.HIGH))


def test_data_too_long():
    with pytest.raises(DataTooLongError):
        encode_binary(bytes(2954), Ecc.LOW)
    with pytest.raises(DataTooLongError):
        encode_segments(make_segments("x" * 100), Ecc.LOW, max_version=1)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_version": 0},
        {"max_version": 41},
        {"min_version": 5, "max_version": 4},
        {"mask": -2},
        {"mask": 8},
    ],
)
def test_encode_segments_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        encode_segments(make_segments("A"), Ecc.LOW, **kwargs)


def test_constructor_directly():
    codewords = bytes(num_data_codewords(2, Ecc.QUARTILE))
    qr = QrCode(2, Ecc.QUARTILE, codewords, 4)
    assert qr.version == 2
    assert qr.size == 2 * 4 + 17
    assert qr.mask == 4
    assert qr.error_correction_level is Ecc.QUARTILE


def test_constructor_rejects_bad_input():
    codewords = bytes(num_data_codewords(1, Ecc.LOW))
    with pytest.raises(ValueError):
        QrCode(0, Ecc.LOW, codewords, 0)
    with pytest.raises(ValueError):
        QrCode(1, Ecc.LOW, codewords, 9)
    with pytest.raises(ValueError):
        QrCode(1, Ecc.LOW, codewords + b"\x00", 0)


def test_svg_draws_every_dark_module():
    qr = encode_text("svg", Ecc.LOW)
    svg = qr.to_svg(4)
    dark = sum(sum(row) for row in grid(qr))
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
    assert svg.count("h1v1h-1z") == dark
    assert f'viewBox="0 0 {qr.size + 8} {qr.size + 8}"' in svg
    assert "M4,4h1v1h-1z" in svg
    assert svg.endswith("</svg>\n")


def test_svg_rejects_negative_border():
    with pytest.raises(ValueError):
        encode_text("A", Ecc.LOW).to_svg(-1)