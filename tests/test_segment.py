import pytest

from ebeatkit.segment import (
    Mode,
    QrSegment,
    is_alphanumeric,
    is_numeric,
    make_alphanumeric,
    make_bytes,
    make_numeric,
    make_segments,
    total_bits,
)


def test_mode_indicator_bits():
    assert make_numeric("1").mode.mode_bits == 0x1
    assert make_alphanumeric("A").mode.mode_bits == 0x2
    assert make_bytes(b"x").mode.mode_bits == 0x4
    assert Mode.KANJI.mode_bits == 0x8


@pytest.mark.parametrize(
    "mode, widths",
    [
        (Mode.NUMERIC, (10, 12, 14)),
        (Mode.ALPHANUMERIC, (9, 11, 13)),
        (Mode.BYTE, (8, 16, 16)),
        (Mode.KANJI, (8, 10, 12)),
    ],
)
def test_char_count_bits_by_version_range(mode, widths):
    assert (mode.char_count_bits(1), mode.char_count_bits(9)) == (widths[0], widths[0])
    assert (mode.char_count_bits(10), mode.char_count_bits(26)) == (widths[1], widths[1])
    assert (mode.char_count_bits(27), mode.char_count_bits(40)) == (widths[2], widths[2])


@pytest.mark.parametrize("version", [0, 41, -3])
def test_char_count_bits_bad_version(version):
    with pytest.raises(ValueError):
        Mode.BYTE.char_count_bits(version)


def test_numeric_worked_example():
    segment = make_numeric("01234567")
    assert segment.mode is Mode.NUMERIC
    assert segment.num_chars == 8
    assert segment.bit_length == 27
    assert segment.data == bytes([0x03, 0x15, 0x98, 0x60])


def test_alphanumeric_worked_example():
    segment = make_alphanumeric("AC-42")
    assert segment.mode is Mode.ALPHANUMERIC
    assert segment.num_chars == 5
    assert segment.bit_length == 28
    assert segment.data == bytes([0x39, 0xDC, 0xE4, 0x20])


@pytest.mark.parametrize("text", ["", "7", "42", "123", "9876543210"])
def test_numeric_data_length_matches_bits(text):
    segment = make_numeric(text)
    assert segment.num_chars == len(text)
    assert len(segment.data) == (segment.bit_length + 7) // 8


@pytest.mark.parametrize("text", ["", "A", "HELLO WORLD", "$%*+-./:"])
def test_alphanumeric_data_length_matches_bits(text):
    segment = make_alphanumeric(text)
    assert segment.num_chars == len(text)
    assert len(segment.data) == (segment.bit_length + 7) // 8


def test_make_numeric_rejects_letters():
    with pytest.raises(ValueError):
        make_numeric("12a")


@pytest.mark.parametrize("text", ["abc", "A#B", "A\tB"])
def test_make_alphanumeric_rejects_unencodable(text):
    with pytest.raises(ValueError):
        make_alphanumeric(text)


def test_make_bytes():
    segment = make_bytes(b"\x01\x02\x03")
    assert segment.mode is Mode.BYTE
    assert segment.num_chars == 3
    assert segment.bit_length == 24
    assert segment.data == b"\x01\x02\x03"


def test_is_numeric():
    assert is_numeric("0123456789")
    assert is_numeric("")
    assert not is_numeric("12 3")
    assert not is_numeric("١٢")


def test_is_alphanumeric():
    assert is_alphanumeric("HELLO WORLD")
    assert is_alphanumeric("0123")
    assert not is_alphanumeric("hello")
    assert not is_alphanumeric("A!")


def test_make_segments_empty():
    assert make_segments("") == []


def test_make_segments_picks_mode():
    assert [s.mode for s in make_segments("314159")] == [Mode.NUMERIC]
    assert [s.mode for s in make_segments("HTTP://X")] == [Mode.ALPHANUMERIC]
    assert [s.mode for s in make_segments("hello")] == [Mode.BYTE]


def test_make_segments_bytes_use_utf8():
    (segment,) = make_segments("é!")
    assert segment.data == "é!".encode("utf-8")
    assert segment.num_chars == len("é!".encode("utf-8"))


def test_segment_rejects_inconsistent_length():
    with pytest.raises(ValueError):
        QrSegment(Mode.BYTE, 1, b"\x00", 9)
    with pytest.raises(ValueError):
        QrSegment(Mode.BYTE, -1, b"", 0)


def test_segment_is_immutable():
    segment = make_bytes(b"x")
    with pytest.raises(AttributeError):
        segment.num_chars = 5
    assert segment.num_chars == 1


def test_total_bits_empty_is_zero():
    assert total_bits([], 1) == 0


def test_total_bits_is_additive():
    first = make_numeric("123")
    second = make_bytes(b"abc")
    assert total_bits([first, second], 5) == total_bits([first], 5) + total_bits([second], 5)


def test_total_bits_includes_header():
    segment = make_bytes(b"abc")
    expected = 4 + Mode.BYTE.char_count_bits(1) + segment.bit_length
    assert total_bits([segment], 1) == expected


def test_total_bits_none_when_count_overflows():
    segment = make_bytes(bytes(256))
    assert total_bits([segment], 1) is None
    assert total_bits([segment], 10) == 4 + 16 + segment.bit_length


@pytest.mark.parametrize("version", [0, 41])
def test_total_bits_bad_version(version):
    with pytest.raises(ValueError):
        total_bits([], version)