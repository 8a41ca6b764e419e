from __future__ import annotations

import logging

import pytest

import numf.format.parser as parser_mod
from numf.errors import (
    NumberOverflowError,
    RadixParseError,
    UnrecognizedFormatError,
    Utf8DecodeError,
)
from numf.format import Format, FormatOptions, NumberParser, numf_parser, numf_parser_str

U128_MAX = (1 << 128) - 1

BOUNDARY_VALUES = [
    0, 1, 7, 8, 0xFF, 0x100, 1337, 0x41414242, 0xDEADBEEF,
    (1 << 64) - 1, 1 << 64, U128_MAX >> 1, U128_MAX,
]


def test_parse_prefixed_values():
    assert numf_parser_str("0b11001") == 0b11001
    assert numf_parser_str("0o771171") == 0o771171
    assert numf_parser_str("0xdeadbeef") == 0xDEADBEEF
    assert numf_parser_str("0xDEADBEEF") == 0xDEADBEEF
    assert numf_parser_str("0d1337") == 1337
    assert numf_parser_str("0sQUFCQg==") == 0x41414242
    assert numf_parser_str("032sIFAUEQQ=") == 0x41414242


def test_unprefixed_numeral_is_decimal():
    assert numf_parser_str("1337") == 1337
    assert numf_parser_str("0") == 0
    assert numf_parser_str("0010") == 10


def test_underscores_are_ignored():
    assert numf_parser_str("5_500") == numf_parser_str("5500") == 5500
    assert numf_parser_str("0x_dead_beef") == 0xDEADBEEF
    assert numf_parser_str("0b1111_0000") == 0xF0
    assert numf_parser_str("0_x_1_0") == 16


def test_single_leading_plus_is_accepted():
    assert numf_parser_str("+5") == 5
    assert numf_parser_str("0x+1") == 1
    assert numf_parser_str("0d+7") == 7
    assert numf_parser_str("0b+1_01") == 5


def test_bytes_and_str_entry_points_agree():
    assert numf_parser(b"0x10") == numf_parser_str("0x10") == 16
    assert numf_parser(bytearray(b"42")) == 42


def test_raw_fallback_strips_leading_zero_sentinel():
    assert numf_parser(bytes([0x00, 0x50, 0x60])) == 0x5060


def test_raw_fallback_keeps_short_input_as_is():
    assert numf_parser(bytes([0x00, 0x50])) == 0x50
    assert numf_parser(bytes([0x00])) == 0
    assert numf_parser(bytes([0xFF])) == 0xFF


def test_raw_fallback_does_not_need_utf8():
    data = bytes([0xFF, 0xFE, 0x01])
    assert numf_parser(data) == 0xFFFE01


def test_raw_fallback_uses_original_bytes_not_text_view():
    # '_' is stripped from the text view only
    assert numf_parser(b"\xff_") == 0xFF5F


def test_raw_round_trip_with_empty_prefix():
    opts = FormatOptions(prefix=True)
    for value in (0x5060, 0xFF, 0x00FF00, 0xABCDEF12):
        assert numf_parser(Format.RAW.format(value, opts)) == value


def test_empty_input_is_unrecognized():
    with pytest.raises(UnrecognizedFormatError) as exc:
        numf_parser(b"")
    assert exc.value.code == "unrecognized_format"
    assert exc.value.hint


@pytest.mark.parametrize(
    "text, fmt",
    [
        ("0xZZ", "hex"),
        ("0b102", "bin"),
        ("0o8", "octal"),
        ("0d12a", "dec"),
        ("0x", "hex"),
        ("0d", "dec"),
        ("0x++1", "hex"),
        ("0x-1", "hex"),
        ("0d+-1", "dec"),
        ("0x 1", "hex"),
    ],
)
def test_invalid_digits_raise_radix_error(text, fmt):
    with pytest.raises(RadixParseError) as exc:
        numf_parser_str(text)
    assert exc.value.format == fmt
    assert exc.value.details["format"] == fmt


def test_radix_error_carries_offending_text():
    with pytest.raises(RadixParseError) as exc:
        numf_parser_str("0xBEER")
    assert exc.value.text == "BEER"
    assert "BEER" in str(exc.value)


@pytest.mark.parametrize("text", ["0s!!!!", "0sQUFCQg", "032sifaueqq=", "032s1111"])
def test_invalid_rfc4648_bodies_raise_radix_error(text):
    with pytest.raises(RadixParseError):
        numf_parser_str(text)


def test_overflow_respects_width():
    assert numf_parser_str("255", "u8") == 255
    with pytest.raises(NumberOverflowError) as exc:
        numf_parser_str("256", "u8")
    assert exc.value.format == "dec"
    assert exc.value.details["width"] == "u8"

    with pytest.raises(NumberOverflowError):
        numf_parser_str("0x1" + "0" * 32)
    assert numf_parser_str("0x" + "F" * 32) == U128_MAX


def test_overflow_in_base64_and_raw():
    with pytest.raises(NumberOverflowError):
        numf_parser_str("0sAQA=", 8)  # 0x0100
    with pytest.raises(NumberOverflowError):
        numf_parser(b"\xff\xff\xff", "u16")


def test_width_as_bit_count():
    assert numf_parser_str("0xFFF", 12) == 0xFFF
    with pytest.raises(NumberOverflowError):
        numf_parser_str("0x1000", 12)


@pytest.mark.parametrize("fmt", [f for f in Format if f is not Format.RAW])
@pytest.mark.parametrize("padding", [False, True])
def test_round_trip_all_text_formats(fmt, padding):
    opts = FormatOptions(prefix=True, padding=padding)
    for value in BOUNDARY_VALUES:
        assert numf_parser(fmt.format(value, opts)) == value


def test_decimal_round_trips_without_prefix():
    for value in BOUNDARY_VALUES:
        assert numf_parser(Format.DEC.format(value, FormatOptions())) == value


def test_parser_logs_detected_format(caplog):
    parser = NumberParser(logger=logging.getLogger("test"))
    with caplog.at_level(logging.DEBUG, logger="test"):
        assert parser.parse(b"0b101") == 5
    assert any("bin" in r.getMessage() for r in caplog.records)


def test_parser_instances_reuse_default_for_default_width():
    assert parser_mod._parser_for("u128") is parser_mod._DEFAULT_PARSER
    assert parser_mod._parser_for("u8") is not parser_mod._DEFAULT_PARSER


def test_text_view_lossy_and_strict():
    assert parser_mod.text_view(b"\xff1") == "�1"
    with pytest.raises(Utf8DecodeError) as exc:
        parser_mod.text_view(b"\xff1", strict=True)
    assert exc.value.code == "utf8_decode_error"
