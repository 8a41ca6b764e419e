# numf/format/parser.py
from __future__ import annotations

import base64
import logging
import re
from typing import Dict, Optional, Union

from numf.errors import (
    NumberOverflowError,
    RadixParseError,
    UnrecognizedFormatError,
    Utf8DecodeError,
)

from .defs import RADIX, Format
from .width import DEFAULT_WIDTH, WidthLike, bytes_to_unsigned, resolve_width

BytesLike = Union[bytes, bytearray, memoryview]

GROUP_SEPARATOR = "_"

_DIGITS: Dict[int, re.Pattern[str]] = {
    2: re.compile(r"\+?[01]+"),
    8: re.compile(r"\+?[0-7]+"),
    10: re.compile(r"\+?[0-9]+"),
    16: re.compile(r"\+?[0-9A-Fa-f]+"),
}

# prefixes never overlap, first match wins
_TEXT_FORMATS = (Format.HEX, Format.OCTAL, Format.BIN, Format.BASE64, Format.BASE32)


def text_view(data: BytesLike, *, strict: bool = False) -> str:
    """
    Decode `data` as UTF-8.

    Lossy by default (undecodable bytes become U+FFFD). With strict=True an
    invalid sequence raises Utf8DecodeError instead.
    """
    raw = bytes(data)
    if not strict:
        return raw.decode("utf-8", errors="replace")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8DecodeError(
            f"Input is not valid UTF-8 at byte {e.start}",
            format=None,
            text=raw.decode("utf-8", errors="replace"),
            hint="Pass the bytes to numf_parser to read them as a raw number.",
        ) from None


def is_plain_decimal(text: str) -> bool:
    return _DIGITS[10].fullmatch(text) is not None


class NumberParser:
    """
    Detect the format of a numf-encoded value and turn it back into an int.

    Stateless apart from the target width, safe to share between threads.
    """

    def __init__(self, width: WidthLike = DEFAULT_WIDTH, logger: Optional[logging.Logger] = None):
        self.width = resolve_width(width)
        self._log = logger or logging.getLogger(__name__)

    # ---------------- Public API ----------------
    def parse(self, data: BytesLike) -> int:
        """Parse raw input. Text is tried first, raw bytes are the fallback."""
        raw = bytes(data)
        text = text_view(raw).replace(GROUP_SEPARATOR, "")

        if text.startswith(Format.DEC.prefix_str) or is_plain_decimal(text):
            body = text[len(Format.DEC.prefix_str):] if text.startswith(Format.DEC.prefix_str) else text
            return self._finish(Format.DEC, self._parse_radix(Format.DEC, body), body)

        for fmt in _TEXT_FORMATS:
            if not text.startswith(fmt.prefix_str):
                continue
            body = text[len(fmt.prefix_str):]
            if fmt in RADIX:
                value = self._parse_radix(fmt, body)
            else:
                value = self._parse_rfc4648(fmt, body)
            return self._finish(fmt, value, body)

        return self._finish(Format.RAW, self._parse_raw(raw), text)

    def parse_str(self, text: str) -> int:
        return self.parse(text.encode("utf-8"))

    # ---------------- Helpers ----------------
    def _parse_radix(self, fmt: Format, body: str) -> int:
        base = RADIX[fmt]
        if _DIGITS[base].fullmatch(body) is None:
            if not body:
                msg = f"Missing digits after {fmt.value} prefix"
            else:
                msg = f"Invalid digit for base {base} in {fmt.value} value '{body}'"
            raise RadixParseError(msg, format=fmt.value, text=body)
        return int(body, base)

    def _parse_rfc4648(self, fmt: Format, body: str) -> int:
        try:
            if fmt is Format.BASE64:
                decoded = base64.b64decode(body, validate=True)
            else:
                decoded = base64.b32decode(body)
        except ValueError as e:
            # binascii.Error and non-ASCII input both land here
            raise RadixParseError(
                f"Invalid {fmt.value} value '{body}': {e}",
                format=fmt.value,
                text=body,
                hint="Use the standard RFC 4648 alphabet with '=' padding.",
            ) from None
        return bytes_to_unsigned(decoded)

    def _parse_raw(self, raw: bytes) -> int:
        if not raw:
            raise UnrecognizedFormatError(
                "Could not determine the format of the value",
                format=None,
                text="",
                hint="Numbers other than decimal need a prefix (0x, 0b, 0o, 0s, 032s).",
            )
        # leading NUL byte on longer input is a sentinel, not data
        if raw[0] == 0 and len(raw) > 2:
            raw = raw[1:]
        return bytes_to_unsigned(raw)

    def _finish(self, fmt: Format, value: int, text: str) -> int:
        if value > self.width.max_value:
            raise NumberOverflowError(
                f"{fmt.value} value '{text}' does not fit into {self.width.name}",
                format=fmt.value,
                text=text,
                details={"width": self.width.name, "max": self.width.max_value},
            )
        self._log.debug("Parsed %s value=%d width=%s", fmt.value, value, self.width.name)
        return value


_DEFAULT_PARSER = NumberParser()


def _parser_for(width: WidthLike) -> NumberParser:
    w = resolve_width(width)
    if w == _DEFAULT_PARSER.width:
        return _DEFAULT_PARSER
    return NumberParser(w)


def numf_parser(data: BytesLike, width: WidthLike = DEFAULT_WIDTH) -> int:
    """
    Parse a value written in any numf format.

    Unprefixed numerals are decimal. Other formats are recognised by their
    prefix, case sensitive, so b"0b1100" is binary, b"0x10" is hex and so on.
    Input that matches nothing is read as raw big-endian bytes.
    """
    return _parser_for(width).parse(data)


def numf_parser_str(text: str, width: WidthLike = DEFAULT_WIDTH) -> int:
    return _parser_for(width).parse_str(text)
