# numf/format/encoder.py
from __future__ import annotations

import base64

from .defs import Format
from .options import FormatOptions
from .width import unsigned_to_bytes


def _check_value(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected an unsigned integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Signed values are not supported: {value}")
    return value


def _pad_to_multiple(digits: str, multiple: int) -> str:
    return "0" * ((multiple - len(digits) % multiple) % multiple) + digits


def encode_body(fmt: Format, value: int, *, padding: bool = False) -> bytes:
    """Digit body for `fmt`, without any prefix."""
    value = _check_value(value)

    if fmt is Format.DEC:
        return str(value).encode("ascii")
    if fmt is Format.HEX:
        digits = format(value, "X")
        if padding:
            digits = _pad_to_multiple(digits, 2)
        return digits.encode("ascii")
    if fmt is Format.BIN:
        digits = format(value, "b")
        if padding:
            digits = _pad_to_multiple(digits, 8)
        return digits.encode("ascii")
    if fmt is Format.OCTAL:
        return format(value, "o").encode("ascii")
    if fmt is Format.BASE64:
        return base64.b64encode(unsigned_to_bytes(value))
    if fmt is Format.BASE32:
        return base64.b32encode(unsigned_to_bytes(value))
    if fmt is Format.RAW:
        return unsigned_to_bytes(value)

    raise NotImplementedError(f"Unknown format '{fmt}'")


def encode(fmt: Format, value: int, options: FormatOptions) -> bytes:
    buf = bytearray()
    if options.prefix:
        buf += fmt.prefix
    buf += encode_body(fmt, value, padding=options.padding)
    return bytes(buf)


def encode_str(fmt: Format, value: int, options: FormatOptions) -> str:
    """Lossy text view of `encode`, for display."""
    return encode(fmt, value, options).decode("utf-8", errors="replace")
