# numf/format/options.py
from __future__ import annotations

from dataclasses import dataclass, replace

from .defs import DEFAULT_FORMAT, Format


@dataclass(frozen=True)
class FormatOptions:
    """
    Encode-time behaviour.

    prefix  -- emit the format's prefix ("0x", "0b", ...) before the digits
    padding -- pad hex to whole bytes and binary to multiples of 8 bits;
               ignored by every other format
    format  -- target format, hex unless told otherwise
    """
    prefix: bool = False
    padding: bool = False
    format: Format = DEFAULT_FORMAT

    def with_format(self, fmt: Format) -> "FormatOptions":
        return replace(self, format=fmt)

    def with_prefix(self, value: bool) -> "FormatOptions":
        return replace(self, prefix=bool(value))

    def with_padding(self, value: bool) -> "FormatOptions":
        return replace(self, padding=bool(value))

    def render(self, value: int) -> bytes:
        return self.format.format(value, self)
