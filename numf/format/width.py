# numf/format/width.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class UnsignedWidth:
    name: str
    bits: int

    @property
    def max_value(self) -> int:
        return (1 << self.bits) - 1

    @property
    def byte_len(self) -> int:
        return (self.bits + 7) // 8

    def fits(self, value: int) -> bool:
        return 0 <= value <= self.max_value


WIDTHS: Dict[str, UnsignedWidth] = {
    "u8":   UnsignedWidth(name="u8",   bits=8),
    "u16":  UnsignedWidth(name="u16",  bits=16),
    "u32":  UnsignedWidth(name="u32",  bits=32),
    "u64":  UnsignedWidth(name="u64",  bits=64),
    "u128": UnsignedWidth(name="u128", bits=128),
}

DEFAULT_WIDTH = WIDTHS["u128"]

WidthLike = Union[UnsignedWidth, str, int]


def resolve_width(width: WidthLike) -> UnsignedWidth:
    """Accept a table name ("u32"), a bit count (32) or an UnsignedWidth."""
    if isinstance(width, UnsignedWidth):
        return width
    # bool is an int subclass, never a width
    if isinstance(width, bool):
        raise ValueError(f"Invalid unsigned width {width!r}")
    if isinstance(width, int):
        if width <= 0:
            raise ValueError(f"Unsigned width must be positive, got {width}")
        for w in WIDTHS.values():
            if w.bits == width:
                return w
        return UnsignedWidth(name=f"u{width}", bits=width)
    if isinstance(width, str):
        key = width.strip().lower()
        if key in WIDTHS:
            return WIDTHS[key]
        if key.isdigit():
            return resolve_width(int(key))
        raise ValueError(f"Unknown unsigned width '{width}' (known: {', '.join(WIDTHS)})")
    raise ValueError(f"Invalid unsigned width {width!r}")


def unsigned_to_bytes(value: int) -> bytes:
    """Shortest non-empty big-endian representation; 0 is one zero byte."""
    if value < 0:
        raise ValueError(f"Cannot represent negative value {value} as unsigned")
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def bytes_to_unsigned(data: bytes) -> int:
    return int.from_bytes(data, "big")
