# numf/format/defs.py
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from .options import FormatOptions


class Format(Enum):
    """Representations numf can write and read back."""

    DEC = "dec"
    HEX = "hex"
    BIN = "bin"
    OCTAL = "octal"
    BASE64 = "base64"
    BASE32 = "base32"
    RAW = "raw"

    @property
    def prefix(self) -> bytes:
        return PREFIXES[self]

    @property
    def prefix_str(self) -> str:
        return PREFIXES[self].decode("ascii")

    @classmethod
    def from_name(cls, name: str) -> "Format":
        key = str(name).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            known = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown format '{name}' (known: {known})") from None

    # Delegated
    def format(self, value: int, options: "FormatOptions") -> bytes:
        from .encoder import encode
        return encode(self, value, options)

    def format_str(self, value: int, options: "FormatOptions") -> str:
        from .encoder import encode_str
        return encode_str(self, value, options)


# Non-RAW prefixes must not be leading sequences of each other, the parser
# takes the first match.
PREFIXES: Dict[Format, bytes] = {
    Format.DEC:    b"0d",
    Format.HEX:    b"0x",
    Format.BIN:    b"0b",
    Format.OCTAL:  b"0o",
    Format.BASE64: b"0s",
    Format.BASE32: b"032s",
    Format.RAW:    b"",
}

_ALIASES: Dict[str, str] = {
    "oct": "octal",
    "decimal": "dec",
    "hexadecimal": "hex",
    "binary": "bin",
}

RADIX: Dict[Format, int] = {
    Format.DEC: 10,
    Format.HEX: 16,
    Format.BIN: 2,
    Format.OCTAL: 8,
}

DEFAULT_FORMAT = Format.HEX
