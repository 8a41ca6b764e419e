"""
Format numbers.

Convert unsigned integers to decimal, hexadecimal, binary, octal, Base64,
Base32 or raw bytes, and parse any of those back.

Highlights:
  * numf.numf_parser / numf.numf_parser_str
  * numf.Format.format / numf.Format.format_str
"""

from .format import (
    Format,
    FormatOptions,
    NumberParser,
    numf_parser,
    numf_parser_str,
)
from .errors import (
    NumfError,
    DecodeError,
    UnrecognizedFormatError,
    RadixParseError,
    NumberOverflowError,
    Utf8DecodeError,
)

__version__ = "0.4.0"

__all__ = [
    "Format", "FormatOptions", "NumberParser",
    "numf_parser", "numf_parser_str",
    "NumfError", "DecodeError", "UnrecognizedFormatError",
    "RadixParseError", "NumberOverflowError", "Utf8DecodeError",
    "__version__",
]
