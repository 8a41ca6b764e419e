# numf/format/__init__.py

from .defs import Format, PREFIXES, DEFAULT_FORMAT
from .options import FormatOptions
from .width import UnsignedWidth, WIDTHS, DEFAULT_WIDTH, resolve_width
from .parser import NumberParser, numf_parser, numf_parser_str

__all__ = [
    "Format", "PREFIXES", "DEFAULT_FORMAT",
    "FormatOptions",
    "UnsignedWidth", "WIDTHS", "DEFAULT_WIDTH", "resolve_width",
    "NumberParser", "numf_parser", "numf_parser_str",
]
