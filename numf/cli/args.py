# numf/cli/args.py
from __future__ import annotations

import argparse
from typing import Optional, Tuple

from numf import __version__
from numf.app.config import NumfConfig, load_config
from numf.errors import InputError, NumfError
from numf.format import Format, FormatOptions, UnsignedWidth, numf_parser_str, resolve_width

NUMBERS_HELP = """\
numbers to format. Decimal needs no prefix, every other format does:
'0x' hexadecimal, '0b' binary, '0o' octal, '0s' Base64, '032s' Base32.
'_' may be used as a separator anywhere. May be left empty when numbers
come from stdin or --rand."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numf",
        description="Convert numbers between decimal, hex, binary, octal, Base64, Base32 and raw bytes.",
    )

    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument("-x", "--hex", dest="format", action="store_const", const=Format.HEX,
                     help="format to hexadecimal (default)")
    fmt.add_argument("-b", "--bin", dest="format", action="store_const", const=Format.BIN,
                     help="format to binary")
    fmt.add_argument("-d", "--dec", dest="format", action="store_const", const=Format.DEC,
                     help="format to decimal")
    fmt.add_argument("-o", "--oct", dest="format", action="store_const", const=Format.OCTAL,
                     help="format to octal")
    fmt.add_argument("-s", "--base64", dest="format", action="store_const", const=Format.BASE64,
                     help="format to Base64")
    fmt.add_argument("-z", "--base32", dest="format", action="store_const", const=Format.BASE32,
                     help="format to Base32")
    fmt.add_argument("-a", "--raw", dest="format", action="store_const", const=Format.RAW,
                     help="write the raw bytes of each number to stdout; when piped back into "
                          "numf, bytes that decode as UTF-8 are split on whitespace")

    parser.add_argument("-p", "--prefix", action="store_true", default=None,
                        help='add a prefix (like "0x" for hex)')
    parser.add_argument("-P", "--padding", action="store_true", default=None,
                        help="pad hex to whole bytes and binary to multiples of 8 bits, "
                             "e.g. 0b1100 becomes 0b00001100")

    parser.add_argument("-r", "--rand", type=int, default=0, metavar="N",
                        help="append N random numbers to the list")
    parser.add_argument("-m", "--rand-max", default=None, metavar="VALUE",
                        help="largest random number (any numf format, default: width maximum)")
    parser.add_argument("--seed", type=int, default=None, help="seed for --rand")

    parser.add_argument("-w", "--width", default=None,
                        help="unsigned width for parsing: u8, u16, u32, u64, u128 or a bit count")
    parser.add_argument("-c", "--config", default=None, metavar="PATH",
                        help="YAML config file (default: $NUMF_CONFIG or ~/.config/numf/config.yml)")

    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more log output on stderr (-v info, -vv debug)")
    parser.add_argument("--log-file", default=None, metavar="PATH", help="also write the log to PATH")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("numbers", nargs="*", help=NUMBERS_HELP)
    return parser


def build_options(args: argparse.Namespace, cfg: NumfConfig) -> FormatOptions:
    """Command line flags win over the config file."""
    return FormatOptions(
        prefix=cfg.prefix if args.prefix is None else bool(args.prefix),
        padding=cfg.padding if args.padding is None else bool(args.padding),
        format=args.format or cfg.format,
    )


def resolve_cli_width(args: argparse.Namespace, cfg: NumfConfig) -> UnsignedWidth:
    if args.width is None:
        return cfg.width
    try:
        return resolve_width(args.width)
    except ValueError as e:
        raise InputError(str(e), hint="use u8, u16, u32, u64, u128 or a bit count") from None


def resolve_rand_max(args: argparse.Namespace, cfg: NumfConfig, width: UnsignedWidth) -> Optional[int]:
    if args.rand_max is None:
        return cfg.rand_max
    try:
        return numf_parser_str(args.rand_max, width)
    except NumfError as e:
        raise InputError(f"Invalid --rand-max: {e.message}", hint=e.hint) from None


def parse_args(argv: Optional[list[str]] = None) -> Tuple[argparse.Namespace, NumfConfig]:
    """
    Returns: (args, cfg)

    cfg is the loaded config file (or built-in defaults); flags are merged
    on top of it by build_options / resolve_cli_width / resolve_rand_max.
    """
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    return args, cfg
