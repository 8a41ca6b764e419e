# numf/app/inputs.py
from __future__ import annotations

import logging
import random
from typing import BinaryIO, Iterable, List, Optional

from numf.errors import InputError, Utf8DecodeError
from numf.format import DEFAULT_WIDTH, numf_parser, numf_parser_str, resolve_width
from numf.format.parser import text_view
from numf.format.width import WidthLike

_log = logging.getLogger(__name__)


def parse_numbers(tokens: Iterable[str], width: WidthLike = DEFAULT_WIDTH) -> List[int]:
    return [numf_parser_str(tok, width) for tok in tokens]


def read_stdin_numbers(stream: BinaryIO, width: WidthLike = DEFAULT_WIDTH) -> List[int]:
    """
    Slurp a binary stream and parse what is in it.

    Text is split on whitespace and every token parsed on its own, so raw
    bytes that happen to be valid UTF-8 are read as text too. Data that is
    not UTF-8 is one raw number.
    """
    raw = stream.read()
    if not raw:
        return []

    try:
        text = text_view(raw, strict=True)
    except Utf8DecodeError:
        _log.info("stdin is not UTF-8, reading %d bytes as one raw value", len(raw))
        return [numf_parser(raw, width)]

    tokens = text.split()
    _log.debug("Read %d token(s) from stdin", len(tokens))
    return parse_numbers(tokens, width)


def random_numbers(count: int, maximum: int, rng: Optional[random.Random] = None) -> List[int]:
    """`count` values drawn uniformly from [0, maximum]."""
    if count < 0:
        raise InputError(f"Random count must not be negative, got {count}")
    if maximum < 0:
        raise InputError(f"Random maximum must not be negative, got {maximum}")
    rng = rng or random.Random()
    return [rng.randint(0, maximum) for _ in range(count)]


def collect_numbers(
    args: Iterable[str],
    *,
    width: WidthLike = DEFAULT_WIDTH,
    stdin: Optional[BinaryIO] = None,
    rand_count: int = 0,
    rand_max: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Build the full list of numbers to format: argv first, then stdin, then
    random values. All I/O and randomness happen here, before any encoding.
    """
    numbers = parse_numbers(args, width)

    if stdin is not None:
        numbers.extend(read_stdin_numbers(stdin, width))

    if rand_count:
        w = resolve_width(width)
        maximum = w.max_value if rand_max is None else rand_max
        if maximum > w.max_value:
            raise InputError(
                f"Random maximum {maximum} does not fit into {w.name}",
                hint=f"use a value up to {w.max_value} or a wider --width",
            )
        numbers.extend(random_numbers(rand_count, maximum, rng))
        _log.debug("Appended %d random value(s) up to %d", rand_count, maximum)

    return numbers
