# numf/cli/commands.py
from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional, TextIO

from numf.app.config import NumfConfig
from numf.app.inputs import collect_numbers
from numf.errors import InputError
from numf.format import Format

from numf.cli.args import build_options, resolve_cli_width, resolve_rand_max

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_log = logging.getLogger(__name__)


# ---------------- Logging ----------------

def verbosity_level(verbose: int, default: str = "WARNING") -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.getLevelName(default.upper())


def configure_logging(
    level: int,
    *,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> List[logging.Handler]:
    """
    Attach a stderr handler (and optionally a file handler) to the root
    logger. Idempotent. Kept in CLI (presentation-layer concern).

    Returns the handlers added by this call so the caller can detach them.
    """
    root = logging.getLogger()
    formatter = logging.Formatter(LOG_FORMAT)
    stream = stream or sys.stderr
    added: List[logging.Handler] = []

    # the previous stream may already be closed, never flush it
    for h in [h for h in root.handlers if getattr(h, "_numf", False)]:
        root.removeHandler(h)
        h.close()

    sh = logging.StreamHandler(stream)
    sh.setFormatter(formatter)
    sh._numf = True  # type: ignore[attr-defined]
    root.addHandler(sh)
    added.append(sh)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        target = str(log_file.resolve())
        if not any(
            isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target
            for h in root.handlers
        ):
            fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
            fh.setFormatter(formatter)
            root.addHandler(fh)
            added.append(fh)

    root.setLevel(level)
    return added


def detach_logging(handlers: List[logging.Handler]) -> None:
    root = logging.getLogger()
    for h in handlers:
        root.removeHandler(h)
        h.close()


# ---------------- Commands ----------------

def cmd_format(
    args: argparse.Namespace,
    cfg: NumfConfig,
    *,
    stdin: Optional[BinaryIO],
    stdout: BinaryIO,
) -> int:
    width = resolve_cli_width(args, cfg)
    options = build_options(args, cfg)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()

    numbers = collect_numbers(
        args.numbers,
        width=width,
        stdin=stdin,
        rand_count=args.rand,
        rand_max=resolve_rand_max(args, cfg, width),
        rng=rng,
    )
    if not numbers:
        raise InputError(
            "No numbers to format.",
            hint="pass numbers as arguments, pipe them into stdin or use --rand N",
        )

    _log.info("Formatting %d number(s) as %s", len(numbers), options.format.value)

    for num in numbers:
        out = options.render(num)
        if options.format is Format.RAW:
            stdout.write(out)
        else:
            stdout.write(out + b"\n")
    stdout.flush()
    return 0
