# numf/cli/main.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO, List, Optional

from numf.errors import NumfError

from numf.cli.args import parse_args
from numf.cli.commands import cmd_format, configure_logging, detach_logging, verbosity_level


def _stdin_stream(stdin) -> Optional[BinaryIO]:
    # only read numbers from stdin when something is piped in
    if stdin is None or stdin.isatty():
        return None
    return getattr(stdin, "buffer", stdin)


def main(
    argv: Optional[list[str]] = None,
    *,
    stdin=None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    handlers: List[logging.Handler] = []
    try:
        args, cfg = parse_args(argv)

        handlers = configure_logging(
            verbosity_level(args.verbose, cfg.log_level),
            log_file=Path(args.log_file) if args.log_file else None,
        )

        return cmd_format(
            args,
            cfg,
            stdin=_stdin_stream(sys.stdin if stdin is None else stdin),
            stdout=stdout if stdout is not None else sys.stdout.buffer,
        )
    except NumfError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        return 1
    finally:
        detach_logging(handlers)


def run() -> None:
    sys.exit(main())
