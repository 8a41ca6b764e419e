# numf/errors.py
from __future__ import annotations

from typing import Optional


class NumfError(Exception):
    """
    Base class for all expected operational errors in numf.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, logs, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Decode errors (raised by the parser, carry format + offending text)
# ---------------------------------------------------------------------------

class DecodeError(NumfError):
    """Base for failures while turning text/bytes back into a number."""

    def __init__(
        self,
        message: str,
        *,
        format: Optional[str] = None,
        text: str = "",
        hint: str | None = None,
        details: dict | None = None,
    ):
        details = dict(details or {})
        details.setdefault("format", format)
        details.setdefault("text", text)
        super().__init__(message, hint=hint, details=details)
        self.format = format
        self.text = text


class UnrecognizedFormatError(DecodeError):
    """
    No prefix matched and the raw fallback could not produce a value.

    Examples:
      - empty input
    """
    code = "unrecognized_format"


class RadixParseError(DecodeError):
    """
    Characters are invalid for the detected base.

    Examples:
      - "0xZZ", "0b102", "0o8"
      - a prefix with nothing after it
      - Base64/Base32 body that does not decode
    """
    code = "radix_parse_error"


class NumberOverflowError(DecodeError):
    """Decoded magnitude exceeds the target unsigned width."""
    code = "overflow"


class Utf8DecodeError(DecodeError):
    """A strict text view was requested for bytes that are not valid UTF-8."""
    code = "utf8_decode_error"


# ---------------------------------------------------------------------------
# Shell-level errors (config file, command line input)
# ---------------------------------------------------------------------------

class ConfigError(NumfError):
    """
    Configuration file is missing, unreadable or has the wrong shape.

    Examples:
      - --config points to a file that does not exist
      - YAML root is not a mapping
      - unknown key or wrong value type
    """
    code = "config_error"


class InputError(NumfError):
    """
    Command line input is unusable.

    Examples:
      - no numbers given at all
      - negative random count
    """
    code = "input_error"
