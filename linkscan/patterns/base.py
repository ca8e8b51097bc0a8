"""Shared building blocks for link detection patterns."""

import re
from dataclasses import dataclass


@dataclass
class PatternMatch:
    """Represents a detected pattern match in text."""
    offset: int
    length: int
    type: str
    value: str


class DetectorError(Exception):
    """Raised when a detector's pattern cannot be built."""


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """Compile a regex, reporting failures as DetectorError."""
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise DetectorError(f"Invalid pattern {pattern!r}: {e}") from e
