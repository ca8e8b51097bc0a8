"""User handle detection: `@name` tokens."""

from typing import List

from .base import PatternMatch
from .sigil import SigilDetector


class UserHandleDetector(SigilDetector):
    SIGIL = "@"
    TYPE = "user_handle"


def detect(text: str) -> List[PatternMatch]:
    """
    Run user handle detection against the text.

    Args:
        text: Input text to scan for handles

    Returns:
        List of PatternMatch objects in left-to-right order
    """
    return UserHandleDetector().detect(text)
