"""Hashtag detection: `#tag` tokens."""

from typing import List

from .base import PatternMatch
from .sigil import SigilDetector


class HashtagDetector(SigilDetector):
    SIGIL = "#"
    TYPE = "hashtag"


def detect(text: str) -> List[PatternMatch]:
    """Run hashtag detection against the text."""
    return HashtagDetector().detect(text)
