"""
Sigil token detection shared by user handles and hashtags.

A sigil token is the sigil character not preceded by a word character,
followed by zero or more word characters. A bare sigil is a valid match:
it lets the caller highlight a token that is still being typed.
"""

import re
from typing import List

from .base import PatternMatch, compile_pattern


class SigilDetector:
    """Detects tokens introduced by a single sigil character."""

    SIGIL = ""
    TYPE = ""
    # {sigil} is substituted with the escaped sigil character
    PATTERN = r"(?<!\w){sigil}([\w_]+)?"

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self):
        self.token_pattern = compile_pattern(
            self.PATTERN.replace("{sigil}", re.escape(self.SIGIL))
        )

    def detect(self, text: str) -> List[PatternMatch]:
        """Find every token, scanning left to right past each raw match."""
        matches = []
        for match in self.token_pattern.finditer(text):
            matched_text = match.group(0)
            matches.append(PatternMatch(
                offset=match.start(),
                length=len(matched_text),
                type=self.TYPE,
                value=matched_text,
            ))
        return matches
