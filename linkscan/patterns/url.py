"""
URL detection patterns for the Link Scanner.

This module recognizes scheme URLs, www hosts, bare domains on known TLDs,
mailto links and email addresses. Where the source text attached an explicit
link target to a run, the detected URL resolves to that target instead of the
visible text.
"""

import re
from typing import List, Optional, Sequence

from ..models import LinkTarget
from .base import PatternMatch, compile_pattern


# TLDs accepted for bare domains (no scheme, no www)
COMMON_TLDS = frozenset({
    'com', 'org', 'net', 'edu', 'gov', 'mil', 'int',
    'co', 'io', 'ai', 'app', 'dev', 'tech', 'info',
    'biz', 'name', 'pro', 'mobi', 'tel', 'travel',
    'uk', 'us', 'ca', 'au', 'de', 'fr', 'jp', 'cn',
    'ru', 'br', 'in', 'it', 'es', 'nl', 'se', 'no',
    'me', 'tv', 'cc', 'ws', 'be', 'at', 'ch', 'dk',
    'ly', 'gg', 'to', 'xyz', 'site', 'online', 'blog',
})

SCHEMES = ('https', 'http', 'ftp')

# Stripped from the end of a candidate; sentence punctuation, not URL
TRAILING_PUNCTUATION = '.,;:!?\'"'
CLOSING_BRACKETS = {')': '(', ']': '['}

# Anything up to whitespace; trailing punctuation is trimmed afterwards
_URL_CHARS = r'[^\s<>"]'
# Unicode letters and digits, so internationalized hosts match whole
_LABEL = r'[^\W_](?:[\w\-]*[^\W_])?'
_HOST = rf'{_LABEL}(?:\.{_LABEL})*'
_PORT_AND_PATH = rf'(?::\d{{1,5}})?(?:[/?#]{_URL_CHARS}*)?'

LINK = 'link'


class URLDetector:
    """Detects URL-like spans and resolves explicit link targets."""

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self):
        """Compile the combined URL pattern. Alternatives are tried in order."""
        schemes = '|'.join(SCHEMES)
        # Longest first so a TLD never shadows a longer one sharing its prefix
        tlds = '|'.join(sorted(COMMON_TLDS, key=lambda tld: (-len(tld), tld)))

        self.url_pattern = compile_pattern(
            # Full URLs with protocol: https://example.com/path
            rf'(?P<scheme>\b(?:{schemes})://{_URL_CHARS}+)'
            # mailto:user@example.com
            rf'|(?P<mailto>\bmailto:[\w.+\-]+@{_HOST}\.[a-z]{{2,}}\b)'
            # Bare email addresses are links too
            rf'|(?P<email>(?<![\w.+\-])[\w.+\-]+@{_HOST}\.[a-z]{{2,}}\b)'
            # www.example.com:8080/path
            rf'|(?P<www>\bwww\.{_LABEL}(?:\.{_LABEL})+{_PORT_AND_PATH})'
            # example.com/path, not part of a handle, hashtag or longer host
            rf'|(?P<domain>(?<![\w@#.\-])(?:{_LABEL}\.)+(?:{tlds})\b{_PORT_AND_PATH})',
            re.IGNORECASE,
        )

    def _trim_trailing(self, candidate: str) -> str:
        """Drop trailing punctuation and unbalanced closing brackets."""
        while candidate:
            last = candidate[-1]
            if last in TRAILING_PUNCTUATION:
                candidate = candidate[:-1]
                continue
            opener = CLOSING_BRACKETS.get(last)
            if opener and candidate.count(last) > candidate.count(opener):
                candidate = candidate[:-1]
                continue
            break
        return candidate

    def _classify(self, group: str, candidate: str) -> Optional[str]:
        """Classify a candidate; only LINK results are reported."""
        if group == 'scheme':
            # A scheme with nothing after it is not a link
            _, _, rest = candidate.partition('://')
            if not re.search(r'[^\W_]', rest):
                return None
        return LINK

    def _resolve_target(self, offset: int,
                        link_targets: Sequence[LinkTarget]) -> Optional[str]:
        """Return the explicit target of the first run covering offset."""
        for run in link_targets:
            if run.covers(offset):
                return run.target
        return None

    def detect(self, text: str,
               link_targets: Sequence[LinkTarget] = (),
               prefer_link_target: bool = True) -> List[PatternMatch]:
        """Detect URLs in text, left to right."""
        matches = []
        for match in self.url_pattern.finditer(text):
            candidate = self._trim_trailing(match.group(0))
            if not candidate or self._classify(match.lastgroup, candidate) != LINK:
                continue

            value = candidate
            if prefer_link_target:
                value = self._resolve_target(match.start(), link_targets) or candidate

            matches.append(PatternMatch(
                offset=match.start(),
                length=len(candidate),
                type='url',
                value=value,
            ))
        return matches


def detect(text: str,
           link_targets: Sequence[LinkTarget] = (),
           prefer_link_target: bool = True) -> List[PatternMatch]:
    """
    Run URL detection against the text.

    Args:
        text: Input text to scan for URLs
        link_targets: Explicit link targets attached to runs of the text
        prefer_link_target: Report a covering run's target instead of the
            visible text

    Returns:
        List of PatternMatch objects in left-to-right order
    """
    return URLDetector().detect(text, link_targets, prefer_link_target)
