"""Link scanner: runs the enabled detectors and merges their matches."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..models import KIND_ORDER, LinkKind, LinkMatch, LinkTarget, ScanConfiguration, TextRange
from ..patterns.base import PatternMatch
from ..patterns.handle import UserHandleDetector
from ..patterns.hashtag import HashtagDetector
from ..patterns.url import URLDetector

logger = logging.getLogger(__name__)


# Detector factory per link kind
DEFAULT_DETECTORS: dict[LinkKind, Callable] = {
    LinkKind.USER_HANDLE: UserHandleDetector,
    LinkKind.HASHTAG: HashtagDetector,
    LinkKind.URL: URLDetector,
}


class LinkScanner:
    """
    Composes the handle, hashtag and URL detectors behind one scan call.

    Output is the concatenation of each enabled detector's matches in
    KIND_ORDER, each list in left-to-right order. Matches of different kinds
    may overlap (a URL containing `@` or `#`); they are kept as-is and left
    to the consumer, which resolves by list position (see dispatch.link_at).

    A detector that cannot be built or fails mid-scan contributes no matches.
    Link detection is an enhancement, so this never reaches the caller.
    """

    def __init__(self, detectors: Optional[dict[LinkKind, Callable]] = None):
        factories = DEFAULT_DETECTORS if detectors is None else detectors
        self._detectors = {}
        for kind in KIND_ORDER:
            factory = factories.get(kind)
            if factory is None:
                continue
            try:
                self._detectors[kind] = factory()
            except Exception:
                logger.exception(f"{kind.value} detector unavailable, skipping")

    @property
    def available_kinds(self) -> list[LinkKind]:
        """Kinds whose detector was built successfully."""
        return list(self._detectors)

    def scan(
        self,
        text: str,
        configuration: Optional[ScanConfiguration] = None,
        link_targets: Sequence[LinkTarget] = (),
    ) -> list[LinkMatch]:
        """Detect all links in text.

        Args:
            text: The text to scan.
            configuration: Enabled kinds, ignore set and link target policy.
                Defaults to all kinds, nothing ignored.
            link_targets: Explicit link targets attached to runs of the text.
        """
        config = configuration or ScanConfiguration()
        if not text:
            return []

        results: list[LinkMatch] = []
        for kind in KIND_ORDER:
            if kind in config.kinds:
                results.extend(self._run_detector(kind, text, config, link_targets))
        return results

    def _run_detector(
        self,
        kind: LinkKind,
        text: str,
        config: ScanConfiguration,
        link_targets: Sequence[LinkTarget],
    ) -> list[LinkMatch]:
        detector = self._detectors.get(kind)
        if detector is None:
            return []

        try:
            if kind is LinkKind.URL:
                raw = detector.detect(text, link_targets, config.prefer_link_target)
            else:
                raw = detector.detect(text)
        except Exception:
            logger.exception(f"{kind.value} detector failed, no matches reported")
            return []

        matches = []
        for m in raw:
            if not _in_bounds(m, len(text)):
                logger.warning(
                    f"Dropping {kind.value} match outside text: "
                    f"offset={m.offset} length={m.length} text_length={len(text)}"
                )
                continue
            # Ignore filter is the last step before the merge
            if config.is_ignored(m.value):
                continue
            matches.append(LinkMatch(
                kind=kind,
                range=TextRange(start=m.offset, length=m.length),
                text=m.value,
            ))
        return matches


def _in_bounds(match: PatternMatch, text_length: int) -> bool:
    return 0 <= match.offset and 0 <= match.length and match.offset + match.length <= text_length


# Shared default instance; holds compiled patterns only
_default_scanner = LinkScanner()


def get_scanner() -> LinkScanner:
    """Get the global scanner instance."""
    return _default_scanner


def scan(
    text: str,
    configuration: Optional[ScanConfiguration] = None,
    link_targets: Sequence[LinkTarget] = (),
) -> list[LinkMatch]:
    """Scan text with the default scanner."""
    return _default_scanner.scan(text, configuration, link_targets)
