"""Tap dispatch: resolve a character position to a link and notify handlers."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..models import LinkKind, LinkMatch

logger = logging.getLogger(__name__)

LinkHandler = Callable[[LinkMatch], None]


def link_at(matches: Sequence[LinkMatch], position: int) -> Optional[LinkMatch]:
    """Return the first match in list order whose range contains position.

    List order decides overlaps, so a handle or hashtag inside a URL wins
    over the URL.
    """
    for match in matches:
        if match.range.contains(position):
            return match
    return None


class LinkDispatcher:
    """Handler table keyed by link kind, plus handlers for any kind."""

    def __init__(self):
        self._handlers: dict[LinkKind, list[LinkHandler]] = {
            kind: [] for kind in LinkKind
        }
        self._any_handlers: list[LinkHandler] = []

    def subscribe(self, kind: LinkKind, handler: LinkHandler) -> None:
        self._handlers[kind].append(handler)
        logger.debug(
            f"Subscribed to {kind.value}, total handlers: {len(self._handlers[kind])}"
        )

    def unsubscribe(self, kind: LinkKind, handler: LinkHandler) -> None:
        if handler in self._handlers[kind]:
            self._handlers[kind].remove(handler)
            logger.debug(f"Unsubscribed from {kind.value}")

    def subscribe_all(self, handler: LinkHandler) -> None:
        self._any_handlers.append(handler)

    def dispatch(self, match: LinkMatch) -> int:
        """Notify kind handlers, then any-kind handlers. Returns how many ran."""
        handlers = [*self._handlers[match.kind], *self._any_handlers]
        for handler in handlers:
            handler(match)
        if not handlers:
            logger.debug(f"No handler for {match.kind.value} link {match.text!r}")
        return len(handlers)

    def dispatch_at(
        self, matches: Sequence[LinkMatch], position: int
    ) -> Optional[LinkMatch]:
        """Dispatch the link at position, if any, and return it."""
        match = link_at(matches, position)
        if match is not None:
            self.dispatch(match)
        return match
