"""Pydantic models for the Link Scanner Service."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import settings


class LinkKind(str, Enum):
    USER_HANDLE = "user_handle"
    HASHTAG = "hashtag"
    URL = "url"


# Merge order of detector output
KIND_ORDER: tuple[LinkKind, ...] = (LinkKind.USER_HANDLE, LinkKind.HASHTAG, LinkKind.URL)


class TextRange(BaseModel):
    """Half-open span of character offsets into the scanned text."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    length: int = Field(ge=0)

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end


class LinkMatch(BaseModel):
    """One detected link, tagged by kind."""
    model_config = ConfigDict(frozen=True)

    kind: LinkKind
    range: TextRange
    text: str


class LinkTarget(BaseModel):
    """Explicit destination attached to a run of the text (rich text links)."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    length: int = Field(ge=0)
    target: str

    def covers(self, position: int) -> bool:
        return self.start <= position < self.start + self.length


class ScanConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    kinds: frozenset[LinkKind] = frozenset(KIND_ORDER)
    ignored_keywords: frozenset[str] = frozenset()
    prefer_link_target: bool = True

    @field_validator("ignored_keywords", mode="before")
    @classmethod
    def _lowercase_keywords(cls, value):
        if value is None:
            return frozenset()
        return frozenset(str(keyword).lower() for keyword in value)

    def is_ignored(self, text: str) -> bool:
        return text.lower() in self.ignored_keywords

    @classmethod
    def from_settings(cls) -> ScanConfiguration:
        return cls(
            kinds=frozenset(LinkKind(kind) for kind in settings.DEFAULT_KINDS),
            ignored_keywords=settings.IGNORED_KEYWORDS,
            prefer_link_target=settings.PREFER_LINK_TARGET,
        )


class ScanRequest(BaseModel):
    text: str = Field(max_length=settings.MAX_TEXT_LENGTH)
    link_targets: list[LinkTarget] = Field(default_factory=list)
    kinds: Optional[list[LinkKind]] = None  # Which kinds to detect (default: settings)
    ignored_keywords: Optional[list[str]] = None
    prefer_link_target: Optional[bool] = None

    def to_configuration(self) -> ScanConfiguration:
        """Merge request overrides onto the configured defaults."""
        defaults = ScanConfiguration.from_settings()
        return ScanConfiguration(
            kinds=frozenset(self.kinds) if self.kinds is not None else defaults.kinds,
            ignored_keywords=(
                self.ignored_keywords
                if self.ignored_keywords is not None
                else defaults.ignored_keywords
            ),
            prefer_link_target=(
                self.prefer_link_target
                if self.prefer_link_target is not None
                else defaults.prefer_link_target
            ),
        )


class ScanResponse(BaseModel):
    scan_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    matches: list[LinkMatch] = Field(default_factory=list)
    processing_ms: int = 0
    error: Optional[str] = None


class BatchScanRequest(BaseModel):
    requests: list[ScanRequest] = Field(max_length=50)


class BatchScanResponse(BaseModel):
    results: list[ScanResponse]


class LinkAtRequest(ScanRequest):
    position: int = Field(ge=0)


class LinkAtResponse(BaseModel):
    match: Optional[LinkMatch] = None


class HealthResponse(BaseModel):
    status: str  # healthy, degraded
    service: str
    version: str
    detectors: list[LinkKind] = Field(default_factory=list)
    uptime_seconds: Optional[float] = None
