"""Configuration for the Link Scanner Service."""

import os


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    LINKSCAN_PORT: int = int(os.getenv("LINKSCAN_PORT", "8003"))
    LOG_LEVEL: str = os.getenv("LINKSCAN_LOG_LEVEL", "info")
    VERSION: str = os.getenv("LINKSCAN_VERSION", "1.0.0")

    MAX_TEXT_LENGTH: int = int(os.getenv("LINKSCAN_MAX_TEXT_LENGTH", "10000"))

    # Defaults applied when a request leaves these unset
    IGNORED_KEYWORDS: list[str] = _csv(os.getenv("LINKSCAN_IGNORED_KEYWORDS", ""))
    DEFAULT_KINDS: list[str] = _csv(
        os.getenv("LINKSCAN_DEFAULT_KINDS", "user_handle,hashtag,url")
    )
    PREFER_LINK_TARGET: bool = (
        os.getenv("LINKSCAN_PREFER_LINK_TARGET", "true").lower() in ("1", "true", "yes")
    )


settings = Settings()
