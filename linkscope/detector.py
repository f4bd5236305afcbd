"""Platform classification from URL hosts and paths."""

from __future__ import annotations

from typing import Optional

from .logging import get_logger
from .models import Platform
from .parsing import ParsedURL, normalize, parse_url
from .patterns import (
    CUSTOM_SUBDOMAIN_RULES,
    PLATFORM_PATTERNS,
    SKIP_PLATFORMS,
    SPECIAL_SUBDOMAIN_RULES,
)


logger = get_logger(__name__)

WWW_PREFIX = "www."

YOUTUBE_SHORTS_HOSTS = frozenset({"youtube.com", "m.youtube.com"})
INSTAGRAM_REELS_HOSTS = frozenset({"instagram.com", "instagr.am"})


def clean_host(host: str) -> str:
    """Lowercase a host and drop one leading ``www.``."""
    host = host.lower()
    if host.startswith(WWW_PREFIX):
        return host[len(WWW_PREFIX) :]
    return host


class PlatformDetector:
    """Map URLs to known platforms using tiered host rules."""

    @classmethod
    def detect_platform(cls, url: str) -> Platform:
        """Detect the platform a URL string points at, or ``Platform.UNKNOWN``."""
        parsed = parse_url(normalize(url)) if isinstance(url, str) else None
        return cls.detect_parsed(parsed)

    @classmethod
    def detect_parsed(cls, parsed: Optional[ParsedURL]) -> Platform:
        """Detect the platform for an already parsed URL."""
        if parsed is None or not parsed.host:
            return Platform.UNKNOWN

        host = clean_host(parsed.host)
        path = parsed.path.lower()

        for domain, platform in SPECIAL_SUBDOMAIN_RULES:
            if host == domain:
                logger.debug("Platform matched", tier="special", host=host, platform=platform.name)
                return platform

        override = cls._match_path_override(host, path)
        if override is not None:
            logger.debug("Platform matched", tier="path", host=host, platform=override.name)
            return override

        for platform, domains in PLATFORM_PATTERNS.items():
            if platform in SKIP_PLATFORMS:
                continue
            for domain in domains:
                if host == domain or host.endswith(f".{domain}"):
                    logger.debug("Platform matched", tier="domain", host=host, platform=platform.name)
                    return platform

        for platform, pattern in CUSTOM_SUBDOMAIN_RULES:
            if pattern in host:
                logger.debug("Platform matched", tier="custom", host=host, platform=platform.name)
                return platform

        return Platform.UNKNOWN

    @staticmethod
    def _match_path_override(host: str, path: str) -> Optional[Platform]:
        if host in YOUTUBE_SHORTS_HOSTS and "/shorts/" in path:
            return Platform.YOUTUBE_SHORTS
        if host in INSTAGRAM_REELS_HOSTS and "/reel/" in path:
            return Platform.INSTAGRAM_REELS
        return None


def detect_platform(url: str) -> Platform:
    """Module-level shortcut for :meth:`PlatformDetector.detect_platform`."""
    return PlatformDetector.detect_platform(url)


__all__ = ["PlatformDetector", "detect_platform", "clean_host"]
