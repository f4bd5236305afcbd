"""Per-string convenience accessors.

Each helper takes a raw URL string. Platform, category and media type
accessors return ``None`` rather than an ``UNKNOWN`` member.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .analyzer import analyze
from .categories import category_for
from .detector import detect_platform
from .media import detect_media_type
from .models import MediaType, Platform, PlatformCategory
from .parsing import ParsedURL, normalize, parse_url


def _parsed(url: str) -> Optional[ParsedURL]:
    if not isinstance(url, str):
        return None
    return parse_url(normalize(url))


# Classification


def url_platform(url: str) -> Optional[Platform]:
    platform = detect_platform(url)
    return platform if platform is not Platform.UNKNOWN else None


def url_platform_category(url: str) -> Optional[PlatformCategory]:
    platform = url_platform(url)
    return category_for(platform) if platform is not None else None


def url_media_type(url: str) -> Optional[MediaType]:
    media_type = detect_media_type(url)
    return media_type if media_type is not MediaType.UNKNOWN else None


def _in_category(url: str, category: PlatformCategory) -> bool:
    return url_platform_category(url) is category


def is_video_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.VIDEO)


def is_audio_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.AUDIO)


def is_social_media_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.SOCIAL)


def is_messaging_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.MESSAGING)


def is_developer_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.DEVELOPER)


def is_alternative_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.ALTERNATIVE)


def is_web3_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.WEB3)


def is_gaming_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.GAMING)


def is_financial_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.FINANCIAL)


def is_dating_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.DATING)


def is_subscription_platform_url(url: str) -> bool:
    return _in_category(url, PlatformCategory.SUBSCRIPTION)


def has_video_extension(url: str) -> bool:
    return url_media_type(url) is MediaType.VIDEO


def has_audio_extension(url: str) -> bool:
    return url_media_type(url) is MediaType.AUDIO


def has_image_extension(url: str) -> bool:
    return url_media_type(url) is MediaType.IMAGE


def has_document_extension(url: str) -> bool:
    return url_media_type(url) is MediaType.DOCUMENT


# Components


def is_https(url: str) -> bool:
    parsed = _parsed(url)
    return parsed is not None and parsed.scheme == "https"


def is_http(url: str) -> bool:
    parsed = _parsed(url)
    return parsed is not None and parsed.scheme == "http"


def is_file_url(url: str) -> bool:
    parsed = _parsed(url)
    return parsed is not None and parsed.scheme == "file"


def url_domain(url: str) -> Optional[str]:
    parsed = _parsed(url)
    return parsed.host if parsed is not None else None


def url_path(url: str) -> Optional[str]:
    parsed = _parsed(url)
    if parsed is None or not parsed.path:
        return None
    return parsed.path


def url_query(url: str) -> Optional[str]:
    parsed = _parsed(url)
    return parsed.query if parsed is not None else None


def url_extension(url: str) -> Optional[str]:
    parsed = _parsed(url)
    if parsed is None:
        return None
    return parsed.path_extension or None


# Identifiers


def youtube_video_id(url: str) -> Optional[str]:
    return analyze(url).extracted_ids.get("youtube_video_id")


def tweet_id(url: str) -> Optional[str]:
    return analyze(url).extracted_ids.get("tweet_id")


def instagram_post_id(url: str) -> Optional[str]:
    return analyze(url).extracted_ids.get("instagram_post_id")


def tiktok_video_id(url: str) -> Optional[str]:
    return analyze(url).extracted_ids.get("tiktok_video_id")


def spotify_id(url: str) -> Optional[str]:
    """Return the Spotify content ID whatever its content type."""
    for key, value in analyze(url).extracted_ids.items():
        if key.startswith("spotify_"):
            return value
    return None


def reddit_post_id(url: str) -> Optional[str]:
    return analyze(url).extracted_ids.get("reddit_post_id")


def github_repo(url: str) -> Optional[Tuple[str, str]]:
    """Return ``(owner, repo)`` for GitHub URLs."""
    ids = analyze(url).extracted_ids
    owner = ids.get("github_owner")
    repo = ids.get("github_repo")
    if owner is None or repo is None:
        return None
    return owner, repo


__all__ = [
    "url_platform",
    "url_platform_category",
    "url_media_type",
    "is_video_platform_url",
    "is_audio_platform_url",
    "is_social_media_url",
    "is_messaging_platform_url",
    "is_developer_platform_url",
    "is_alternative_platform_url",
    "is_web3_platform_url",
    "is_gaming_platform_url",
    "is_financial_platform_url",
    "is_dating_platform_url",
    "is_subscription_platform_url",
    "has_video_extension",
    "has_audio_extension",
    "has_image_extension",
    "has_document_extension",
    "is_https",
    "is_http",
    "is_file_url",
    "url_domain",
    "url_path",
    "url_query",
    "url_extension",
    "youtube_video_id",
    "tweet_id",
    "instagram_post_id",
    "tiktok_video_id",
    "spotify_id",
    "reddit_post_id",
    "github_repo",
]
