"""Filtering, grouping and statistics over collections of URL strings."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Dict, Iterable, List

from .categories import category_for
from .detector import detect_platform
from .logging import get_logger
from .media import detect_media_type
from .models import MediaType, Platform, PlatformCategory
from .shortcuts import is_https
from .validators import is_valid


logger = get_logger(__name__)


def _category_of(url: str) -> PlatformCategory:
    return category_for(detect_platform(url))


# Filters


def filter_valid(urls: Iterable[str]) -> List[str]:
    """Keep the URLs that pass validation, in input order."""
    return [url for url in urls if is_valid(url)]


def filter_by_platform(urls: Iterable[str], platform: Platform) -> List[str]:
    """Keep the URLs detected as ``platform``."""
    return [url for url in urls if detect_platform(url) is platform]


def filter_by_category(urls: Iterable[str], category: PlatformCategory) -> List[str]:
    """Keep the URLs whose platform belongs to ``category``."""
    return [url for url in urls if _category_of(url) is category]


def filter_by_media_type(urls: Iterable[str], media_type: MediaType) -> List[str]:
    """Keep the URLs whose extension resolves to ``media_type``."""
    return [url for url in urls if detect_media_type(url) is media_type]


def filter_https(urls: Iterable[str]) -> List[str]:
    return [url for url in urls if is_https(url)]


def filter_alternative(urls: Iterable[str]) -> List[str]:
    return filter_by_category(urls, PlatformCategory.ALTERNATIVE)


def filter_web3(urls: Iterable[str]) -> List[str]:
    return filter_by_category(urls, PlatformCategory.WEB3)


def filter_gaming(urls: Iterable[str]) -> List[str]:
    return filter_by_category(urls, PlatformCategory.GAMING)


def filter_dating(urls: Iterable[str]) -> List[str]:
    return filter_by_category(urls, PlatformCategory.DATING)


# Grouping


def group_by_platform(urls: Iterable[str]) -> Dict[Platform, List[str]]:
    """Group URLs by detected platform. Unmatched URLs go under ``Platform.UNKNOWN``."""
    groups: Dict[Platform, List[str]] = defaultdict(list)
    for url in urls:
        groups[detect_platform(url)].append(url)
    return dict(groups)


def group_by_category(urls: Iterable[str]) -> Dict[PlatformCategory, List[str]]:
    """Group URLs by platform category."""
    groups: Dict[PlatformCategory, List[str]] = defaultdict(list)
    for url in urls:
        groups[_category_of(url)].append(url)
    return dict(groups)


def group_by_media_type(urls: Iterable[str]) -> Dict[MediaType, List[str]]:
    """Group URLs by the media type of their extension."""
    groups: Dict[MediaType, List[str]] = defaultdict(list)
    for url in urls:
        groups[detect_media_type(url)].append(url)
    return dict(groups)


# Statistics


def get_batch_stats(urls: Iterable[str]) -> Dict[str, Any]:
    """Summarize a collection of URLs.

    Platform, category and media type counters only cover valid URLs and
    leave out ``UNKNOWN``; ``unknown_platform_urls`` counts the valid URLs
    that matched no platform.
    """
    urls = list(urls)
    valid = filter_valid(urls)

    platforms = Counter(detect_platform(url) for url in valid)
    unknown_platform = platforms.pop(Platform.UNKNOWN, 0)
    categories = Counter(category_for(platform) for platform in platforms.elements())
    media_types = Counter(detect_media_type(url) for url in valid)
    media_types.pop(MediaType.UNKNOWN, None)

    stats = {
        "total_urls": len(urls),
        "valid_urls": len(valid),
        "invalid_urls": len(urls) - len(valid),
        "https_urls": sum(1 for url in valid if is_https(url)),
        "unknown_platform_urls": unknown_platform,
        "platforms": {platform.value: count for platform, count in platforms.most_common()},
        "categories": {category.value: count for category, count in categories.most_common()},
        "media_types": {media_type.value: count for media_type, count in media_types.most_common()},
    }
    logger.info(
        "Batch statistics computed",
        total=stats["total_urls"],
        valid=stats["valid_urls"],
        platforms=len(platforms),
    )
    return stats


__all__ = [
    "filter_valid",
    "filter_by_platform",
    "filter_by_category",
    "filter_by_media_type",
    "filter_https",
    "filter_alternative",
    "filter_web3",
    "filter_gaming",
    "filter_dating",
    "group_by_platform",
    "group_by_category",
    "group_by_media_type",
    "get_batch_stats",
]
