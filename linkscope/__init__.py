"""linkscope: URL validation, platform classification and ID extraction."""

from __future__ import annotations

from .analyzer import URLAnalyzer, analyze
from .batching import (
    filter_alternative,
    filter_by_category,
    filter_by_media_type,
    filter_by_platform,
    filter_dating,
    filter_gaming,
    filter_https,
    filter_valid,
    filter_web3,
    get_batch_stats,
    group_by_category,
    group_by_media_type,
    group_by_platform,
)
from .categories import category_for
from .config import Settings, get_settings
from .detector import PlatformDetector, detect_platform
from .extraction import IDExtractor, extract_ids
from .logging import configure_logging, get_logger
from .media import MediaTypeDetector, describe_extension, detect_media_type, mime_type_for
from .models import MediaType, Platform, PlatformCategory, URLAnalysis
from .parsing import ParsedURL, normalize, parse_url
from .validators import URLValidator, is_valid

__version__ = "1.0.0"

__all__ = [
    "URLAnalyzer",
    "analyze",
    "filter_alternative",
    "filter_by_category",
    "filter_by_media_type",
    "filter_by_platform",
    "filter_dating",
    "filter_gaming",
    "filter_https",
    "filter_valid",
    "filter_web3",
    "get_batch_stats",
    "group_by_category",
    "group_by_media_type",
    "group_by_platform",
    "category_for",
    "Settings",
    "get_settings",
    "PlatformDetector",
    "detect_platform",
    "IDExtractor",
    "extract_ids",
    "configure_logging",
    "get_logger",
    "MediaTypeDetector",
    "describe_extension",
    "detect_media_type",
    "mime_type_for",
    "MediaType",
    "Platform",
    "PlatformCategory",
    "URLAnalysis",
    "ParsedURL",
    "normalize",
    "parse_url",
    "URLValidator",
    "is_valid",
]
