"""Full single-URL analysis combining every classifier."""

from __future__ import annotations

from .categories import category_for
from .detector import PlatformDetector
from .extraction import IDExtractor
from .logging import get_logger
from .media import MediaTypeDetector, describe_extension, mime_type_for
from .models import MediaType, Platform, PlatformCategory, URLAnalysis
from .parsing import normalize, parse_url
from .validators import URLValidator


logger = get_logger(__name__)


class URLAnalyzer:
    """Build :class:`URLAnalysis` records."""

    @classmethod
    def analyze(cls, url: str) -> URLAnalysis:
        """Validate, parse and classify a URL string.

        Invalid input yields a record with only ``original_url`` populated.
        """
        is_valid, reason = URLValidator.validate_url(url)
        if not is_valid:
            logger.debug("URL rejected", url=url, reason=reason)
            return URLAnalysis(original_url=url)

        parsed = parse_url(normalize(url))
        if parsed is None:
            logger.debug("URL rejected", url=url, reason="Unparseable after normalization")
            return URLAnalysis(original_url=url)

        scheme = parsed.scheme or None

        platform = PlatformDetector.detect_parsed(parsed)
        platform_category = (
            category_for(platform) if platform is not Platform.UNKNOWN else PlatformCategory.UNKNOWN
        )

        extension = parsed.path_extension or None
        media_type = MediaType.UNKNOWN
        mime_type = None
        description = None
        if extension:
            media_type = MediaTypeDetector.media_type_for_extension(extension)
            mime_type = mime_type_for(extension)
            description = describe_extension(extension)

        return URLAnalysis(
            original_url=url,
            is_valid=True,
            scheme=scheme,
            host=parsed.host,
            path=parsed.path or None,
            query=parsed.query,
            fragment=parsed.fragment,
            port=parsed.port,
            is_https=scheme == "https",
            is_http=scheme == "http",
            is_file_url=scheme == "file",
            platform=platform,
            platform_category=platform_category,
            media_type=media_type,
            file_extension=extension,
            mime_type=mime_type,
            file_type_description=description,
            extracted_ids=IDExtractor.extract_ids(parsed.host, parsed.path, parsed.query, platform),
        )


def analyze(url: str) -> URLAnalysis:
    """Module-level shortcut for :meth:`URLAnalyzer.analyze`."""
    return URLAnalyzer.analyze(url)


__all__ = ["URLAnalyzer", "analyze"]
