"""URL normalization and component parsing on top of ``urllib.parse``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import unquote, urlsplit


SCHEME_SEPARATOR = "://"
DEFAULT_SCHEME_PREFIX = "https://"


@dataclass(frozen=True)
class ParsedURL:
    """Components of a parsed URL.

    ``path`` is percent-decoded and has no trailing slash unless it is the
    root. ``query`` and ``fragment`` are kept encoded.
    """

    scheme: str
    host: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]
    port: Optional[int]
    path_segments: List[str] = field(default_factory=list)

    @property
    def path_extension(self) -> str:
        """Lowercased extension of the last path segment, or ``""``."""
        if not self.path_segments:
            return ""
        last = self.path_segments[-1]
        dot = last.rfind(".")
        if dot <= 0 or dot == len(last) - 1:
            return ""
        return last[dot + 1 :].lower()


def normalize(url: str) -> str:
    """Prefix scheme-less URL-like strings with ``https://``.

    Strings that already carry a scheme separator are returned trimmed but
    otherwise untouched, scheme case included.
    """
    if not url:
        return url

    trimmed = url.strip()

    if SCHEME_SEPARATOR in trimmed:
        return trimmed

    if " " not in trimmed and ("." in trimmed or "localhost" in trimmed):
        return f"{DEFAULT_SCHEME_PREFIX}{trimmed}"

    return trimmed


def _has_forbidden_characters(value: str) -> bool:
    return any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value)


def parse_url(url: str) -> Optional[ParsedURL]:
    """Split a URL into components, or return ``None`` if it cannot be a URI."""
    if not isinstance(url, str) or not url or _has_forbidden_characters(url):
        return None

    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None

    path = unquote(parts.path)
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/") or "/"

    return ParsedURL(
        scheme=parts.scheme,
        host=parts.hostname or None,
        path=path,
        query=parts.query or None,
        fragment=parts.fragment or None,
        port=port,
        path_segments=[segment for segment in path.split("/") if segment],
    )


__all__ = ["ParsedURL", "normalize", "parse_url", "SCHEME_SEPARATOR"]
