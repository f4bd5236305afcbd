"""Heuristic URL validity checks."""

from __future__ import annotations

from typing import Optional, Tuple

from .parsing import DEFAULT_SCHEME_PREFIX, SCHEME_SEPARATOR, parse_url


class URLValidator:
    """Decide whether a string is a URL, with or without a scheme."""

    WEB_SCHEMES = frozenset({"http", "https"})

    @classmethod
    def is_valid(cls, url: str) -> bool:
        """Check if the string looks like a usable URL."""
        is_valid, _ = cls.validate_url(url)
        return is_valid

    @classmethod
    def validate_url(cls, url: str) -> Tuple[bool, Optional[str]]:
        """Validate a URL and return the result with an error message."""
        if not isinstance(url, str):
            return False, "URL must be a string"

        trimmed = url.strip()
        if not trimmed:
            return False, "URL cannot be empty"

        has_separator = SCHEME_SEPARATOR in trimmed

        if "@" in trimmed and not has_separator:
            return False, "Email addresses are not URLs"

        if trimmed.startswith(SCHEME_SEPARATOR):
            return False, "Missing scheme"

        if has_separator and not trimmed.startswith("file://"):
            parts = trimmed.split(SCHEME_SEPARATOR)
            if len(parts) == 2:
                after_scheme = parts[1]
                if after_scheme.startswith(":"):
                    return False, "Missing host before port"
                if not after_scheme or after_scheme.startswith("/"):
                    return False, "Missing host"

        if "." not in trimmed and not has_separator:
            if trimmed != "localhost" and not trimmed.startswith("localhost:"):
                return False, "Not a URL"

        parsed = parse_url(trimmed)
        if parsed is not None and parsed.scheme:
            if parsed.scheme == "file":
                return True, None
            if parsed.scheme in cls.WEB_SCHEMES:
                if parsed.host:
                    return True, None
                return False, "Missing host"
            if has_separator:
                after_scheme = trimmed.split(SCHEME_SEPARATOR)[-1]
                if after_scheme and not after_scheme.startswith(":"):
                    return True, None
                return False, "Missing host"
            return True, None

        if not has_separator:
            retried = parse_url(f"{DEFAULT_SCHEME_PREFIX}{trimmed}")
            if retried is not None and retried.host is not None:
                return True, None

        return False, "Invalid URL format"


def is_valid(url: str) -> bool:
    """Module-level shortcut for :meth:`URLValidator.is_valid`."""
    return URLValidator.is_valid(url)


__all__ = ["URLValidator", "is_valid"]
