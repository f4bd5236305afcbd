"""Platform-specific content identifier extraction.

Each extractor is a pure function over URL components. A missing key means
the identifier was not found; extractors never raise on odd input.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from .models import Platform


SPOTIFY_CONTENT_TYPES = frozenset({"track", "album", "playlist", "episode", "show", "artist"})

MEDIUM_ARTICLE_ID_MIN_LENGTH = 11

TIKTOK_VIDEO_MARKER = re.compile(r"/video/", re.IGNORECASE)


def split_segments(path: str) -> List[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split("/") if segment]


def segment_after(segments: List[str], *anchors: str) -> Optional[str]:
    """Return the segment following the first segment equal to any anchor."""
    for index, segment in enumerate(segments):
        if segment in anchors:
            if index + 1 < len(segments):
                return segments[index + 1]
            return None
    return None


def query_param(query: Optional[str], name: str) -> Optional[str]:
    """Return the raw value of the first ``name=value`` pair with a non-empty value."""
    if not query:
        return None
    for param in query.split("&"):
        key, sep, value = param.partition("=")
        if sep and key == name and value:
            return value
    return None


def _strip_leading_slash(path: str) -> Optional[str]:
    remainder = path[1:] if path.startswith("/") else path
    return remainder or None


# Video


def _extract_youtube(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    if host == "youtu.be":
        video_id = _strip_leading_slash(path)
    else:
        video_id = query_param(query, "v")
        if video_id is None and "/shorts/" in path:
            video_id = segment_after(split_segments(path), "shorts")
    return {"youtube_video_id": video_id} if video_id else {}


def _extract_vimeo(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    # Covers both /<id> and player.vimeo.com/video/<id>.
    segments = split_segments(path)
    if not segments:
        return {}
    video_id = segments[-1]
    if video_id.isdigit():
        return {"vimeo_video_id": video_id}
    return {}


def _extract_twitch(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    if host == "clips.twitch.tv":
        clip_id = _strip_leading_slash(path)
    elif "/clip/" in path:
        clip_id = segment_after(split_segments(path), "clip")
    else:
        clip_id = None
    return {"twitch_clip_id": clip_id} if clip_id else {}


# Short-form video


def _extract_tiktok(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    match = TIKTOK_VIDEO_MARKER.search(path)
    if match is None:
        return {}
    video_id = path[match.end() :]
    for stop in ("/", "?", "#"):
        video_id = video_id.split(stop, 1)[0]
    return {"tiktok_video_id": video_id} if video_id else {}


def _extract_instagram(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    post_id = segment_after(split_segments(path), "p", "reel")
    return {"instagram_post_id": post_id} if post_id else {}


# Social


def _extract_twitter(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    tweet_id = segment_after(split_segments(path), "status")
    return {"tweet_id": tweet_id} if tweet_id else {}


def _extract_facebook(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    ids: Dict[str, str] = {}
    if "/posts/" in path:
        post_id = segment_after(split_segments(path), "posts")
        if post_id:
            ids["facebook_post_id"] = post_id
    video_id = query_param(query, "v")
    if video_id:
        ids["facebook_video_id"] = video_id
    return ids


def _extract_reddit(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    post_id = segment_after(split_segments(path), "comments")
    return {"reddit_post_id": post_id} if post_id else {}


def _extract_linkedin(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    if "/posts/" not in path:
        return {}
    post = segment_after(split_segments(path), "posts")
    if not post:
        return {}
    pieces = [piece for piece in post.split("-") if piece]
    return {"linkedin_activity_id": pieces[-1]} if pieces else {}


# Audio


def _extract_spotify(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    segments = split_segments(path)
    if len(segments) < 2:
        return {}
    content_type, content_id = segments[-2], segments[-1]
    if content_type not in SPOTIFY_CONTENT_TYPES:
        return {}
    return {f"spotify_{content_type}_id": content_id}


def _extract_soundcloud(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    segments = split_segments(path)
    if len(segments) < 2:
        return {}
    return {"soundcloud_artist": segments[0], "soundcloud_track": segments[1]}


# Developer


def _extract_github(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    segments = split_segments(path)
    if len(segments) < 2:
        return {}

    ids = {"github_owner": segments[0], "github_repo": segments[1]}
    if len(segments) >= 4:
        if segments[2] == "pull":
            ids["github_pr_number"] = segments[3]
        elif segments[2] == "issues":
            ids["github_issue_number"] = segments[3]
    return ids


# Publishing


def _extract_medium(host: str, path: str, query: Optional[str]) -> Dict[str, str]:
    if "@" not in path:
        return {}

    ids: Dict[str, str] = {}
    segments = split_segments(path)

    user = next((segment for segment in segments if segment.startswith("@")), None)
    if user is not None:
        ids["medium_user"] = user[1:]

    if segments and "-" in segments[-1]:
        article_id = segments[-1].rsplit("-", 1)[1]
        if len(article_id) >= MEDIUM_ARTICLE_ID_MIN_LENGTH:
            ids["medium_article_id"] = article_id
    return ids


Extractor = Callable[[str, str, Optional[str]], Dict[str, str]]


class IDExtractor:
    """Dispatch URL components to the extractor registered for a platform."""

    EXTRACTORS: Dict[Platform, Extractor] = {
        Platform.YOUTUBE: _extract_youtube,
        Platform.YOUTUBE_MUSIC: _extract_youtube,
        Platform.YOUTUBE_SHORTS: _extract_youtube,
        Platform.VIMEO: _extract_vimeo,
        Platform.TWITCH: _extract_twitch,
        Platform.TIKTOK: _extract_tiktok,
        Platform.INSTAGRAM: _extract_instagram,
        Platform.INSTAGRAM_REELS: _extract_instagram,
        Platform.TWITTER: _extract_twitter,
        Platform.FACEBOOK: _extract_facebook,
        Platform.REDDIT: _extract_reddit,
        Platform.LINKEDIN: _extract_linkedin,
        Platform.SPOTIFY: _extract_spotify,
        Platform.SOUNDCLOUD: _extract_soundcloud,
        Platform.GITHUB: _extract_github,
        Platform.MEDIUM: _extract_medium,
    }

    @classmethod
    def supports(cls, platform: Platform) -> bool:
        """Check whether identifiers can be extracted for a platform."""
        return platform in cls.EXTRACTORS

    @classmethod
    def extract_ids(
        cls,
        host: Optional[str],
        path: Optional[str],
        query: Optional[str],
        platform: Platform,
    ) -> Dict[str, str]:
        """Extract identifiers for a platform from URL components."""
        extractor = cls.EXTRACTORS.get(platform)
        if extractor is None:
            return {}
        return extractor((host or "").lower(), path or "", query)


def extract_ids(
    host: Optional[str], path: Optional[str], query: Optional[str], platform: Platform
) -> Dict[str, str]:
    """Module-level shortcut for :meth:`IDExtractor.extract_ids`."""
    return IDExtractor.extract_ids(host, path, query, platform)


__all__ = [
    "IDExtractor",
    "extract_ids",
    "split_segments",
    "segment_after",
    "query_param",
    "SPOTIFY_CONTENT_TYPES",
]
