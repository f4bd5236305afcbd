"""Unit tests for the per-string convenience accessors."""

import pytest

from linkscope import shortcuts
from linkscope.models import MediaType, Platform, PlatformCategory


class TestClassificationShortcuts:
    """Tests for platform, category and media accessors."""

    def test_url_platform(self):
        """Test that unknown platforms come back as None."""
        assert shortcuts.url_platform("https://youtu.be/abc") is Platform.YOUTUBE
        assert shortcuts.url_platform("https://unknownsite.xyz") is None

    def test_url_platform_category(self):
        """Test category lookup through the platform."""
        assert shortcuts.url_platform_category("https://open.spotify.com/track/1") is PlatformCategory.AUDIO
        assert shortcuts.url_platform_category("https://unknownsite.xyz") is None

    def test_url_media_type(self):
        """Test that unknown media types come back as None."""
        assert shortcuts.url_media_type("https://example.com/a.mp3") is MediaType.AUDIO
        assert shortcuts.url_media_type("https://example.com/page") is None

    @pytest.mark.parametrize(
        "predicate,url",
        [
            (shortcuts.is_video_platform_url, "https://vimeo.com/1"),
            (shortcuts.is_audio_platform_url, "https://soundcloud.com/a/b"),
            (shortcuts.is_social_media_url, "https://reddit.com/r/python"),
            (shortcuts.is_messaging_platform_url, "https://discord.com/invite/x"),
            (shortcuts.is_developer_platform_url, "https://github.com/apple/swift"),
            (shortcuts.is_alternative_platform_url, "https://mastodon.social/@a"),
            (shortcuts.is_web3_platform_url, "https://opensea.io"),
            (shortcuts.is_gaming_platform_url, "https://roblox.com/games/1"),
            (shortcuts.is_financial_platform_url, "https://paypal.com"),
            (shortcuts.is_dating_platform_url, "https://bumble.com"),
            (shortcuts.is_subscription_platform_url, "https://patreon.com/someone"),
        ],
    )
    def test_category_predicates(self, predicate, url):
        """Test each category predicate on a matching and an unknown URL."""
        assert predicate(url) is True
        assert predicate("https://unknownsite.xyz") is False

    def test_category_predicates_are_exclusive(self):
        """Test that a video URL is not reported as social."""
        assert shortcuts.is_social_media_url("https://youtube.com/watch?v=1") is False

    @pytest.mark.parametrize(
        "predicate,url",
        [
            (shortcuts.has_video_extension, "https://example.com/a.mkv"),
            (shortcuts.has_audio_extension, "https://example.com/a.flac"),
            (shortcuts.has_image_extension, "https://example.com/a.webp"),
            (shortcuts.has_document_extension, "https://example.com/a.docx"),
        ],
    )
    def test_extension_predicates(self, predicate, url):
        """Test each extension predicate."""
        assert predicate(url) is True
        assert predicate("https://example.com/a.zip") is False


class TestComponentShortcuts:
    """Tests for URL component accessors."""

    def test_scheme_checks(self):
        """Test https, http and file checks."""
        assert shortcuts.is_https("example.com") is True
        assert shortcuts.is_https("http://example.com") is False
        assert shortcuts.is_http("http://example.com") is True
        assert shortcuts.is_file_url("file:///tmp/a.txt") is True
        assert shortcuts.is_https("not a url") is False

    def test_url_domain(self):
        """Test host extraction."""
        assert shortcuts.url_domain("https://www.Example.com/a") == "www.example.com"
        assert shortcuts.url_domain("file:///tmp/a.txt") is None
        assert shortcuts.url_domain(None) is None

    def test_url_path(self):
        """Test path extraction with empty paths as None."""
        assert shortcuts.url_path("https://example.com/a/b/") == "/a/b"
        assert shortcuts.url_path("https://example.com") is None

    def test_url_query(self):
        """Test query extraction."""
        assert shortcuts.url_query("https://example.com/?a=1&b=2") == "a=1&b=2"
        assert shortcuts.url_query("https://example.com") is None

    def test_url_extension(self):
        """Test lowercased extension extraction."""
        assert shortcuts.url_extension("https://example.com/Report.PDF") == "pdf"
        assert shortcuts.url_extension("https://example.com/report") is None


class TestIdentifierShortcuts:
    """Tests for identifier accessors."""

    def test_youtube_video_id(self):
        """Test YouTube ids from watch and short links."""
        assert shortcuts.youtube_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert shortcuts.youtube_video_id("youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert shortcuts.youtube_video_id("https://example.com/watch?v=dQw4w9WgXcQ") is None

    def test_tweet_id(self):
        """Test tweet ids."""
        assert shortcuts.tweet_id("https://twitter.com/someone/status/1234567890") == "1234567890"

    def test_instagram_post_id(self):
        """Test Instagram post ids."""
        assert shortcuts.instagram_post_id("https://www.instagram.com/p/CyTPsXYMzTj/") == "CyTPsXYMzTj"

    def test_tiktok_video_id(self):
        """Test TikTok video ids."""
        url = "https://www.tiktok.com/@user/video/7156932021247864110"
        assert shortcuts.tiktok_video_id(url) == "7156932021247864110"

    def test_spotify_id(self):
        """Test that any Spotify content type yields its id."""
        assert shortcuts.spotify_id("https://open.spotify.com/album/1DFixLWuPkv3KT3TnV35m3") == (
            "1DFixLWuPkv3KT3TnV35m3"
        )
        assert shortcuts.spotify_id("https://open.spotify.com/") is None

    def test_reddit_post_id(self):
        """Test Reddit post ids."""
        assert shortcuts.reddit_post_id("https://www.reddit.com/r/python/comments/abc123/title/") == "abc123"

    def test_github_repo(self):
        """Test GitHub owner and repository pairs."""
        assert shortcuts.github_repo("https://github.com/apple/swift/issues/7") == ("apple", "swift")
        assert shortcuts.github_repo("https://github.com/apple") is None
        assert shortcuts.github_repo("not a url") is None
