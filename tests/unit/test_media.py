"""Unit tests for media type detection."""

import pytest

from linkscope.media import (
    AUDIO_EXTENSIONS,
    CONFORMANCE_ORDER,
    EXTENSION_REGISTRY,
    VIDEO_EXTENSIONS,
    MediaTypeDetector,
    describe_extension,
    detect_media_type,
    mime_type_for,
)
from linkscope.models import MediaType


class TestDetectMediaType:
    """Tests for detect_media_type()."""

    def test_manual_video_override(self):
        """Test that mkv is video even without a scheme."""
        assert detect_media_type("example.com/video.mkv") is MediaType.VIDEO

    @pytest.mark.parametrize(
        "url,media_type",
        [
            ("https://example.com/a.ogg", MediaType.AUDIO),
            ("https://example.com/a.opus", MediaType.AUDIO),
            ("https://example.com/a.webm", MediaType.VIDEO),
            ("https://example.com/photo.jpg", MediaType.IMAGE),
            ("https://example.com/PHOTO.JPG", MediaType.IMAGE),
            ("https://example.com/logo.svg", MediaType.IMAGE),
            ("https://example.com/stream.ts", MediaType.VIDEO),
            ("https://example.com/movie.mp4", MediaType.VIDEO),
            ("https://example.com/song.mp3", MediaType.AUDIO),
            ("https://example.com/report.pdf", MediaType.DOCUMENT),
            ("https://example.com/notes.md", MediaType.DOCUMENT),
            ("https://example.com/backup.zip", MediaType.ARCHIVE),
            ("https://example.com/archive.tar.gz", MediaType.ARCHIVE),
            ("https://example.com/app.jar", MediaType.ARCHIVE),
            ("https://example.com/script.py", MediaType.CODE),
            ("https://example.com/data.json", MediaType.DATA),
            ("https://example.com/setup.exe", MediaType.EXECUTABLE),
            ("https://example.com/font.woff2", MediaType.FONT),
            ("https://example.com/part.stl", MediaType.MODEL3D),
            ("https://cdn.example.com/clip.mp4?token=abc#t=1", MediaType.VIDEO),
            ("file:///Users/test/file.txt", MediaType.DOCUMENT),
        ],
    )
    def test_extensions(self, url, media_type):
        """Test representative extensions for every media type."""
        assert detect_media_type(url) is media_type

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "https://example.com/page",
            "https://example.com/file.xyz123",
            "https://example.com/.hidden",
            "",
            "not a url",
        ],
    )
    def test_unknown(self, url):
        """Test inputs without a recognized extension."""
        assert detect_media_type(url) is MediaType.UNKNOWN

    def test_non_string(self):
        """Test that non-string input is UNKNOWN."""
        assert MediaTypeDetector.detect_media_type(None) is MediaType.UNKNOWN


class TestMediaTypeForExtension:
    """Tests for MediaTypeDetector.media_type_for_extension."""

    @pytest.mark.parametrize("extension", sorted(AUDIO_EXTENSIONS))
    def test_audio_overrides(self, extension):
        """Test that every manual audio extension is audio."""
        assert MediaTypeDetector.media_type_for_extension(extension) is MediaType.AUDIO

    @pytest.mark.parametrize("extension", sorted(VIDEO_EXTENSIONS))
    def test_video_overrides(self, extension):
        """Test that every manual video extension is video."""
        assert MediaTypeDetector.media_type_for_extension(extension) is MediaType.VIDEO

    def test_accepts_leading_dot_and_case(self):
        """Test that '.PNG' resolves like 'png'."""
        assert MediaTypeDetector.media_type_for_extension(".PNG") is MediaType.IMAGE

    def test_empty(self):
        """Test that an empty extension is UNKNOWN."""
        assert MediaTypeDetector.media_type_for_extension("") is MediaType.UNKNOWN

    def test_first_conformance_wins(self):
        """Test that multi-kind extensions resolve in conformance order."""
        assert EXTENSION_REGISTRY["svg"].conforms_to == (MediaType.IMAGE, MediaType.DOCUMENT)
        assert MediaTypeDetector.media_type_for_extension("svg") is MediaType.IMAGE
        assert MediaTypeDetector.media_type_for_extension("ts") is MediaType.VIDEO


class TestExtensionRegistry:
    """Tests for the bundled extension registry."""

    def test_entries_are_well_formed(self):
        """Test that every entry has a known kind and a description."""
        for extension, info in EXTENSION_REGISTRY.items():
            assert extension == extension.lower()
            assert info.conforms_to
            assert all(kind in CONFORMANCE_ORDER for kind in info.conforms_to)
            assert info.description

    def test_unknown_not_in_conformance_order(self):
        """Test that UNKNOWN is never a conformance target."""
        assert MediaType.UNKNOWN not in CONFORMANCE_ORDER

    def test_mime_type_for(self):
        """Test MIME lookups from the registry."""
        assert mime_type_for("mp4") == "video/mp4"
        assert mime_type_for(".PDF") == "application/pdf"
        assert mime_type_for("mkv") == "video/x-matroska"

    def test_mime_type_fallback(self):
        """Test that unregistered extensions fall back to the mimetypes table."""
        assert "xpm" not in EXTENSION_REGISTRY
        assert mime_type_for("xpm") is not None
        assert MediaTypeDetector.media_type_for_extension("xpm") is MediaType.UNKNOWN

    def test_mime_type_missing(self):
        """Test extensions nobody knows."""
        assert mime_type_for("") is None
        assert mime_type_for("qqqzzz") is None

    def test_describe_extension(self):
        """Test descriptions for registered and unknown extensions."""
        assert describe_extension("mkv") == "Matroska video"
        assert describe_extension("JPG") == "JPEG image"
        assert describe_extension("nope") is None
