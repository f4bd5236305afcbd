"""Unit tests for URL collection helpers."""

import pytest

from linkscope.batching import (
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
from linkscope.models import MediaType, Platform, PlatformCategory


class TestFilters:
    """Tests for the filter helpers."""

    def test_filter_valid_preserves_order(self, mixed_urls):
        """Test that invalid URLs are removed and order is kept."""
        original = list(mixed_urls)
        valid = filter_valid(mixed_urls)

        assert "not a url" not in valid
        assert valid == [url for url in original if url != "not a url"]
        assert mixed_urls == original

    def test_filter_by_platform(self, mixed_urls):
        """Test filtering on a single platform."""
        assert filter_by_platform(mixed_urls, Platform.GITHUB) == ["https://github.com/apple/swift/pull/12345"]
        assert filter_by_platform(mixed_urls, Platform.SPOTIFY) == []

    def test_filter_by_category(self, mixed_urls):
        """Test filtering on a category."""
        assert filter_by_category(mixed_urls, PlatformCategory.VIDEO) == [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        ]

    def test_filter_by_unknown_category(self, mixed_urls):
        """Test that UNKNOWN selects URLs without a platform."""
        assert filter_by_category(mixed_urls, PlatformCategory.UNKNOWN) == [
            "https://example.com/photo.jpg",
            "not a url",
            "http://unknownsite.xyz/page",
        ]

    def test_filter_by_media_type(self, mixed_urls):
        """Test filtering on a media type."""
        assert filter_by_media_type(mixed_urls, MediaType.IMAGE) == ["https://example.com/photo.jpg"]

    def test_filter_https(self):
        """Test that scheme-less URLs count as https."""
        urls = ["https://a.com", "http://b.com", "c.com", "ftp://d.com", "not a url"]
        assert filter_https(urls) == ["https://a.com", "c.com"]

    @pytest.mark.parametrize(
        "helper,url",
        [
            (filter_alternative, "https://rumble.com/v1"),
            (filter_web3, "https://opensea.io/collection/x"),
            (filter_gaming, "https://store.steampowered.com/app/1"),
            (filter_dating, "https://tinder.com"),
        ],
    )
    def test_category_shortcuts(self, helper, url):
        """Test the named category filters."""
        assert helper([url, "https://github.com/apple/swift"]) == [url]

    def test_accepts_generators(self):
        """Test that any iterable is accepted."""
        urls = (url for url in ["https://youtu.be/1", "nope"])
        assert filter_valid(urls) == ["https://youtu.be/1"]


class TestGrouping:
    """Tests for the grouping helpers."""

    def test_group_by_platform(self):
        """Test grouping with an unknown bucket."""
        urls = ["https://youtube.com/watch?v=1", "https://youtu.be/2", "https://unknownsite.xyz"]
        groups = group_by_platform(urls)

        assert len(groups[Platform.YOUTUBE]) == 2
        assert groups[Platform.UNKNOWN] == ["https://unknownsite.xyz"]
        assert set(groups) == {Platform.YOUTUBE, Platform.UNKNOWN}

    def test_group_by_platform_keeps_order(self):
        """Test that group members keep input order."""
        urls = ["https://youtu.be/2", "https://youtube.com/watch?v=1"]
        assert group_by_platform(urls)[Platform.YOUTUBE] == urls

    def test_group_by_category(self, mixed_urls):
        """Test grouping by category."""
        groups = group_by_category(mixed_urls)

        assert groups[PlatformCategory.VIDEO] == ["https://www.youtube.com/watch?v=dQw4w9WgXcQ"]
        assert groups[PlatformCategory.DEVELOPER] == ["https://github.com/apple/swift/pull/12345"]
        assert groups[PlatformCategory.SOCIAL] == ["https://twitter.com/someone/status/1234567890"]
        assert len(groups[PlatformCategory.UNKNOWN]) == 3

    def test_group_by_media_type(self, mixed_urls):
        """Test grouping by media type."""
        groups = group_by_media_type(mixed_urls)

        assert groups[MediaType.IMAGE] == ["https://example.com/photo.jpg"]
        assert len(groups[MediaType.UNKNOWN]) == 5

    def test_empty(self):
        """Test that empty input yields no groups."""
        assert group_by_platform([]) == {}
        assert group_by_category([]) == {}
        assert group_by_media_type([]) == {}

    def test_total_preserved(self, mixed_urls):
        """Test that every input URL lands in exactly one group."""
        groups = group_by_platform(mixed_urls)
        assert sum(len(members) for members in groups.values()) == len(mixed_urls)


class TestBatchStats:
    """Tests for get_batch_stats()."""

    def test_mixed_collection(self, mixed_urls):
        """Test counters over a mixed collection."""
        stats = get_batch_stats(mixed_urls)

        assert stats["total_urls"] == 6
        assert stats["valid_urls"] == 5
        assert stats["invalid_urls"] == 1
        assert stats["https_urls"] == 4
        assert stats["unknown_platform_urls"] == 2
        assert stats["platforms"] == {"YouTube": 1, "GitHub": 1, "Twitter/X": 1}
        assert stats["categories"] == {"Video": 1, "Developer": 1, "Social Media": 1}
        assert stats["media_types"] == {"Image": 1}

    def test_counts_sorted_descending(self):
        """Test that counters are ordered by frequency."""
        urls = ["https://github.com/a/b", "https://youtu.be/1", "https://youtu.be/2"]
        stats = get_batch_stats(urls)
        assert list(stats["platforms"]) == ["YouTube", "GitHub"]

    def test_empty(self):
        """Test statistics for an empty collection."""
        stats = get_batch_stats([])

        assert stats["total_urls"] == 0
        assert stats["valid_urls"] == 0
        assert stats["platforms"] == {}
        assert stats["categories"] == {}
        assert stats["media_types"] == {}

    def test_generator_input(self):
        """Test that a generator is consumed only once."""
        stats = get_batch_stats(url for url in ["https://youtu.be/1", "bad"])
        assert stats["total_urls"] == 2
        assert stats["valid_urls"] == 1
