"""Unit tests for the platform category mapping."""

import pytest

from linkscope.categories import CATEGORY_MEMBERS, PLATFORM_CATEGORIES, category_for, platforms_in
from linkscope.models import Platform, PlatformCategory


class TestCategoryFor:
    """Tests for category_for()."""

    @pytest.mark.parametrize("platform", [p for p in Platform if p is not Platform.UNKNOWN])
    def test_every_platform_has_a_category(self, platform):
        """Test that no known platform maps to UNKNOWN."""
        assert category_for(platform) is not PlatformCategory.UNKNOWN

    def test_unknown_maps_to_unknown(self):
        """Test the UNKNOWN sentinel."""
        assert category_for(Platform.UNKNOWN) is PlatformCategory.UNKNOWN

    def test_each_platform_listed_once(self):
        """Test that platforms belong to exactly one category."""
        for platform in Platform:
            if platform is Platform.UNKNOWN:
                continue
            owners = [c for c, members in CATEGORY_MEMBERS.items() if platform in members]
            assert len(owners) == 1, platform

    def test_inverted_map_is_complete(self):
        """Test that the inverted map covers every known platform."""
        assert len(PLATFORM_CATEGORIES) == len(Platform) - 1

    def test_unknown_is_not_a_member_key(self):
        """Test that UNKNOWN is never used as a category bucket."""
        assert PlatformCategory.UNKNOWN not in CATEGORY_MEMBERS

    @pytest.mark.parametrize(
        "platform,category",
        [
            (Platform.YOUTUBE, PlatformCategory.VIDEO),
            (Platform.YOUTUBE_MUSIC, PlatformCategory.AUDIO),
            (Platform.TIKTOK, PlatformCategory.VIDEO),
            (Platform.INSTAGRAM, PlatformCategory.SOCIAL),
            (Platform.INSTAGRAM_REELS, PlatformCategory.VIDEO),
            (Platform.MASTODON, PlatformCategory.ALTERNATIVE),
            (Platform.RUMBLE, PlatformCategory.ALTERNATIVE),
            (Platform.ZOOM, PlatformCategory.STREAMING),
            (Platform.WECHAT, PlatformCategory.REGIONAL),
            (Platform.VIBER, PlatformCategory.MESSAGING),
            (Platform.WIKIPEDIA, PlatformCategory.PRODUCTIVITY),
            (Platform.BRILLIANT, PlatformCategory.LEARNING),
            (Platform.CRYPTO_DOT_COM, PlatformCategory.FINANCIAL),
            (Platform.FARCASTER, PlatformCategory.WEB3),
            (Platform.KOFI, PlatformCategory.SUBSCRIPTION),
        ],
    )
    def test_known_assignments(self, platform, category):
        """Test representative category assignments."""
        assert category_for(platform) is category


class TestPlatformsIn:
    """Tests for platforms_in()."""

    def test_members(self):
        """Test membership lookup for a category."""
        assert Platform.OPENSEA in platforms_in(PlatformCategory.WEB3)
        assert Platform.YOUTUBE not in platforms_in(PlatformCategory.WEB3)

    def test_unknown_category_is_empty(self):
        """Test that UNKNOWN has no members."""
        assert platforms_in(PlatformCategory.UNKNOWN) == frozenset()
