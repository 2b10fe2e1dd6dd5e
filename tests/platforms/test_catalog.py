"""Tests for the platform constraint catalog."""

from dataclasses import FrozenInstanceError, fields

import pytest

from trendcraft.platforms import (
    PLATFORM_PROFILES,
    PlatformCatalog,
    PlatformId,
    get_content_tips,
    get_profile,
    get_visual_suggestions,
    validate_content_length,
)


class TestPlatformId:
    """Test central platform name resolution."""

    @pytest.mark.parametrize("name", ["twitter", "linkedin", "instagram", "facebook", "tiktok"])
    def test_resolves_known_names(self, name):
        assert PlatformId.resolve(name).value == name

    def test_resolution_is_case_insensitive(self):
        assert PlatformId.resolve("  LinkedIn ") is PlatformId.LINKEDIN

    @pytest.mark.parametrize("name", ["bluesky", "", None, "mastodon"])
    def test_unknown_names_resolve_to_default(self, name):
        assert PlatformId.resolve(name) is PlatformId.TWITTER

    def test_is_known(self):
        assert PlatformId.is_known("TikTok") is True
        assert PlatformId.is_known("bluesky") is False
        assert PlatformId.is_known(None) is False


class TestPlatformCatalog:
    """Test profile lookups."""

    def test_every_platform_has_a_profile(self):
        assert set(PLATFORM_PROFILES) == set(PlatformId)

    def test_twitter_limits(self):
        profile = PlatformCatalog.get_profile("twitter")
        assert profile.max_characters == 280
        assert profile.max_hashtags == 5
        assert profile.optimal_hashtags == 2

    def test_instagram_limits(self):
        profile = get_profile("instagram")
        assert profile.max_characters == 2200
        assert profile.optimal_hashtags == 11
        assert profile.supports_links is False

    def test_unknown_platform_returns_default_profile(self):
        """Unknown platforms get a usable profile, not an error."""
        unknown = PlatformCatalog.get_profile("bluesky")
        twitter = PlatformCatalog.get_profile("twitter")

        assert unknown == twitter
        assert [f.name for f in fields(unknown)] == [f.name for f in fields(twitter)]

    def test_profiles_are_immutable(self):
        profile = get_profile("twitter")
        with pytest.raises(FrozenInstanceError):
            profile.max_characters = 1000

    def test_profile_table_is_read_only(self):
        with pytest.raises(TypeError):
            PLATFORM_PROFILES[PlatformId.TWITTER] = None

    def test_optimal_never_exceeds_max(self):
        for profile in PLATFORM_PROFILES.values():
            assert profile.optimal_hashtags <= profile.max_hashtags

    def test_every_profile_has_ctas_and_tips(self):
        for profile in PLATFORM_PROFILES.values():
            assert len(profile.cta_pool) > 0
            assert len(profile.content_tips) > 0
            assert profile.best_post_time

    def test_available_platforms(self):
        assert PlatformCatalog.available_platforms() == [
            "twitter", "linkedin", "instagram", "facebook", "tiktok",
        ]

    def test_advisory_lists(self):
        assert get_visual_suggestions("tiktok")[0].startswith("Vertical video")
        assert "Keep it concise and punchy" in get_content_tips("twitter")

    def test_to_dict_uses_camel_case(self):
        data = get_profile("linkedin").to_dict()
        assert data["platform"] == "linkedin"
        assert data["limits"]["maxCharacters"] == 3000
        assert data["limits"]["optimalHashtags"] == 3
        assert isinstance(data["ctaSuggestions"], list)


class TestValidateContentLength:
    """Test character-count validation."""

    def test_short_content_is_valid_without_suggestion(self):
        check = validate_content_length("hello", "twitter")
        assert check.is_valid is True
        assert check.current_length == 5
        assert check.max_length == 280
        assert check.suggestion is None

    def test_over_limit_reports_excess(self):
        check = validate_content_length("x" * 300, "twitter")
        assert check.is_valid is False
        assert check.excess == 20
        assert "20 characters too long" in check.suggestion

    def test_near_limit_warns(self):
        check = validate_content_length("x" * 260, "twitter")
        assert check.is_valid is True
        assert "near the character limit" in check.suggestion

    def test_exactly_at_limit_is_valid(self):
        check = validate_content_length("x" * 280, "twitter")
        assert check.is_valid is True
        assert check.excess == 0

    def test_unknown_platform_uses_default_limit(self):
        check = validate_content_length("x" * 300, "bluesky")
        assert check.max_length == 280
        assert check.is_valid is False
