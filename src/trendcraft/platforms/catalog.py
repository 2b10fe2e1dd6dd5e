"""Per-platform constraints and advisory text.

The catalog is a read-only table built once at import time. Every lookup goes
through ``PlatformId.resolve`` so an unknown platform name is handled in one
place: it resolves to the default profile (Twitter's limits) instead of
raising.

Usage:
    from trendcraft.platforms import PlatformCatalog

    profile = PlatformCatalog.get_profile("instagram")
    profile.max_characters      # 2200
    profile.optimal_hashtags    # 11

    PlatformCatalog.get_profile("bluesky").platform  # PlatformId.TWITTER
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class PlatformId(str, Enum):
    """Supported target platforms."""

    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TIKTOK = "tiktok"

    @classmethod
    def default(cls) -> "PlatformId":
        """Platform whose limits are used for unknown names."""
        return cls.TWITTER

    @classmethod
    def resolve(cls, value: "str | PlatformId | None") -> "PlatformId":
        """Map any platform name to a known platform.

        Matching is case-insensitive and ignores surrounding whitespace.
        Unknown or missing names resolve to ``PlatformId.default()``.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.default()
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.default()

    @classmethod
    def is_known(cls, value: "str | PlatformId | None") -> bool:
        """Check if a name maps to a supported platform without defaulting."""
        if isinstance(value, cls):
            return True
        if value is None:
            return False
        return str(value).strip().lower() in cls._value2member_map_


@dataclass(frozen=True)
class PlatformProfile:
    """Immutable constraints and advice for one platform."""

    platform: PlatformId
    display_name: str
    max_characters: int
    max_hashtags: int
    optimal_hashtags: int
    supports_video: bool
    supports_images: bool
    supports_links: bool
    hashtag_strategy_text: str
    best_post_time: str
    cta_pool: tuple[str, ...]
    visual_suggestions: tuple[str, ...]
    content_tips: tuple[str, ...]

    def to_dict(self) -> dict:
        """Serialize for JSON responses and UI panels."""
        return {
            "platform": self.platform.value,
            "displayName": self.display_name,
            "limits": {
                "maxCharacters": self.max_characters,
                "maxHashtags": self.max_hashtags,
                "optimalHashtags": self.optimal_hashtags,
                "supportsVideo": self.supports_video,
                "supportsImages": self.supports_images,
                "supportsLinks": self.supports_links,
            },
            "hashtagStrategy": self.hashtag_strategy_text,
            "bestPostTime": self.best_post_time,
            "ctaSuggestions": list(self.cta_pool),
            "visualSuggestions": list(self.visual_suggestions),
            "contentTips": list(self.content_tips),
        }


# =============================================================================
# PROFILE TABLE
# =============================================================================

_PROFILES: dict[PlatformId, PlatformProfile] = {
    PlatformId.TWITTER: PlatformProfile(
        platform=PlatformId.TWITTER,
        display_name="Twitter",
        max_characters=280,
        max_hashtags=5,
        optimal_hashtags=2,
        supports_video=True,
        supports_images=True,
        supports_links=True,
        hashtag_strategy_text="Use 1-2 highly relevant hashtags. Avoid hashtag stuffing.",
        best_post_time="9:00 AM - 10:00 AM",
        cta_pool=(
            "Retweet if you agree",
            "What's your take? Reply below",
            "Share your thoughts 👇",
            "Tag someone who needs to see this",
            "Follow for more insights like this",
        ),
        visual_suggestions=(
            "Add eye-catching images or GIFs",
            "Use thread format for longer content",
            "Include charts or infographics for data",
            "Consider video content for higher engagement",
        ),
        content_tips=(
            "Keep it concise and punchy",
            "Start with a hook in the first line",
            "Use emojis sparingly but effectively",
            "Ask questions to drive engagement",
        ),
    ),
    PlatformId.LINKEDIN: PlatformProfile(
        platform=PlatformId.LINKEDIN,
        display_name="LinkedIn",
        max_characters=3000,
        max_hashtags=10,
        optimal_hashtags=3,
        supports_video=True,
        supports_images=True,
        supports_links=True,
        hashtag_strategy_text="Use 3-5 industry-specific hashtags. Mix popular and niche tags.",
        best_post_time="8:00 AM - 10:00 AM (Tue-Thu)",
        cta_pool=(
            "What's your experience with this?",
            "Share your thoughts in the comments",
            "Connect with me for more insights",
            "Save this post for later reference",
            "Follow for professional updates",
        ),
        visual_suggestions=(
            "Add professional headshots or team photos",
            "Include industry-relevant infographics",
            "Share behind-the-scenes content",
            "Use carousel posts for step-by-step content",
        ),
        content_tips=(
            "Lead with value and insights",
            "Share personal experiences and lessons",
            "Use professional tone with personality",
            "Include industry statistics or trends",
        ),
    ),
    PlatformId.INSTAGRAM: PlatformProfile(
        platform=PlatformId.INSTAGRAM,
        display_name="Instagram",
        max_characters=2200,
        max_hashtags=30,
        optimal_hashtags=11,
        supports_video=True,
        supports_images=True,
        supports_links=False,
        hashtag_strategy_text="Use 8-15 hashtags. Mix trending, niche, and branded hashtags.",
        best_post_time="11:00 AM - 1:00 PM",
        cta_pool=(
            "Link in bio for more info",
            "Double tap if you agree ❤️",
            "Save this post for later",
            "Share to your Stories",
            "Tag a friend who needs this",
        ),
        visual_suggestions=(
            "High-quality, visually appealing images are essential",
            "Use consistent color palette and filters",
            "Create carousel posts for storytelling",
            "Consider Reels for trending content",
            "Use Stories for behind-the-scenes content",
        ),
        content_tips=(
            "Visual content is king - invest in quality images",
            "Tell stories through captions",
            "Use emojis to break up text",
            "Engage with your community in comments",
        ),
    ),
    PlatformId.FACEBOOK: PlatformProfile(
        platform=PlatformId.FACEBOOK,
        display_name="Facebook",
        max_characters=63206,
        max_hashtags=10,
        optimal_hashtags=2,
        supports_video=True,
        supports_images=True,
        supports_links=True,
        hashtag_strategy_text="Use 1-3 hashtags. Focus on community and local hashtags.",
        best_post_time="1:00 PM - 3:00 PM",
        cta_pool=(
            "Share your thoughts below",
            "Like and share if you agree",
            "Visit our website for more",
            "Join our community",
            "Follow our page for updates",
        ),
        visual_suggestions=(
            "Use high-quality images or videos",
            "Create engaging cover photos",
            "Share user-generated content",
            "Use Facebook Live for real-time engagement",
        ),
        content_tips=(
            "Longer-form content performs well",
            "Focus on community building",
            "Share valuable, shareable content",
            "Use Facebook Groups for niche audiences",
        ),
    ),
    PlatformId.TIKTOK: PlatformProfile(
        platform=PlatformId.TIKTOK,
        display_name="TikTok",
        max_characters=2200,
        max_hashtags=20,
        optimal_hashtags=5,
        supports_video=True,
        supports_images=False,
        supports_links=False,
        hashtag_strategy_text="Use 3-7 hashtags. Mix trending challenges with niche content tags.",
        best_post_time="7:00 PM - 9:00 PM",
        cta_pool=(
            "Follow for more tips like this",
            "Duet this if you agree",
            "Try this and tag us",
            "Share your results below",
            "Which one are you? Comment below",
        ),
        visual_suggestions=(
            "Vertical video format is essential (9:16 ratio)",
            "Hook viewers in the first 3 seconds",
            "Use trending sounds and music",
            "Add text overlays for key points",
            "Keep videos under 60 seconds for best performance",
        ),
        content_tips=(
            "Video content only - make it engaging",
            "Jump on trending sounds and challenges",
            "Keep it authentic and entertaining",
            "Use captions for accessibility",
        ),
    ),
}

PLATFORM_PROFILES: Mapping[PlatformId, PlatformProfile] = MappingProxyType(_PROFILES)
"""Read-only view of every platform profile."""

NEAR_LIMIT_RATIO = 0.9
"""Share of the character limit above which a length warning is given."""


# =============================================================================
# CATALOG
# =============================================================================

class PlatformCatalog:
    """Lookup facade over ``PLATFORM_PROFILES``.

    All methods are total: they never raise for an unknown platform.
    """

    @classmethod
    def get_profile(cls, platform: "str | PlatformId | None") -> PlatformProfile:
        """Get the profile for a platform, defaulting for unknown names."""
        return PLATFORM_PROFILES[PlatformId.resolve(platform)]

    @classmethod
    def available_platforms(cls) -> list[str]:
        """Get list of all supported platform names."""
        return [p.value for p in PLATFORM_PROFILES]

    @classmethod
    def is_supported(cls, platform: "str | PlatformId | None") -> bool:
        """Check if a platform has its own profile."""
        return PlatformId.is_known(platform)


def get_profile(platform: "str | PlatformId | None") -> PlatformProfile:
    """Get the profile for a platform. See ``PlatformCatalog.get_profile``."""
    return PlatformCatalog.get_profile(platform)


def get_visual_suggestions(platform: "str | PlatformId | None") -> list[str]:
    """Get visual content suggestions for a platform."""
    return list(get_profile(platform).visual_suggestions)


def get_content_tips(platform: "str | PlatformId | None") -> list[str]:
    """Get writing tips for a platform."""
    return list(get_profile(platform).content_tips)


@dataclass(frozen=True)
class LengthCheck:
    """Result of checking content length against a platform limit."""

    is_valid: bool
    current_length: int
    max_length: int
    suggestion: Optional[str] = None

    @property
    def excess(self) -> int:
        """Characters over the limit (0 when valid)."""
        return max(self.current_length - self.max_length, 0)


def validate_content_length(content: str, platform: "str | PlatformId | None") -> LengthCheck:
    """Check content length against the platform's character limit.

    Args:
        content: Text to check.
        platform: Target platform name.

    Returns:
        LengthCheck with an optional human-readable suggestion when the
        content is over the limit or within 10% of it.
    """
    profile = get_profile(platform)
    current_length = len(content)
    max_length = profile.max_characters
    is_valid = current_length <= max_length

    suggestion = None
    if not is_valid:
        excess = current_length - max_length
        suggestion = (
            f"Content is {excess} characters too long. "
            f"Consider shortening or splitting into multiple posts."
        )
    elif current_length > max_length * NEAR_LIMIT_RATIO:
        suggestion = "Content is near the character limit. Consider keeping some room for engagement."

    return LengthCheck(
        is_valid=is_valid,
        current_length=current_length,
        max_length=max_length,
        suggestion=suggestion,
    )
