"""Hashtag pools.

Pool order matters: HashtagStrategy keeps first-seen order and truncates, so
the earliest tags in each pool are the ones that survive on platforms with a
small optimal count.
"""

from typing import Final

from ..platforms.catalog import PlatformId

# Generic tags per platform, most broadly useful first
PLATFORM_HASHTAG_POOLS: Final[dict[PlatformId, tuple[str, ...]]] = {
    PlatformId.TWITTER: ("#trending", "#viral", "#tech", "#innovation", "#socialmedia"),
    PlatformId.LINKEDIN: ("#professional", "#career", "#business", "#leadership", "#industry"),
    PlatformId.INSTAGRAM: (
        "#instagood",
        "#photooftheday",
        "#love",
        "#beautiful",
        "#happy",
        "#follow",
        "#like4like",
    ),
    PlatformId.FACEBOOK: ("#community", "#local", "#family", "#friends", "#share"),
    PlatformId.TIKTOK: ("#fyp", "#foryou", "#viral", "#trending", "#challenge"),
}

# Keyed by lowercase category name; unknown categories contribute nothing
CATEGORY_HASHTAG_POOLS: Final[dict[str, tuple[str, ...]]] = {
    "technology": ("#tech", "#innovation", "#AI", "#digital", "#future"),
    "business": ("#business", "#entrepreneur", "#startup", "#success", "#growth"),
    "health": ("#health", "#wellness", "#fitness", "#lifestyle", "#selfcare"),
    "entertainment": ("#entertainment", "#fun", "#music", "#movies", "#celebrity"),
    "environment": ("#environment", "#sustainability", "#green", "#climate", "#eco"),
}

# Generic tags drawn by the template fallback after the topic tag
FALLBACK_HASHTAG_POOL: Final[tuple[str, ...]] = (
    "#trending",
    "#viral",
    "#contentcreator",
    "#socialmedia",
    "#growth",
    "#community",
)

MIN_FALLBACK_HASHTAGS: Final[int] = 2
MAX_FALLBACK_HASHTAGS: Final[int] = 5
