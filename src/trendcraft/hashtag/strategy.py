"""Hashtag derivation and extraction.

HashtagStrategy builds a bounded, deduplicated tag list from a topic,
platform and optional category. It is deterministic: the same arguments
always produce the same list.

Example:
    strategy = HashtagStrategy()
    strategy.suggest("Remote Work", "instagram", "business")
    # ["#RemoteWork", "#instagood", "#photooftheday", ..., "#business", ...]
"""

from __future__ import annotations

import re
from typing import Optional

from ..platforms.catalog import PlatformCatalog, PlatformId
from .constants import CATEGORY_HASHTAG_POOLS, PLATFORM_HASHTAG_POOLS

# Same pattern the AI path uses to pull tags out of generated text
HASHTAG_PATTERN = re.compile(r"#\w+")

_WHITESPACE = re.compile(r"\s+")


def topic_hashtag(topic: str) -> str:
    """Turn a topic into a single hashtag by removing whitespace.

    Example:
        topic_hashtag("Remote Work")  # "#RemoteWork"
    """
    return "#" + _WHITESPACE.sub("", topic)


def extract_hashtags(text: str) -> list[str]:
    """Extract hashtags verbatim, in order of appearance.

    Duplicates are kept; the AI path reports exactly what the text contains.
    """
    if not text:
        return []
    return HASHTAG_PATTERN.findall(text)


def dedupe(tags: list[str]) -> list[str]:
    """Remove duplicates keeping first-seen order."""
    return list(dict.fromkeys(tags))


class HashtagStrategy:
    """Derives platform-appropriate hashtags for a topic."""

    def __init__(
        self,
        platform_pools: Optional[dict[PlatformId, tuple[str, ...]]] = None,
        category_pools: Optional[dict[str, tuple[str, ...]]] = None,
    ):
        self.platform_pools = platform_pools if platform_pools is not None else PLATFORM_HASHTAG_POOLS
        self.category_pools = category_pools if category_pools is not None else CATEGORY_HASHTAG_POOLS

    def category_pool(self, category: Optional[str]) -> tuple[str, ...]:
        """Get the tag pool for a category (empty for unknown/missing)."""
        if not category:
            return ()
        return self.category_pools.get(category.strip().lower(), ())

    def suggest(
        self,
        topic: str,
        platform: "str | PlatformId | None",
        category: Optional[str] = None,
    ) -> list[str]:
        """Suggest hashtags for a topic.

        Args:
            topic: Topic text; becomes the first tag.
            platform: Target platform (unknown names use the default profile).
            category: Optional content category.

        Returns:
            At most ``profile.optimal_hashtags`` unique tags, topic tag first.
        """
        profile = PlatformCatalog.get_profile(platform)
        candidates = [
            topic_hashtag(topic),
            *self.platform_pools.get(profile.platform, ()),
            *self.category_pool(category),
        ]
        return dedupe(candidates)[: profile.optimal_hashtags]
