"""Call-to-action suggestions."""

from __future__ import annotations

from typing import Optional

from ..platforms.catalog import PlatformCatalog, PlatformId
from ..utils.selection import PickOne, random_pick


class CTASuggester:
    """Picks one call-to-action from the platform's CTA pool.

    Selection goes through an injected ``PickOne`` so tests can pin the
    result; the default picks uniformly at random.
    """

    def __init__(self, pick: Optional[PickOne] = None):
        self._pick = pick or random_pick()

    def suggest(self, platform: "str | PlatformId | None", topic: str = "") -> str:
        """Suggest a CTA for a platform.

        The topic is accepted for interface stability; pools are not
        topic-specific. Returns an empty string if the pool is empty.
        """
        pool = PlatformCatalog.get_profile(platform).cta_pool
        if not pool:
            return ""
        return self._pick(pool)
