"""Viral score heuristics.

The score is additive over surface features of the text:

    base                                  50
    within platform character limit      +10
    contains "?"                          +5
    contains 1-3 consecutive "!"          +5
    contains a high-affinity emoji       +10
    contains "#"                          +8
    contains a value word (tip, hack...) +12
    contains an urgency word (new...)     +8

and is clamped to [0, 100]. It is a pure function of (content, platform).
"""

from __future__ import annotations

import re
from typing import Final

from ..platforms.catalog import PlatformCatalog, PlatformId

BASE_SCORE: Final[int] = 50
LENGTH_BONUS: Final[int] = 10
QUESTION_BONUS: Final[int] = 5
EXCLAMATION_BONUS: Final[int] = 5
EMOJI_BONUS: Final[int] = 10
HASHTAG_BONUS: Final[int] = 8
VALUE_WORD_BONUS: Final[int] = 12
URGENCY_WORD_BONUS: Final[int] = 8

MIN_SCORE: Final[int] = 0
MAX_SCORE: Final[int] = 100

HIGH_AFFINITY_EMOJIS: Final[tuple[str, ...]] = (
    "🔥", "🚀", "💡", "✨", "👇", "❤️", "😂", "🎉", "💯", "👀",
)

_EXCLAMATION_RUN = re.compile(r"!{1,3}")
_VALUE_WORDS = re.compile(r"\b(?:tips?|secrets?|hacks?|tricks?)\b", re.IGNORECASE)
_URGENCY_WORDS = re.compile(r"\b(?:new|breaking|exclusive|first)\b", re.IGNORECASE)


def clamp_score(value: int) -> int:
    """Clamp a raw score into [0, 100]."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


class ScoreEngine:
    """Scores content for a platform.

    Example:
        ScoreEngine().score("Is AI the future? Yes!!! #AI", "twitter")  # 78
    """

    def breakdown(self, content: str, platform: "str | PlatformId | None") -> dict[str, int]:
        """Get each bonus that applies, keyed by feature name."""
        profile = PlatformCatalog.get_profile(platform)
        parts = {"base": BASE_SCORE}

        if len(content) <= profile.max_characters:
            parts["length"] = LENGTH_BONUS
        if "?" in content:
            parts["question"] = QUESTION_BONUS
        if _EXCLAMATION_RUN.search(content):
            parts["exclamation"] = EXCLAMATION_BONUS
        if any(emoji in content for emoji in HIGH_AFFINITY_EMOJIS):
            parts["emoji"] = EMOJI_BONUS
        if "#" in content:
            parts["hashtag"] = HASHTAG_BONUS
        if _VALUE_WORDS.search(content):
            parts["value_words"] = VALUE_WORD_BONUS
        if _URGENCY_WORDS.search(content):
            parts["urgency_words"] = URGENCY_WORD_BONUS

        return parts

    def score(self, content: str, platform: "str | PlatformId | None") -> int:
        """Score content in [0, 100]."""
        return clamp_score(sum(self.breakdown(content, platform).values()))


_default_engine = ScoreEngine()


def score_content(content: str, platform: "str | PlatformId | None") -> int:
    """Score content with the shared engine."""
    return _default_engine.score(content, platform)
