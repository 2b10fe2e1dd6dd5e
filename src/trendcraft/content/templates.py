"""Template content used when the AI provider is unavailable.

Each supported tone has three templates with ``{topic}`` and ``{audience}``
placeholders. ``inspirational`` has no template set of its own and uses the
professional set, as does any unknown tone.
"""

from __future__ import annotations

import logging
from typing import Final, Optional

from ..hashtag.constants import (
    FALLBACK_HASHTAG_POOL,
    MAX_FALLBACK_HASHTAGS,
    MIN_FALLBACK_HASHTAGS,
)
from ..hashtag.strategy import topic_hashtag
from ..utils.selection import PickOne, random_pick
from .models import TemplateResult, ToneId

_logger = logging.getLogger("content_generator")

DEFAULT_AUDIENCE: Final[str] = "everyone"

TONE_TEMPLATES: Final[dict[ToneId, tuple[str, ...]]] = {
    ToneId.PROFESSIONAL: (
        "Here's what {audience} should know about {topic}: the teams seeing real results "
        "are the ones treating it as a strategy, not a trend. What's your approach?",
        "{topic} is reshaping how we work. Three questions worth asking this week: "
        "Where does it fit? What does it replace? How do we measure it?",
        "Key insight on {topic}: early adopters are already building an advantage. "
        "If you're part of {audience}, now is the time to get ahead.",
    ),
    ToneId.CASUAL: (
        "Okay, can we talk about {topic} for a sec? 👀 I've been diving in and honestly "
        "it's way more interesting than I expected. Anyone else into this?",
        "Not gonna lie, {topic} has been living rent-free in my head lately ✨ "
        "What's your take, {audience}?",
        "Quick thought on {topic}: it's simpler than it looks once you start. "
        "Drop your questions below 👇",
    ),
    ToneId.HUMOROUS: (
        "Me: I'll just spend five minutes reading about {topic}. "
        "Also me, three hours later: a certified {topic} expert 😂",
        "{topic} is like WiFi. Nobody thinks about it until it stops working, "
        "and then it's ALL anyone talks about 😅",
        "Nobody:\nAbsolutely nobody:\nMe at 2 AM: let me tell {audience} everything about {topic} 🤓",
    ),
}

# Tones without their own set borrow another tone's templates
TONE_TEMPLATE_FALLBACKS: Final[dict[ToneId, ToneId]] = {
    ToneId.INSPIRATIONAL: ToneId.PROFESSIONAL,
}


def templates_for(tone: "str | ToneId | None") -> tuple[str, ...]:
    """Get the template set for a tone, applying documented fallbacks."""
    resolved = ToneId.resolve(tone)
    resolved = TONE_TEMPLATE_FALLBACKS.get(resolved, resolved)
    return TONE_TEMPLATES.get(resolved, TONE_TEMPLATES[ToneId.default()])


def render_template(template: str, topic: str, audience: Optional[str] = None) -> str:
    """Substitute topic and audience into a template."""
    return template.replace("{topic}", topic).replace("{audience}", audience or DEFAULT_AUDIENCE)


class FallbackTemplateGenerator:
    """Produces tone-specific template content with optional hashtags.

    All choices (template, hashtag count, which hashtags) go through the
    injected ``PickOne``.

    Example:
        generator = FallbackTemplateGenerator(pick=first_pick)
        result = generator.generate("coffee", "humorous", include_hashtags=True)
        result.hashtags  # ["#coffee", "#trending"]
    """

    def __init__(
        self,
        pick: Optional[PickOne] = None,
        min_hashtags: int = MIN_FALLBACK_HASHTAGS,
        max_hashtags: int = MAX_FALLBACK_HASHTAGS,
    ):
        if min_hashtags < 1 or max_hashtags < min_hashtags:
            raise ValueError(f"Invalid hashtag bounds: {min_hashtags}-{max_hashtags}")
        self._pick = pick or random_pick()
        self.min_hashtags = min_hashtags
        self.max_hashtags = min(max_hashtags, len(FALLBACK_HASHTAG_POOL) + 1)

    def hashtag_pool(self, topic: str) -> list[str]:
        """Get the 7-entry pool for a topic, topic tag first."""
        return [topic_hashtag(topic), *FALLBACK_HASHTAG_POOL]

    def pick_hashtags(self, topic: str, limit: Optional[int] = None) -> list[str]:
        """Draw between min and max hashtags, topic tag always first.

        ``limit`` caps the count, e.g. at the platform's hashtag limit.
        """
        pool = self.hashtag_pool(topic)
        upper = self.max_hashtags if limit is None else max(min(self.max_hashtags, limit), 1)
        lower = min(self.min_hashtags, upper)
        count = self._pick(range(lower, upper + 1))

        chosen = [pool[0]]
        remaining = [tag for tag in pool[1:] if tag != pool[0]]
        while len(chosen) < count and remaining:
            tag = self._pick(remaining)
            remaining.remove(tag)
            chosen.append(tag)
        return chosen

    def generate(
        self,
        topic: str,
        tone: "str | ToneId | None",
        include_hashtags: bool = True,
        audience: Optional[str] = None,
        max_hashtags: Optional[int] = None,
    ) -> TemplateResult:
        """Generate template content for a topic.

        Args:
            topic: Topic text substituted into the template.
            tone: Requested tone (unknown and inspirational use professional).
            include_hashtags: Append hashtags to the text.
            audience: Optional audience substituted into the template.
            max_hashtags: Optional cap on the number of hashtags.

        Returns:
            TemplateResult with the text, its hashtags, and the raw template.
        """
        template = self._pick(templates_for(tone))
        text = render_template(template, topic, audience)

        hashtags: list[str] = []
        if include_hashtags:
            hashtags = self.pick_hashtags(topic, max_hashtags)
            text = f"{text}\n\n{' '.join(hashtags)}"

        _logger.debug(f"TEMPLATE | tone:{ToneId.resolve(tone).value} | hashtags:{len(hashtags)}")
        return TemplateResult(content=text, hashtags=hashtags, template=template)
