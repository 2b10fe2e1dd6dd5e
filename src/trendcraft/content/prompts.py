"""Prompts for AI content generation."""

from __future__ import annotations

from ..platforms.catalog import PlatformProfile
from .models import GenerationRequest, ToneId

SYSTEM_PROMPT = (
    "You are a social media copywriter who writes native, high-engagement posts. "
    "Reply with the post text only: no preamble, no quotes, no explanations."
)

TONE_GUIDANCE = {
    ToneId.PROFESSIONAL: "authoritative and insightful, with a clear takeaway",
    ToneId.CASUAL: "friendly and conversational, like talking to a friend",
    ToneId.HUMOROUS: "witty and playful, with a light joke or relatable moment",
    ToneId.INSPIRATIONAL: "uplifting and motivating, ending on an encouraging note",
}


def build_generation_prompt(request: GenerationRequest, profile: PlatformProfile) -> str:
    """Build the instruction sent to the text provider.

    Embeds topic, platform, tone, audience and the hashtag directive, plus
    the platform's length limit and writing tips.
    """
    tone = ToneId.resolve(request.tone)
    audience = request.target_audience or "a general audience"

    if request.include_hashtags:
        hashtag_directive = (
            f"Include {profile.optimal_hashtags} relevant hashtags at the end. "
            f"{profile.hashtag_strategy_text}"
        )
    else:
        hashtag_directive = "Do not include any hashtags."

    tips = "\n".join(f"- {tip}" for tip in profile.content_tips)

    return (
        f"Write a {profile.display_name} post about \"{request.topic}\".\n"
        f"Tone: {tone.value} ({TONE_GUIDANCE[tone]}).\n"
        f"Target audience: {audience}.\n"
        f"Keep it under {profile.max_characters} characters.\n"
        f"{hashtag_directive}\n"
        f"Platform tips:\n{tips}"
    )
