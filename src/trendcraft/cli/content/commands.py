"""Content CLI commands - thin wrappers orchestrating display and the engine."""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from pydantic import ValidationError

from ...content.generator import ContentGenerator
from ...content.models import GenerationRequest
from ...content.scoring import ScoreEngine
from ...hashtag.strategy import HashtagStrategy
from ...platforms.catalog import PlatformCatalog
from ..core.console import console, print_error, print_warning
from .display import (
    show_generated_content,
    show_hashtags,
    show_platform_profile,
    show_score,
)


def generate(
    topic: str = typer.Argument(..., help="Topic to write about"),
    platform: str = typer.Option("twitter", "--platform", "-p", help="Target platform"),
    tone: str = typer.Option("professional", "--tone", "-t", help="professional, casual, humorous, inspirational"),
    audience: Optional[str] = typer.Option(None, "--audience", "-a", help="Target audience"),
    no_hashtags: bool = typer.Option(False, "--no-hashtags", help="Do not include hashtags"),
    offline: bool = typer.Option(False, "--offline", help="Skip the AI provider and use templates"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Generate platform-optimized content for a topic."""
    try:
        request = GenerationRequest(
            topic=topic,
            platform=platform,
            tone=tone,
            target_audience=audience,
            include_hashtags=not no_hashtags,
        )
    except ValidationError as e:
        print_error(f"Invalid request: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    if not as_json and not PlatformCatalog.is_supported(platform):
        print_warning(f"Unknown platform '{platform}', using Twitter limits")

    generator = ContentGenerator.from_config(offline=offline)
    result = asyncio.run(generator.generate(request))

    if as_json:
        typer.echo(json.dumps(result.to_json_dict(), ensure_ascii=False, indent=2))
        return

    show_generated_content(console, result)


def score(
    content: str = typer.Argument(..., help="Post text to score"),
    platform: str = typer.Option("twitter", "--platform", "-p", help="Target platform"),
) -> None:
    """Score post text for viral potential."""
    engine = ScoreEngine()
    show_score(console, engine.score(content, platform), engine.breakdown(content, platform))


def hashtags(
    topic: str = typer.Argument(..., help="Topic to tag"),
    platform: str = typer.Option("twitter", "--platform", "-p", help="Target platform"),
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Content category"),
) -> None:
    """Suggest hashtags for a topic."""
    suggested = HashtagStrategy().suggest(topic, platform, category)
    show_hashtags(console, suggested, PlatformCatalog.get_profile(platform).optimal_hashtags)


def platform(
    name: str = typer.Argument(..., help="Platform name"),
) -> None:
    """Show limits and advice for a platform."""
    show_platform_profile(console, PlatformCatalog.get_profile(name), name)
