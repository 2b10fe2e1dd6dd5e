"""Display functions for content commands - pure functions for Rich output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...content.models import GeneratedContent
from ...platforms.catalog import PlatformProfile


def get_score_color(score: int) -> str:
    """Get color based on viral score."""
    if score >= 80:
        return "bright_green"
    elif score >= 60:
        return "green"
    elif score >= 40:
        return "yellow"
    return "red"


def show_generated_content(console: Console, result: GeneratedContent) -> None:
    """Display generated content with score and recommendations."""
    source = "[yellow]template fallback[/yellow]" if result.used_fallback else "[cyan]AI[/cyan]"
    console.print(Panel(result.content, title=f"{result.platform.value} ({source})", border_style="cyan"))

    color = get_score_color(result.viral_score)
    rec = result.recommendations
    engagement = rec.engagement_prediction

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Viral score", f"[{color}]{result.viral_score}[/{color}]")
    table.add_row("Hashtags", " ".join(result.hashtags) or "-")
    table.add_row("Best time", rec.best_post_time)
    table.add_row("Expected reach", f"{rec.expected_reach:,}")
    table.add_row(
        "Engagement",
        f"{engagement.likes} likes / {engagement.retweets} shares / {engagement.comments} comments",
    )

    opt = result.platform_optimization
    if opt is not None:
        table.add_row("Characters", f"{opt.character_count}/{opt.character_limit}")
        table.add_row("Suggested CTA", opt.suggested_cta or "-")
        if opt.length_check and opt.length_check.suggestion:
            table.add_row("Length", f"[yellow]{opt.length_check.suggestion}[/yellow]")

    console.print(table)


def show_score(console: Console, score: int, breakdown: dict[str, int]) -> None:
    """Display a viral score with the bonuses that produced it."""
    color = get_score_color(score)
    console.print(f"Viral score: [{color}]{score}[/{color}]")
    for feature, points in breakdown.items():
        console.print(f"  [dim]{feature}:[/dim] +{points}")


def show_hashtags(console: Console, hashtags: list[str], limit: int) -> None:
    """Display suggested hashtags against the platform's optimal count."""
    console.print(" ".join(hashtags))
    console.print(f"[dim]{len(hashtags)}/{limit} optimal hashtags[/dim]")


def show_platform_profile(console: Console, profile: PlatformProfile, requested: str) -> None:
    """Display one platform profile."""
    if requested.strip().lower() != profile.platform.value:
        console.print(f"[yellow]Unknown platform '{requested}', showing {profile.display_name} defaults[/yellow]")

    table = Table(title=f"{profile.display_name} Limits")
    table.add_column("Limit", style="cyan")
    table.add_column("Value")
    table.add_row("Max characters", str(profile.max_characters))
    table.add_row("Max hashtags", str(profile.max_hashtags))
    table.add_row("Optimal hashtags", str(profile.optimal_hashtags))
    table.add_row("Video", "yes" if profile.supports_video else "no")
    table.add_row("Images", "yes" if profile.supports_images else "no")
    table.add_row("Links", "yes" if profile.supports_links else "no")
    table.add_row("Best time", profile.best_post_time)
    console.print(table)

    console.print(f"\n[bold]Hashtag strategy:[/bold] {profile.hashtag_strategy_text}")
    console.print("\n[bold]Content tips:[/bold]")
    for tip in profile.content_tips:
        console.print(f"  - {tip}")
    console.print("\n[bold]Visual suggestions:[/bold]")
    for suggestion in profile.visual_suggestions:
        console.print(f"  - {suggestion}")
