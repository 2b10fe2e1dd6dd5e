"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_DIR_ENV = "TRENDCRAFT_LOG_DIR"

# Create Typer app
app = typer.Typer(
    name="trendcraft",
    help="AI-assisted social content generator with platform optimization",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .content.commands import generate, hashtags, platform, score

    app.command(name="generate")(generate)
    app.command(name="score")(score)
    app.command(name="hashtags")(hashtags)
    app.command(name="platform")(platform)

    from .schedule.commands import next_run

    app.command(name="next-run")(next_run)


def get_log_dir() -> Path:
    """Get the log directory (env override, else project logs/)."""
    override = os.getenv(LOG_DIR_ENV)
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent.parent / "logs"


def setup_logging() -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for AI calls and generation events
    """
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore", "urllib3", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

    # Full AI request/response records
    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(log_dir / "ai_calls.log", encoding="utf-8")
    ai_file_handler.setFormatter(formatter)
    ai_calls_logger.addHandler(ai_file_handler)

    # Pipeline events, including every fallback
    generator_logger = logging.getLogger("content_generator")
    generator_logger.setLevel(logging.INFO)
    generator_logger.propagate = False
    generator_logger.handlers = []
    generator_file_handler = logging.FileHandler(log_dir / "content_generator.log", encoding="utf-8")
    generator_file_handler.setFormatter(formatter)
    generator_logger.addHandler(generator_file_handler)


@app.callback()
def _configure() -> None:
    """TrendCraft content engine."""
    setup_logging()


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()
