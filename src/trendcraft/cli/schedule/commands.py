"""Schedule CLI commands."""

from __future__ import annotations

from typing import Optional

import typer

from ...scheduling.recurrence import (
    RecurrenceRule,
    RecurrenceType,
    ScheduleEntry,
    next_run as project_next_run,
)
from ...utils.timestamps import now_utc, parse_timestamp
from ..core.console import console, print_error


def next_run(
    anchor: str = typer.Argument(..., help="First scheduled time (ISO 8601)"),
    period: RecurrenceType = typer.Argument(..., help="daily, weekly or monthly"),
    now: Optional[str] = typer.Option(None, "--now", help="Reference time (default: current UTC time)"),
    end: Optional[str] = typer.Option(None, "--end", help="Last allowed occurrence (ISO 8601)"),
) -> None:
    """Show the next occurrence of a recurring post."""
    try:
        anchor_dt = parse_timestamp(anchor)
        end_dt = parse_timestamp(end) if end else None
        if now:
            now_dt = parse_timestamp(now)
        else:
            current = now_utc()
            # Match the anchor's tz-awareness
            now_dt = current if anchor_dt.tzinfo is not None else current.replace(tzinfo=None)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    entry = ScheduleEntry(
        scheduled_time=anchor_dt,
        recurring=RecurrenceRule(type=period, end_date=end_dt),
    )

    try:
        occurrence = project_next_run(entry, now_dt)
    except TypeError:
        print_error("Anchor, --now and --end must all include a timezone or all omit it")
        raise typer.Exit(1)

    if occurrence is None:
        console.print("[yellow]No further occurrences (schedule has ended).[/yellow]")
        return

    console.print(f"Next {period.value} run: [cyan]{occurrence.isoformat()}[/cyan]")
