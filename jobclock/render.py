"""Rich terminal rendering of session timelines and summaries."""

from datetime import datetime

from rich.markup import escape
from rich.table import Table

from jobclock.timefmt import format_elapsed, format_timestamp


def render_timeline(console, events):
    console.print("Timeline:")
    for event in events:
        console.print(f"  {format_timestamp(event.timestamp)} - {escape(event.label)}", highlight=False)


def render_task_summary(console, tasks):
    if not tasks:
        console.print("[dim]No tasks added[/dim]")
        return
    console.print("\nSummary:")
    console.print(escape(". ".join(tasks) + "."), highlight=False)


def render_summary(console, summary):
    """Print what end() returned: timeline, total time, tasks and decimal hours."""
    console.print("[bold]Job session ended[/bold]")
    render_timeline(console, summary.events)
    console.print(f"Total time: {format_elapsed(summary.elapsed_seconds)}", highlight=False)
    render_task_summary(console, summary.tasks)
    console.print(f"[bold]Hours: {summary.hours:.2f}[/bold]", highlight=False)


def render_status(console, status):
    console.print(f"Job session started at {format_timestamp(status.started_at)}", highlight=False)
    render_timeline(console, status.events)
    if not status.tasks:
        console.print("  [dim]No tasks added[/dim]")
    console.print(f"Total time: {format_elapsed(status.elapsed_seconds)}", highlight=False)


def _short_time(ts):
    if not ts:
        return ""
    try:
        return datetime.fromisoformat(ts).strftime("%m-%d %H:%M")
    except (TypeError, ValueError):
        return str(ts)


def logs_table(entries):
    table = Table(title="Command Log")
    table.add_column("Time", style="dim")
    table.add_column("Event", style="bold")
    table.add_column("Detail", max_width=50)
    table.add_column("Directory", style="dim", max_width=40)

    for entry in entries:
        if entry.get("event") == "task":
            detail = entry.get("task", "")
        elif entry.get("event") == "git":
            detail = f"{entry.get('commits', 0)} commit(s)"
        elif entry.get("event") == "end":
            detail = format_elapsed(int(entry.get("total_seconds", 0)))
        else:
            detail = ""
        table.add_row(
            _short_time(entry.get("timestamp", "")),
            entry.get("event", ""),
            escape(str(detail)),
            entry.get("cwd", ""),
        )
    return table
