import json
import os
from contextlib import contextmanager

import click
from rich.console import Console
from rich.markup import escape

from jobclock import __version__
from jobclock.config import STRING_KEYS, load_config, save_global_config
from jobclock.errors import JobclockError
from jobclock.log import read_logs, write_log
from jobclock.render import logs_table, render_status, render_summary
from jobclock.session import SessionLog
from jobclock.state import create_state_store
from jobclock.vcs import get_commit_source


@click.group()
@click.version_option(version=__version__, prog_name="jobclock")
def main():
    """Jobclock: track one work session, its tasks and the commits made during it."""


@contextmanager
def _reported(console):
    """Turn a jobclock or config error into a one-line message and exit status 1."""
    try:
        yield
    except (JobclockError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _session_log():
    config = load_config()
    return SessionLog(create_state_store(config), get_commit_source(config))


def _audit(console, entry):
    """Record a command in the audit log. Never fails the command."""
    entry.setdefault("cwd", os.getcwd())
    try:
        write_log(entry)
    except OSError as e:
        console.print(f"[yellow]Warning: could not write command log: {escape(str(e))}[/yellow]")


@main.command()
def start():
    """Start a new job session."""
    console = Console()
    with _reported(console):
        _session_log().start()
    console.print("[green]Job session started[/green]")
    _audit(console, {"event": "start"})


main.add_command(start, name="begin")


@main.command()
@click.argument("name", nargs=-1, required=True)
def task(name):
    """Add a task to the current job session.

    Example: jobclock task review login PR
    """
    console = Console()
    name = " ".join(name)
    with _reported(console):
        _session_log().task(name)
    console.print("Task added to job session")
    _audit(console, {"event": "task", "task": name.strip()})


@main.command()
def git():
    """Add the commits made in this repository since the session started."""
    console = Console()
    with _reported(console):
        events = _session_log().collect_commits()
    if events:
        console.print(f"Added {len(events)} commit(s) to job session")
    else:
        console.print("[dim]No commits since session start[/dim]")
    _audit(console, {"event": "git", "commits": len(events)})


@main.command()
def end():
    """End the current job session and print its timeline."""
    console = Console()
    with _reported(console):
        summary = _session_log().end()
    render_summary(console, summary)
    _audit(console, {"event": "end", "total_seconds": summary.elapsed_seconds})


@main.command()
def status():
    """Show the current job session status."""
    console = Console()
    with _reported(console):
        current = _session_log().status()
    render_status(console, current)


@main.command()
@click.option("-n", "--limit", default=20, help="Number of log entries to show.")
def logs(limit):
    """Show the command log."""
    console = Console()
    with _reported(console):
        entries = read_logs(limit)
    if not entries:
        console.print("[dim]No logs yet. Start a session first.[/dim]")
        return
    console.print(logs_table(entries))


@main.command("config")
@click.argument("key")
@click.argument("value")
def config_cmd(key, value):
    """Save a setting to the global config.

    Examples:
        jobclock config git_author me@example.com
        jobclock config state_file ~/Dropbox/jobclock-session.json
    """
    console = Console()
    # Accept JSON literals so booleans and numbers keep their type, except for known string keys
    parsed = value
    if key not in STRING_KEYS:
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            pass
    with _reported(console):
        path = save_global_config({key: parsed})
    console.print(f"Saved {escape(key)} to {path}")
