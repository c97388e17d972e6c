"""Shared utility functions for mern-cli.

Provides async command execution, JSON output, file-system helpers and
Rich-based console reporting.  Commands inherit the parent's streams so that
package-manager output reaches the user as it is produced.
"""

from __future__ import annotations

import asyncio
import errno
import json
import os
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command exits non-zero or times out."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class ToolNotFoundError(CommandError):
    """Raised when the executable for a command cannot be found or run."""


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = None,
    env: dict[str, str] | None = None,
) -> int:
    """Run a command, streaming its output straight to the user's console.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for as long as the command takes.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        The process return code (always ``0``; failures raise).

    Raises:
        FileNotFoundError, NotADirectoryError: *cwd* is missing or not a directory.
        ToolNotFoundError: The executable is missing or not executable.
        CommandError: The command exited non-zero or exceeded *timeout*.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    display = " ".join(cmd)
    if cwd is not None:
        work_dir = Path(cwd)
        if not work_dir.exists():
            raise FileNotFoundError(
                errno.ENOENT, "Working directory not found", str(work_dir)
            )
        if not work_dir.is_dir():
            raise NotADirectoryError(
                errno.ENOTDIR, "Working directory is not a directory", str(work_dir)
            )

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
        )
    except FileNotFoundError as exc:
        raise ToolNotFoundError(
            f"Command not found: '{cmd[0]}'. Ensure it is installed and in PATH."
        ) from exc
    except PermissionError as exc:
        raise ToolNotFoundError(
            f"Permission denied executing: '{cmd[0]}'. Check file permissions."
        ) from exc

    try:
        returncode = await asyncio.wait_for(process.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise CommandError(f"Command timed out after {timeout}s: {display}")

    if returncode != 0:
        raise CommandError(
            f"Command failed with exit code {returncode}: {display}",
            returncode=returncode,
        )
    return returncode


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON (two-space indent, no trailing newline).

    Parent directories are created automatically.  The write itself is
    performed in a worker thread to avoid blocking the event loop.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False)

    def _write() -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")

    await asyncio.to_thread(_write)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_stage_header(name: str) -> None:
    """Print a full-width rule announcing a scaffolding stage."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] {name} [/bold bright_cyan]", style="bright_cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Stage", style="dim", no_wrap=True)
    table.add_column("Result")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
