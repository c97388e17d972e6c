"""mern-cli command-line entry point.

Usage::

    mern-cli                      # prompts for the project name
    mern-cli my-app -o ~/code     # no prompt, scaffold into ~/code/my-app
    python -m mern_cli.cli my-app --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

from mern_cli import __version__
from mern_cli.config import DEFAULT_PROJECT_NAME, ScaffoldConfig
from mern_cli.scaffolder import ProjectGenerator, ProjectSpec, ScaffoldReport
from mern_cli.utils import console, print_error, print_success, print_summary_table

PROMPT = "Enter your project name: "


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------


def prompt_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Ask once for the project name; blank input or EOF yields *default*."""
    try:
        answer = console.input(PROMPT)
    except EOFError:
        answer = ""
    return answer.strip() or default


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _display_path(path: Path) -> str:
    """Return *path* relative to the working directory when possible."""
    try:
        return str(path.relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


def print_report(report: ScaffoldReport) -> None:
    """Print a one-row-per-stage outcome table, with the errors of failed stages."""
    rows: dict[str, str] = {}
    for stage in report.stages:
        if stage.success:
            rows[stage.stage] = "[green]ok[/green]"
        else:
            rows[stage.stage] = f"[red]{len(stage.errors)} error(s)[/red]"
    print_summary_table(rows, title="Scaffold Summary")

    for stage in report.failed_stages:
        for error in stage.errors:
            console.print(
                f"  [red]-[/red] {stage.stage}: {escape(error.step)} "
                f"[dim]({error.kind.value})[/dim] {escape(error.message)}",
                highlight=False,
            )


def print_next_steps(report: ScaffoldReport) -> None:
    """Print how to start the generated frontend and backend."""
    location = escape(_display_path(report.project.root_path))
    console.print(
        Panel(
            "[bold]Frontend:[/bold]\n"
            "1. Navigate to the project folder:\n"
            f"   cd {location}/frontend\n"
            "2. Start the development server:\n"
            "   npm run dev\n"
            "\n"
            "[bold]Backend:[/bold]\n"
            "1. Navigate to the project folder:\n"
            f"   cd {location}/backend\n"
            "2. Start the backend server:\n"
            "   node server.js",
            title="[bold]To start the project, follow these steps[/bold]",
            border_style="bright_cyan",
        )
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mern-cli",
        description="Scaffold a MERN (MongoDB, Express, React, Node) project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mern-cli\n"
            "  mern-cli my-app --output ./projects\n"
            "  mern-cli my-app --skip-install --port 8080\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run npm/npx; only write the project files",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Backend port written to server.js and .env (default: 5000)",
    )
    parser.add_argument(
        "--mongo-uri",
        default=None,
        help="MongoDB connection string written to server.js and .env",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any stage reported an error",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Merge command-line overrides on top of the environment configuration."""
    config = ScaffoldConfig.from_env()
    updates: dict[str, Any] = {}
    if args.output:
        updates["output_dir"] = Path(args.output)
    if args.skip_install:
        updates["install_dependencies"] = False

    backend_updates: dict[str, Any] = {}
    if args.port is not None:
        backend_updates["port"] = args.port
    if args.mongo_uri:
        backend_updates["mongo_uri"] = args.mongo_uri
    if backend_updates:
        updates["backend"] = config.backend.model_dump() | backend_updates

    if not updates:
        return config
    return ScaffoldConfig.model_validate(config.model_dump() | updates)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``mern-cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(exc))}")
        sys.exit(2)

    name = args.name if args.name is not None else prompt_project_name()
    project = ProjectSpec.from_input(name, config.output_dir)

    console.print(
        Panel(
            f"[bold bright_cyan]mern-cli {__version__}[/bold bright_cyan]\n"
            f"Project : {escape(project.name)}\n"
            f"Path    : {escape(str(project.root_path))}\n"
            f"Install : {'yes' if config.install_dependencies else 'skipped'}",
            title="[bold]Scaffold Start[/bold]",
            border_style="bright_cyan",
        )
    )

    report = asyncio.run(ProjectGenerator(config).generate(project))

    if report.aborted:
        print_error("Project setup aborted: the project folder could not be created.")
        if args.strict:
            sys.exit(1)
        return

    console.print()
    print_report(report)
    print_success("Project setup complete!")
    print_next_steps(report)

    if args.strict and not report.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
