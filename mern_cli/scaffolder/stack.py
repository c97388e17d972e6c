"""Shared machinery for the backend and frontend stack initializers.

Each initializer is a linear list of steps (run a command, write a manifest,
render templates).  Every step runs inside its own boundary: a failure is
printed, classified and recorded on the stage's ``StageResult``, and the next
step still runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable

from jinja2 import TemplateError
from rich.markup import escape

from mern_cli.config import ScaffoldConfig
from mern_cli.utils import (
    CommandError,
    ToolNotFoundError,
    console,
    print_error,
    print_warning,
    run_command,
)

from .models import ErrorKind, StageResult, TemplateFile
from .templates import TemplateRenderer


def classify_error(exc: BaseException) -> ErrorKind:
    """Map an exception raised by a step to an ``ErrorKind``."""
    if isinstance(exc, ToolNotFoundError):
        return ErrorKind.TOOL_MISSING
    if isinstance(exc, CommandError):
        return ErrorKind.COMMAND_FAILED
    return ErrorKind.FILESYSTEM


class StackInitializer(ABC):
    """Base class for one half of the generated project.

    Subclasses set :attr:`STAGE` and :attr:`TEMPLATES` and implement
    :meth:`initialize`.
    """

    STAGE: str = ""
    TEMPLATES: tuple[TemplateFile, ...] = ()

    def __init__(
        self,
        config: ScaffoldConfig,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    @abstractmethod
    async def initialize(self, stack_dir: Path, context: dict[str, Any]) -> StageResult:
        """Run every step of the stack in *stack_dir* and return its result."""

    # -- Steps -------------------------------------------------------------

    async def _step(
        self,
        result: StageResult,
        name: str,
        action: Callable[[], Awaitable[Any]],
    ) -> bool:
        """Run *action*, recording any failure on *result*.

        Returns ``True`` when the step completed.
        """
        try:
            await action()
        except (CommandError, OSError, TemplateError) as exc:
            kind = classify_error(exc)
            print_error(f"[{self.STAGE}] {name} failed ({kind.value}): {exc}")
            result.record_error(name, kind, exc)
            return False
        return True

    async def _run_commands(
        self,
        result: StageResult,
        name: str,
        commands: Iterable[list[str]],
        cwd: Path,
    ) -> bool:
        """Run *commands* in order as a single step.

        Nothing is executed when dependency installation is disabled.
        """
        if not self.config.install_dependencies:
            print_warning(f"[{self.STAGE}] Skipping {name} (installation disabled)")
            return True

        async def _action() -> None:
            for cmd in commands:
                console.print(f"[dim]$ {escape(' '.join(cmd))}[/dim]", highlight=False)
                await run_command(cmd, cwd=cwd, timeout=self.config.command_timeout)

        return await self._step(result, name, _action)

    async def _write_templates(
        self,
        result: StageResult,
        stack_dir: Path,
        context: dict[str, Any],
    ) -> None:
        """Render every entry of :attr:`TEMPLATES` into *stack_dir*.

        Each file is its own step, so one failed write does not prevent the
        others.
        """
        for entry in self.TEMPLATES:
            target = stack_dir / entry.relative_path

            async def _action(entry: TemplateFile = entry, target: Path = target) -> None:
                await self.renderer.render_to_file(entry.template, target, context)

            if await self._step(result, f"write {entry.relative_path}", _action):
                result.files_written.append(target)
