"""Backend stack: an Express + Mongoose server with a ``.env`` file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mern_cli.utils import console, print_success, print_warning

from .models import StageResult, TemplateFile
from .stack import StackInitializer


class BackendInitializer(StackInitializer):
    """Installs the backend packages and writes ``server.js`` and ``.env``."""

    STAGE = "backend"

    TEMPLATES: tuple[TemplateFile, ...] = (
        TemplateFile(relative_path="server.js", template="backend/server.js.j2"),
        TemplateFile(relative_path=".env", template="backend/env.j2"),
    )

    def install_commands(self) -> list[list[str]]:
        """Commands that create ``package.json`` and install the runtime packages."""
        npm = self.config.package_manager
        return [
            [npm, "init", "-y"],
            [npm, "install", *self.config.backend.dependencies],
        ]

    async def initialize(self, stack_dir: Path, context: dict[str, Any]) -> StageResult:
        console.print("Initializing backend...")
        result = StageResult(stage=self.STAGE)

        await self._run_commands(
            result, "install dependencies", self.install_commands(), stack_dir
        )
        await self._write_templates(result, stack_dir, context)

        if result.success:
            print_success("Backend initialized successfully!")
        else:
            print_warning(f"Backend initialized with {len(result.errors)} error(s).")
        return result
