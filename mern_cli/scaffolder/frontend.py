"""Frontend stack: React + Vite + Tailwind CSS with a toast demo.

The package manager's generated ``package.json`` is replaced by
:data:`FRONTEND_MANIFEST` so that the dev/build/preview scripts and the
dependency ranges are always the same, whatever ``npm init`` produced.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from mern_cli.utils import console, print_success, print_warning, save_json

from .models import StageResult, TemplateFile
from .stack import StackInitializer

FRONTEND_MANIFEST: dict[str, Any] = {
    "name": "frontend",
    "version": "1.0.0",
    "main": "src/main.jsx",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "preview": "vite preview",
    },
    "dependencies": {
        "react": "^19.0.0",
        "react-dom": "^19.0.0",
        "tailwindcss": "^3.4.17",
        "vite": "^6.0.7",
        "toastify-js": "^1.13.2",
    },
}


class FrontendInitializer(StackInitializer):
    """Installs the frontend packages, pins the manifest and writes the app shell."""

    STAGE = "frontend"

    TEMPLATES: tuple[TemplateFile, ...] = (
        TemplateFile(relative_path="src/App.jsx", template="frontend/src/App.jsx.j2"),
        TemplateFile(relative_path="src/index.css", template="frontend/src/index.css.j2"),
        TemplateFile(relative_path="src/main.jsx", template="frontend/src/main.jsx.j2"),
        TemplateFile(relative_path="index.html", template="frontend/index.html.j2"),
        TemplateFile(
            relative_path="tailwind.config.js",
            template="frontend/tailwind.config.js.j2",
        ),
    )

    def install_commands(self) -> list[list[str]]:
        npm = self.config.package_manager
        return [
            [npm, "init", "-y"],
            [npm, "install", *self.config.frontend.dependencies],
        ]

    def tailwind_commands(self) -> list[list[str]]:
        """Scaffold ``tailwind.config.js`` and ``postcss.config.js``."""
        return [[self.config.npx, "tailwindcss", "init", "-p"]]

    async def write_manifest(self, stack_dir: Path) -> Path:
        """Overwrite ``package.json`` in *stack_dir* with :data:`FRONTEND_MANIFEST`."""
        path = stack_dir / "package.json"
        await save_json(copy.deepcopy(FRONTEND_MANIFEST), path)
        return path

    async def initialize(self, stack_dir: Path, context: dict[str, Any]) -> StageResult:
        console.print("Initializing frontend...")
        result = StageResult(stage=self.STAGE)

        await self._run_commands(
            result, "install dependencies", self.install_commands(), stack_dir
        )

        manifest = stack_dir / "package.json"

        async def _manifest() -> None:
            await self.write_manifest(stack_dir)

        if await self._step(result, "write package.json", _manifest):
            result.files_written.append(manifest)

        await self._run_commands(
            result, "tailwind init", self.tailwind_commands(), stack_dir
        )
        # Written last so it replaces the config generated by the tailwind CLI.
        await self._write_templates(result, stack_dir, context)

        if result.success:
            print_success("Frontend initialized successfully!")
        else:
            print_warning(f"Frontend initialized with {len(result.errors)} error(s).")
        return result
