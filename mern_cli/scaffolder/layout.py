"""Directory layout for a freshly scaffolded MERN project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.markup import escape

from mern_cli.utils import console, print_error, print_success

from .models import ErrorKind, StageResult


class LayoutBuilder:
    """Creates the fixed backend/frontend directory tree under a project root."""

    STAGE = "layout"

    DIRECTORIES: tuple[str, ...] = (
        "backend/config",
        "backend/controllers",
        "backend/models",
        "backend/routes",
        "frontend/src",
        "frontend/public",
    )

    async def build(self, root: Path) -> StageResult:
        """Create every directory in :attr:`DIRECTORIES` below *root*.

        Each directory is attempted independently: a failure is printed and
        recorded on the returned result, and the remaining directories are
        still created.  Existing directories are left untouched.
        """
        console.print("Creating project folder structure...")
        result = StageResult(stage=self.STAGE)

        for relative in self.DIRECTORIES:
            folder = root / relative
            try:
                await asyncio.to_thread(folder.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                print_error(f"Failed to create folder: {folder} ({exc})")
                result.record_error(f"mkdir {relative}", ErrorKind.FILESYSTEM, exc)
                continue
            console.print(f"  [green]+[/green] Created folder: {escape(str(folder))}")
            result.directories_created.append(folder)

        if result.success:
            print_success("Folder structure created successfully!")
        return result
