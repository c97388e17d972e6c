"""Main scaffolding orchestrator.

Takes a ``ProjectSpec`` and a ``ScaffoldConfig`` and produces a MERN project:
the root directory, the fixed layout, then the backend and frontend stacks.
Stages run strictly one after another; a failing stage never stops the next
one, it only shows up in the returned ``ScaffoldReport``.
"""

from __future__ import annotations

import asyncio

from rich.markup import escape

from mern_cli.config import ScaffoldConfig
from mern_cli.utils import console, ensure_dir, print_error, print_stage_header

from .backend import BackendInitializer
from .frontend import FrontendInitializer
from .layout import LayoutBuilder
from .models import ProjectSpec, ScaffoldReport
from .templates import TemplateRenderer


class ProjectGenerator:
    """Scaffolds one project.

    Generates:
    - ``backend/{config,controllers,models,routes}`` and ``frontend/{src,public}``
    - Express + Mongoose ``server.js`` and ``.env``
    - React + Vite + Tailwind frontend with a pinned ``package.json``
    """

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = TemplateRenderer()
        self.layout = LayoutBuilder()
        self.backend = BackendInitializer(self.config, self.renderer)
        self.frontend = FrontendInitializer(self.config, self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, project: ProjectSpec) -> ScaffoldReport:
        """Generate the complete project structure for *project*.

        Returns:
            A report with one ``StageResult`` per stage that ran.  If the
            project root itself cannot be created the report is marked
            ``aborted`` and carries no stage results.
        """
        report = ScaffoldReport(project=project)
        console.print(f"Creating project: [bold]{escape(project.name)}[/bold]", highlight=False)

        try:
            await asyncio.to_thread(ensure_dir, project.root_path)
        except OSError as exc:
            print_error(f"Error creating project folder: {project.root_path} ({exc})")
            report.aborted = True
            return report

        context = self.config.template_context(project.name)

        print_stage_header("Layout")
        report.stages.append(await self.layout.build(project.root_path))

        print_stage_header("Backend")
        report.stages.append(
            await self.backend.initialize(project.backend_path, context)
        )

        print_stage_header("Frontend")
        report.stages.append(
            await self.frontend.initialize(project.frontend_path, context)
        )

        return report
