"""mern-cli scaffolder -- generates a MERN project skeleton.

Creates the project root, the fixed backend/frontend directory layout, and
the backend (Express + Mongoose) and frontend (React + Vite + Tailwind) files,
optionally installing packages with the configured package manager.

Quick usage::

    from mern_cli.config import ScaffoldConfig
    from mern_cli.scaffolder import ProjectGenerator, ProjectSpec

    project = ProjectSpec.from_input("my-app", "/tmp/output")
    report = await ProjectGenerator(ScaffoldConfig()).generate(project)
"""

from mern_cli.scaffolder.backend import BackendInitializer
from mern_cli.scaffolder.frontend import FRONTEND_MANIFEST, FrontendInitializer
from mern_cli.scaffolder.generator import ProjectGenerator
from mern_cli.scaffolder.layout import LayoutBuilder
from mern_cli.scaffolder.models import (
    ErrorKind,
    ProjectSpec,
    ScaffoldReport,
    StageResult,
    StepError,
    TemplateFile,
)
from mern_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "BackendInitializer",
    "ErrorKind",
    "FRONTEND_MANIFEST",
    "FrontendInitializer",
    "LayoutBuilder",
    "ProjectGenerator",
    "ProjectSpec",
    "ScaffoldReport",
    "StageResult",
    "StepError",
    "TemplateFile",
    "TemplateRenderer",
]
