"""Pydantic v2 models describing a scaffolding run and its outcome."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mern_cli.config import DEFAULT_PROJECT_NAME


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Classification of a failed scaffolding step."""
    TOOL_MISSING = "tool_missing"
    COMMAND_FAILED = "command_failed"
    FILESYSTEM = "filesystem"


# ---------------------------------------------------------------------------
# Project & template models
# ---------------------------------------------------------------------------

class ProjectSpec(BaseModel):
    """The project being scaffolded.  Immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project directory name")
    root_path: Path = Field(..., description="Absolute path of the project root")

    @classmethod
    def from_input(cls, raw_name: str | None, output_dir: str | Path) -> "ProjectSpec":
        """Build the project from user input, falling back to the default name."""
        name = (raw_name or "").strip() or DEFAULT_PROJECT_NAME
        return cls(name=name, root_path=(Path(output_dir) / name).resolve())

    @property
    def backend_path(self) -> Path:
        return self.root_path / "backend"

    @property
    def frontend_path(self) -> Path:
        return self.root_path / "frontend"


class TemplateFile(BaseModel):
    """A generated file: where it lands and which template produces it."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="Output path relative to the stack directory")
    template: str = Field(..., description="Jinja2 template name, e.g. 'backend/server.js.j2'")


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class StepError(BaseModel):
    """A single failed step inside a stage."""
    step: str
    kind: ErrorKind
    message: str


class StageResult(BaseModel):
    """Outcome of one scaffolding stage (layout, backend or frontend)."""

    stage: str
    directories_created: list[Path] = Field(default_factory=list)
    files_written: list[Path] = Field(default_factory=list)
    errors: list[StepError] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def record_error(self, step: str, kind: ErrorKind, exc: BaseException) -> StepError:
        error = StepError(step=step, kind=kind, message=str(exc))
        self.errors.append(error)
        return error


class ScaffoldReport(BaseModel):
    """Everything the orchestrator learned while scaffolding a project."""

    project: ProjectSpec
    stages: list[StageResult] = Field(default_factory=list)
    aborted: bool = Field(default=False, description="Project root could not be created")

    @property
    def success(self) -> bool:
        return not self.aborted and all(stage.success for stage in self.stages)

    @property
    def failed_stages(self) -> list[StageResult]:
        return [stage for stage in self.stages if not stage.success]

    def stage(self, name: str) -> StageResult | None:
        """Return the result for stage *name*, if it ran."""
        for result in self.stages:
            if result.stage == name:
                return result
        return None
