"""mern-cli configuration.

Typed configuration for a scaffolding run.  Settings use Pydantic v2 models so
they are validated at construction time and can be built from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_PROJECT_NAME = "mern-project"

BACKEND_DEPENDENCIES: list[str] = ["express", "mongoose", "cors", "dotenv"]

FRONTEND_DEPENDENCIES: list[str] = [
    "react",
    "react-dom",
    "vite",
    "tailwindcss",
    "postcss",
    "autoprefixer",
    "toastify-js",
]

_TRUTHY = {"1", "true", "yes", "on"}


class BackendSettings(BaseModel):
    """Values embedded in the generated backend files."""

    port: int = Field(default=5000, ge=1, le=65535)
    mongo_uri: str = Field(default="mongodb://localhost:27017/mernDB", min_length=1)
    dependencies: list[str] = Field(default_factory=lambda: list(BACKEND_DEPENDENCIES))

    @field_validator("mongo_uri")
    @classmethod
    def validate_mongo_uri(cls, v: str) -> str:
        """Reject characters that would break the JS string literal or the .env line."""
        bad = sorted({ch for ch in v if ch in "\"'`\\" or ch.isspace()})
        if bad:
            raise ValueError(
                f"mongo_uri must not contain quotes, backslashes or whitespace (found {bad!r})"
            )
        return v


class FrontendSettings(BaseModel):
    """Packages installed into the generated frontend."""

    dependencies: list[str] = Field(default_factory=lambda: list(FRONTEND_DEPENDENCIES))


class ScaffoldConfig(BaseModel):
    """Global configuration for one scaffolding run.

    Instances are created once by the CLI entry point and then passed to the
    ``ProjectGenerator`` and the stack initializers.
    """

    output_dir: Path = Field(default_factory=Path.cwd)
    package_manager: str = Field(default="npm", min_length=1)
    npx: str = Field(default="npx", min_length=1)
    install_dependencies: bool = Field(default=True)
    command_timeout: Optional[int] = Field(
        default=None, ge=1, description="Per-command timeout in seconds (None = wait)"
    )
    backend: BackendSettings = Field(default_factory=BackendSettings)
    frontend: FrontendSettings = Field(default_factory=FrontendSettings)

    def template_context(self, project_name: str) -> dict[str, Any]:
        """Return the Jinja2 context shared by every generated file."""
        return {
            "project_name": project_name,
            "backend_port": self.backend.port,
            "mongo_uri": self.backend.mongo_uri,
        }

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            MERN_OUTPUT_DIR, MERN_PACKAGE_MANAGER, MERN_NPX, MERN_SKIP_INSTALL,
            MERN_COMMAND_TIMEOUT, MERN_BACKEND_PORT, MERN_MONGO_URI.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MERN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["MERN_OUTPUT_DIR"])
        if os.environ.get("MERN_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["MERN_PACKAGE_MANAGER"]
        if os.environ.get("MERN_NPX"):
            kwargs["npx"] = os.environ["MERN_NPX"]
        if os.environ.get("MERN_SKIP_INSTALL"):
            kwargs["install_dependencies"] = (
                os.environ["MERN_SKIP_INSTALL"].strip().lower() not in _TRUTHY
            )
        if os.environ.get("MERN_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["MERN_COMMAND_TIMEOUT"])

        backend_kwargs: dict[str, Any] = {}
        if os.environ.get("MERN_BACKEND_PORT"):
            backend_kwargs["port"] = int(os.environ["MERN_BACKEND_PORT"])
        if os.environ.get("MERN_MONGO_URI"):
            backend_kwargs["mongo_uri"] = os.environ["MERN_MONGO_URI"]

        return cls(backend=BackendSettings(**backend_kwargs), **kwargs)
