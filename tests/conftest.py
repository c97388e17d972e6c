"""Shared pytest fixtures for the mern-cli test suite.

Provides reusable fixtures for:
- Temporary output directories and project specs
- Configurations with and without package installation
- A mocked ``run_command`` so no test ever calls npm or npx
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from mern_cli.config import ScaffoldConfig
from mern_cli.scaffolder.models import ProjectSpec


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty parent directory that projects are scaffolded into."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


@pytest.fixture
def project(output_dir: Path) -> ProjectSpec:
    """A ``demo`` project rooted in the temporary output directory."""
    return ProjectSpec.from_input("demo", output_dir)


@pytest.fixture
def backend_dir(tmp_path: Path) -> Path:
    path = tmp_path / "backend"
    path.mkdir()
    return path


@pytest.fixture
def frontend_dir(tmp_path: Path) -> Path:
    path = tmp_path / "frontend"
    (path / "src").mkdir(parents=True)
    return path


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config(output_dir: Path) -> ScaffoldConfig:
    """Default configuration (installation enabled) writing into *output_dir*."""
    return ScaffoldConfig(output_dir=output_dir)


@pytest.fixture
def offline_config(output_dir: Path) -> ScaffoldConfig:
    """Configuration that never runs npm/npx."""
    return ScaffoldConfig(output_dir=output_dir, install_dependencies=False)


@pytest.fixture
def context(config: ScaffoldConfig) -> dict:
    """Template context for the default configuration."""
    return config.template_context("demo")


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch ``run_command`` as seen by the stack initializers.

    The mock succeeds by default; set ``side_effect`` to simulate a missing
    tool or a failing command.
    """
    with patch(
        "mern_cli.scaffolder.stack.run_command",
        new_callable=AsyncMock,
        return_value=0,
    ) as mocked:
        yield mocked


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MERN_* variables from the developer's shell out of the tests."""
    for var in (
        "MERN_OUTPUT_DIR",
        "MERN_PACKAGE_MANAGER",
        "MERN_NPX",
        "MERN_SKIP_INSTALL",
        "MERN_COMMAND_TIMEOUT",
        "MERN_BACKEND_PORT",
        "MERN_MONGO_URI",
    ):
        monkeypatch.delenv(var, raising=False)
