"""End-to-end scaffolding runs through the real CLI entry point.

The package manager is either disabled (``--skip-install``) or replaced by a
missing binary, so no network access or Node.js installation is required.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from mern_cli.cli import main


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

EXPECTED_DIRS = {
    "backend",
    "backend/config",
    "backend/controllers",
    "backend/models",
    "backend/routes",
    "frontend",
    "frontend/public",
    "frontend/src",
}

EXPECTED_FILES = {
    "backend/server.js",
    "backend/.env",
    "frontend/package.json",
    "frontend/index.html",
    "frontend/tailwind.config.js",
    "frontend/src/App.jsx",
    "frontend/src/index.css",
    "frontend/src/main.jsx",
}


def _run_with_input(answer: str, argv: list[str]) -> None:
    with patch("mern_cli.cli.console.input", return_value=answer):
        main(argv)


def _tree(root: Path) -> tuple[set[str], set[str]]:
    dirs = {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}
    files = {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}
    return dirs, files


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldEndToEnd:
    def test_demo_project_in_cwd(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        _run_with_input("demo", ["--skip-install"])

        root = tmp_path / "demo"
        dirs, files = _tree(root)
        assert dirs == EXPECTED_DIRS
        assert files == EXPECTED_FILES

    def test_default_name_when_blank(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        _run_with_input("", ["--skip-install"])

        assert (tmp_path / "mern-project" / "backend" / "server.js").is_file()

    def test_manifest_is_valid_json(self, tmp_path: Path) -> None:
        _run_with_input("demo", ["-o", str(tmp_path), "--skip-install"])

        manifest = json.loads((tmp_path / "demo" / "frontend" / "package.json").read_text())
        assert manifest["name"] == "frontend"
        assert manifest["scripts"] == {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        }
        assert manifest["dependencies"]["react"] == "^19.0.0"

    def test_missing_package_manager_is_not_fatal(
        self, tmp_path: Path, monkeypatch, capsys
    ) -> None:
        monkeypatch.setenv("MERN_PACKAGE_MANAGER", "mern-cli-missing-npm-xyz")
        monkeypatch.setenv("MERN_NPX", "mern-cli-missing-npx-xyz")

        _run_with_input("demo", ["-o", str(tmp_path)])

        _, files = _tree(tmp_path / "demo")
        assert files == EXPECTED_FILES
        out = capsys.readouterr().out
        assert "tool_missing" in out
        assert "Project setup complete!" in out

    def test_missing_package_manager_strict_exit(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("MERN_PACKAGE_MANAGER", "mern-cli-missing-npm-xyz")
        monkeypatch.setenv("MERN_NPX", "mern-cli-missing-npx-xyz")

        with pytest.raises(SystemExit) as exc_info:
            _run_with_input("demo", ["-o", str(tmp_path), "--strict"])

        assert exc_info.value.code == 1
        _, files = _tree(tmp_path / "demo")
        assert files == EXPECTED_FILES

    def test_second_run_overwrites_files(self, tmp_path: Path) -> None:
        _run_with_input("demo", ["-o", str(tmp_path), "--skip-install"])
        server = tmp_path / "demo" / "backend" / "server.js"
        original = server.read_text()
        server.write_text("// edited by hand\n")

        _run_with_input("demo", ["-o", str(tmp_path), "--skip-install"])

        assert server.read_text() == original
