"""Shared pytest fixtures for the zenith-create test suite.

Provides reusable fixtures for:
- An isolated working directory (the create flow resolves names against cwd)
- A template source tree seeded with excluded entries at several depths
- A mocked installer subprocess
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from zenith_create.config import Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory; the original cwd is restored afterwards."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    for var in (
        "ZENITH_STRATEGY",
        "ZENITH_TEMPLATE_DIR",
        "ZENITH_INSTALLER",
        "ZENITH_FALLBACK_INSTALLER",
        "ZENITH_INSTALL_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    return work


# Binary payload used to check byte-for-byte copies.
LOGO_BYTES = bytes(range(256)) * 4


@pytest.fixture
def template_source(tmp_path: Path) -> Path:
    """A template directory with excluded names at the root and nested levels."""
    root = tmp_path / "zenith-site"
    files: dict[str, str | bytes] = {
        "package.json": json.dumps(
            {
                "name": "zenith-site",
                "version": "9.9.9",
                "private": False,
                "description": "Official site template",
                "scripts": {"start": "node server.js"},
                "dependencies": {"left-pad": "1.0.0"},
                "devDependencies": {"@types/bun": "1.0.0"},
                "license": "MIT",
            },
            indent=2,
        ),
        "README.md": "# Zenith site\n",
        "bun.lockb": b"\x00lockfile\x01",
        ".DS_Store": b"\x00\x00\x00\x01Bud1",
        ".git/HEAD": "ref: refs/heads/main\n",
        ".git/objects/ab/cdef": b"\x78\x9c",
        "node_modules/pkg/index.js": "module.exports = 1;\n",
        "dist/index.html": "<html></html>\n",
        "app/pages/index.zen": "<main>Home</main>\n",
        "app/components/Button.zen": "<button><slot /></button>\n",
        "app/components/.DS_Store": b"\x00",
        "app/assets/logo.bin": LOGO_BYTES,
        "app/nested/node_modules/x.js": "x\n",
        "app/nested/deep/.git/config": "[core]\n",
        "app/nested/deep/keep.txt": "keep me\n",
        "app/nested/deep/dist/bundle.js": "bundle\n",
    }
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture
def default_config() -> Config:
    """The default (minimal strategy) configuration."""
    return Config()


@pytest.fixture
def template_config(template_source: Path) -> Config:
    """Configuration selecting the template copier over ``template_source``."""
    return Config(strategy="template", template_dir=template_source)


# ---------------------------------------------------------------------------
# Mock installer subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_installer():
    """Patch the installer's ``run_command`` with a configurable AsyncMock.

    Usage:
        def test_install(mock_installer):
            mock_installer.side_effect = [(1, "", ""), (0, "", "")]
            ...
            assert mock_installer.await_count == 2
    """
    with patch(
        "zenith_create.installer.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as mocked:
        yield mocked


def _snapshot(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def snapshot():
    """Return a helper listing every path under a root, relative and POSIX-style."""
    return _snapshot
