"""Dependency installation for freshly scaffolded projects.

Runs the configured package-manager commands in order (primary, then
fallback), each exactly once, with the child inheriting our standard streams
so the user sees installer output live.  Installer failure is never fatal:
the project files already exist and are usable without it.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from zenith_create.config import InstallerConfig
from zenith_create.utils import print_warning, run_command


async def _attempt(command: str, timeout: int | None) -> bool:
    """Run one installer command; ``True`` when it exits with status 0."""
    try:
        argv = shlex.split(command)
    except ValueError as exc:
        print_warning(f"cannot parse installer command {command!r}: {exc}")
        return False
    if not argv:
        return False

    try:
        returncode, _, stderr = await run_command(argv, timeout=timeout, capture=False)
    except OSError:
        # Executable missing or not launchable.
        return False
    if returncode == -1 and stderr:
        print_warning(stderr)
    return returncode == 0


async def install_dependencies(project_root: Path, config: InstallerConfig) -> str | None:
    """Install dependencies inside *project_root*.

    Changes the process working directory to *project_root* first.

    Returns:
        The installer command that succeeded, or ``None`` when every
        installer failed and the user has been told to install manually.
    """
    os.chdir(project_root)

    chain = config.chain()
    for position, command in enumerate(chain):
        if await _attempt(command, config.timeout):
            return command
        if position + 1 < len(chain):
            print_warning(f"{command} failed, trying {chain[position + 1]}...")

    print_warning(f"{chain[-1]} failed, you may need to run it manually")
    return None
