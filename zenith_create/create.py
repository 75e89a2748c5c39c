"""The ``create`` flow.

resolve project name -> validate target path is free -> materialize files
-> install dependencies -> report next steps.

Input problems (empty name, existing target) raise a :class:`ScaffoldError`
subclass before anything is written; the CLI turns those into a non-zero
exit.  Filesystem errors during materialization propagate unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from zenith_create.config import Config
from zenith_create.installer import install_dependencies
from zenith_create.scaffolder import ProjectDescriptor, ScaffoldError, get_generator
from zenith_create.utils import console, print_header, print_info, print_success


class ProjectNameError(ScaffoldError):
    """Raised when the resolved project name is empty."""


class TargetExistsError(ScaffoldError):
    """Raised when something already exists at the project's target path."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f'Directory "{name}" already exists.')


def resolve_project_name(
    app_name: str | None = None,
    prompt: Callable[[str], str] | None = None,
) -> str:
    """Return the trimmed project name, prompting on stdin when none is given.

    The prompt blocks until one line is read; there is no timeout.
    """
    name = app_name
    if not name:
        ask = prompt or console.input
        try:
            name = ask("Project name: ")
        except EOFError:
            name = ""

    name = (name or "").strip()
    if not name:
        raise ProjectNameError("Project name is required")
    return name


def resolve_target(name: str, cwd: Path | None = None) -> ProjectDescriptor:
    """Resolve *name* against *cwd* and make sure nothing lives there yet.

    The check runs on the path as named, without following symlinks, so a
    dangling link at the target counts as taken.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    target = (base / name).absolute()
    if os.path.lexists(target):
        raise TargetExistsError(name, target)
    return ProjectDescriptor(name=name, target_path=target)


async def create(
    app_name: str | None = None,
    config: Config | None = None,
    *,
    prompt: Callable[[str], str] | None = None,
) -> Path:
    """Scaffold a new project and return its root directory.

    Dependency installation may degrade to a warning; that still counts as
    a successful run.
    """
    config = config or Config.from_env()
    print_header("Create Zenith App")

    name = resolve_project_name(app_name, prompt=prompt)
    project = resolve_target(name)

    print_info("Creating project structure...")
    root = get_generator(config).generate(project)

    print_info("Installing dependencies...")
    await install_dependencies(root, config.installer)

    print_success(f"{name} created successfully!")
    print_info("Next steps:")
    print_info(f"  cd {name}")
    print_info("  bun run dev")
    return root
