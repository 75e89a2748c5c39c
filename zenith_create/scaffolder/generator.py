"""Project materialization strategies.

Two strategies produce the on-disk tree for a new project:

* :class:`MinimalGenerator` writes a small fixed file set (the default).
* :class:`TemplateCopier` mirrors an existing template directory, skipping
  excluded entry names, then rewrites its manifest.

Both accept a validated :class:`ProjectDescriptor`.  Filesystem errors are
not caught here: a failure halfway through leaves the target partially
populated.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from zenith_create.config import Config
from zenith_create.utils import print_info, print_success

from .errors import TemplateSourceError
from .manifest import rewrite_manifest, write_manifest
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project descriptor
# ---------------------------------------------------------------------------


class ProjectDescriptor(BaseModel):
    """Name and absolute location of the project being created."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Project name, stored verbatim")
    target_path: Path = Field(..., description="Absolute path of the new project root")


# Content subdirectories created by the minimal generator.
CONTENT_DIRS: tuple[str, ...] = (
    "app/pages",
    "app/layouts",
    "app/components",
)


# ---------------------------------------------------------------------------
# Minimal generator
# ---------------------------------------------------------------------------


class MinimalGenerator:
    """Writes the fixed starter tree: manifest, one page, empty content dirs."""

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def generate(self, project: ProjectDescriptor) -> Path:
        """Materialize *project* and return its root."""
        root = project.target_path
        root.mkdir(parents=True, exist_ok=True)
        for directory in CONTENT_DIRS:
            (root / directory).mkdir(parents=True, exist_ok=True)

        write_manifest(root, project.name, self.config.manifest)
        self.renderer.render_tree(
            "minimal",
            root,
            rename={".zen": self.config.page_extension},
        )

        print_success("Created minimal template")
        return root


# ---------------------------------------------------------------------------
# Template copier
# ---------------------------------------------------------------------------


class TemplateCopier:
    """Mirrors a template directory into a new project, then fixes its manifest."""

    def __init__(self, config: Config, template_dir: str | Path | None = None) -> None:
        self.config = config
        source = template_dir if template_dir is not None else config.template_dir
        if source is None:
            raise TemplateSourceError("no template directory configured")
        self.template_dir = Path(source)

    def generate(self, project: ProjectDescriptor) -> Path:
        """Copy the template into *project* and return its root."""
        if not self.template_dir.is_dir():
            raise TemplateSourceError(
                f"template directory not found: {self.template_dir}"
            )

        print_info("Copying template...")
        root = project.target_path
        root.mkdir(parents=True, exist_ok=True)
        copy_tree(self.template_dir, root, self.config.exclude)
        rewrite_manifest(root, project.name, self.config.manifest)

        print_success("Template copied")
        return root


def copy_tree(source: Path, destination: Path, exclude: Iterable[str]) -> None:
    """Depth-first copy of *source* into *destination*.

    Any entry whose name is in *exclude* is skipped at every level, and
    excluded directories are never entered.  File bytes are copied verbatim.
    """
    excluded = frozenset(exclude)
    source = Path(source)
    destination = Path(destination)

    if not source.is_dir():
        shutil.copyfile(source, destination)
        return

    destination.mkdir(exist_ok=True)
    for entry in sorted(source.iterdir()):
        if entry.name in excluded:
            continue
        copy_tree(entry, destination / entry.name, excluded)


# ---------------------------------------------------------------------------
# Strategy selection
# ---------------------------------------------------------------------------


def get_generator(config: Config) -> MinimalGenerator | TemplateCopier:
    """Return the materializer selected by ``config.strategy``."""
    if config.strategy == "template":
        return TemplateCopier(config)
    return MinimalGenerator(config)
