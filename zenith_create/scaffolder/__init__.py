"""zenith-create scaffolder -- materializes new project trees.

Two strategies are available, selected by ``Config.strategy``: a minimal
generator that writes a fixed starter tree, and a template copier that
mirrors an existing template directory and rewrites its manifest.

Quick usage::

    from zenith_create.config import Config
    from zenith_create.scaffolder import ProjectDescriptor, get_generator

    project = ProjectDescriptor(name="my-app", target_path=Path("/tmp/my-app"))
    root = get_generator(Config()).generate(project)
"""

from zenith_create.scaffolder.errors import (
    ManifestError,
    ScaffoldError,
    TemplateSourceError,
)
from zenith_create.scaffolder.generator import (
    MinimalGenerator,
    ProjectDescriptor,
    TemplateCopier,
    copy_tree,
    get_generator,
)
from zenith_create.scaffolder.templates import TemplateRenderer

__all__ = [
    "ManifestError",
    "MinimalGenerator",
    "ProjectDescriptor",
    "ScaffoldError",
    "TemplateCopier",
    "TemplateRenderer",
    "TemplateSourceError",
    "copy_tree",
    "get_generator",
]
