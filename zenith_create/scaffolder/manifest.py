"""``package.json`` construction and rewriting.

A freshly generated manifest is built from :class:`ManifestDefaults`.  A
manifest that came with a copied template is merged instead: the identity,
script and dependency keys are replaced, everything else (extra keys and
their order) is left alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from zenith_create.config import ManifestDefaults
from zenith_create.utils import load_json, save_json

from .errors import ManifestError

MANIFEST_FILENAME = "package.json"

# Keys a template's own manifest is never allowed to keep.
OVERWRITTEN_KEYS: tuple[str, ...] = (
    "name",
    "version",
    "private",
    "scripts",
    "dependencies",
)


def build_manifest(project_name: str, defaults: ManifestDefaults) -> dict[str, Any]:
    """Return the canonical manifest for *project_name*.

    The name is stored verbatim, including spaces or symbols.
    """
    return {
        "name": project_name,
        "version": defaults.version,
        "private": defaults.private,
        "type": defaults.module_type,
        "scripts": dict(defaults.scripts),
        "dependencies": dict(defaults.dependencies),
        "devDependencies": dict(defaults.dev_dependencies),
    }


def merge_manifest(
    existing: dict[str, Any], project_name: str, defaults: ManifestDefaults
) -> dict[str, Any]:
    """Overwrite the canonical keys of *existing* and return it.

    Keys already present keep their position; missing ones are appended.
    """
    canonical = build_manifest(project_name, defaults)
    for key in OVERWRITTEN_KEYS:
        existing[key] = canonical[key]
    return existing


def write_manifest(
    project_root: Path, project_name: str, defaults: ManifestDefaults
) -> Path:
    """Write the canonical manifest at *project_root*."""
    return save_json(
        build_manifest(project_name, defaults),
        Path(project_root) / MANIFEST_FILENAME,
        indent=defaults.indent,
    )


def rewrite_manifest(
    project_root: Path, project_name: str, defaults: ManifestDefaults
) -> Path:
    """Merge the canonical fields into the manifest at *project_root*.

    When the root holds no manifest the canonical one is written, so every
    materialized project ends up with a ``package.json``.

    Raises:
        ManifestError: If the existing manifest is not a JSON object.  The
            file is left as it was.
    """
    path = Path(project_root) / MANIFEST_FILENAME
    if not path.is_file():
        return write_manifest(project_root, project_name, defaults)

    existing = load_json(path)
    if not isinstance(existing, dict):
        raise ManifestError(f"{MANIFEST_FILENAME} must contain a JSON object: {path}")
    merged = merge_manifest(existing, project_name, defaults)
    return save_json(merged, path, indent=defaults.indent)
