"""zenith-create configuration.

Centralised, typed configuration for the scaffolder.  All settings use
Pydantic v2 models so they are validated at construction time and can be
serialised to/from JSON or environment variables without boiler-plate.

The materialization strategy is static configuration: it is picked here (or
through ``ZENITH_STRATEGY``), never on the command line.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_EXCLUDES: tuple[str, ...] = (
    ".git",
    "node_modules",
    "bun.lockb",
    ".DS_Store",
    "dist",
)


def _default_scripts() -> dict[str, str]:
    return {
        "dev": "zen-dev",
        "build": "zen-build",
        "preview": "zen-preview",
        "test": "bun test",
    }


class ManifestDefaults(BaseModel):
    """Canonical ``package.json`` values written into every new project."""

    version: str = Field(default="0.1.0")
    private: bool = Field(default=True)
    module_type: str = Field(default="module", description="Value of the ``type`` key")
    scripts: dict[str, str] = Field(default_factory=_default_scripts)
    dependencies: dict[str, str] = Field(
        default_factory=lambda: {"@zenithbuild/core": "^0.1.0"}
    )
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: {"@types/bun": "latest"}
    )
    indent: int = Field(default=4, ge=0, description="JSON indentation width")


class InstallerConfig(BaseModel):
    """Package-manager commands run after the files are on disk."""

    primary: str = Field(default="bun install")
    fallback: str = Field(default="npm install")
    timeout: int | None = Field(
        default=None, ge=1, description="Per-installer timeout in seconds (None waits forever)"
    )

    @field_validator("primary", "fallback")
    @classmethod
    def _check_command(cls, value: str) -> str:
        # Commands run without a shell, so they must split into an argv.
        if not shlex.split(value):
            raise ValueError("installer command must not be empty")
        return value

    def chain(self) -> list[str]:
        """Return the installers in the order they are attempted."""
        return [self.primary, self.fallback]


class Config(BaseModel):
    """Global zenith-create configuration."""

    strategy: Literal["minimal", "template"] = Field(default="minimal")
    template_dir: Path | None = Field(
        default=None, description="Source tree copied by the template strategy"
    )
    page_extension: str = Field(default=".zen")
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    manifest: ManifestDefaults = Field(default_factory=ManifestDefaults)
    installer: InstallerConfig = Field(default_factory=InstallerConfig)

    @model_validator(mode="after")
    def _check_template_source(self) -> "Config":
        if self.strategy == "template" and self.template_dir is None:
            raise ValueError("the 'template' strategy requires template_dir")
        return self

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            ZENITH_STRATEGY, ZENITH_TEMPLATE_DIR, ZENITH_INSTALLER,
            ZENITH_FALLBACK_INSTALLER, ZENITH_INSTALL_TIMEOUT.
        """
        installer_kwargs: dict[str, Any] = {}
        if os.environ.get("ZENITH_INSTALLER"):
            installer_kwargs["primary"] = os.environ["ZENITH_INSTALLER"]
        if os.environ.get("ZENITH_FALLBACK_INSTALLER"):
            installer_kwargs["fallback"] = os.environ["ZENITH_FALLBACK_INSTALLER"]
        if os.environ.get("ZENITH_INSTALL_TIMEOUT"):
            installer_kwargs["timeout"] = int(os.environ["ZENITH_INSTALL_TIMEOUT"])

        template_dir = os.environ.get("ZENITH_TEMPLATE_DIR")

        return cls(
            strategy=os.environ.get("ZENITH_STRATEGY", "minimal"),
            template_dir=Path(template_dir) if template_dir else None,
            installer=InstallerConfig(**installer_kwargs),
        )
