"""Exceptions raised while materializing a project."""


class ScaffoldError(Exception):
    """Base class for errors that stop scaffolding with a user-facing message."""


class TemplateSourceError(ScaffoldError):
    """Raised when the template directory to copy is missing or not a directory."""


class ManifestError(ScaffoldError):
    """Raised when a template's ``package.json`` cannot be rewritten."""
