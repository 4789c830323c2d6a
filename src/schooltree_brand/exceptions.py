"""Exceptions raised by the brand configuration engine.

Unknown tenant ids and dark mode requests on tenants without dark mode are
degraded conditions, not errors, and never raise.
"""

from pathlib import Path


class BrandConfigError(Exception):
    """Base class for brand configuration errors."""


class BrandDocumentError(BrandConfigError):
    """A brand document could not be read or is not a JSON object."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{message} ({self.path})"
        super().__init__(message)
