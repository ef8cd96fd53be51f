# cityfinder/errors.py
from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Programmer error detected while wiring the client (missing route or container)."""


class FetchError(Exception):
    """A remote lookup failed in transport or could not be decoded."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
