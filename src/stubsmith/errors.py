"""Custom exception types used by stubsmith."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when the generator configuration cannot satisfy a request.

    ``key`` holds the configuration entry that was looked up, when there is one.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
