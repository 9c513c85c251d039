"""Custom exceptions for tomescan.

Parsing itself never raises: unparseable files come back as None. These
exceptions belong to the caller-facing layer (scanner, configuration and
CLI), where bad input is a real error.
"""

from typing import Any


class TomescanError(Exception):
    """Base exception for all tomescan errors.

    All custom exceptions should inherit from this base class to allow
    for broad exception handling when needed.
    """

    pass


class LibraryRootNotFound(TomescanError):
    """Raised when a scan root does not exist or is not a directory.

    Attributes:
        path: The path that was requested
        reason: Human-readable reason ('missing' or 'not a directory')
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize LibraryRootNotFound exception.

        Args:
            path: Requested library root
            reason: Why the root cannot be scanned
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Library root '{path}' cannot be scanned: {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for JSON output.

        Returns:
            Dictionary representation suitable for JSON responses
        """
        return {
            "error": "library_root_not_found",
            "path": self.path,
            "reason": self.reason,
        }

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"LibraryRootNotFound(path={self.path!r}, reason={self.reason!r})"


class InvalidLibraryType(TomescanError):
    """Raised when a library type string names no known library type.

    Attributes:
        value: The rejected value
        allowed: The accepted library type values
    """

    def __init__(self, value: str, allowed: list[str]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid library type '{value}' (expected one of: {', '.join(allowed)})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "invalid_library_type",
            "value": self.value,
            "allowed": self.allowed,
        }

    def __repr__(self) -> str:
        return f"InvalidLibraryType(value={self.value!r})"


class InvalidWorkerCount(TomescanError):
    """Raised when a worker count is not a positive integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid worker count '{value}' (expected a positive integer)")

    def to_dict(self) -> dict[str, Any]:
        return {"error": "invalid_worker_count", "value": self.value}

    def __repr__(self) -> str:
        return f"InvalidWorkerCount(value={self.value!r})"
