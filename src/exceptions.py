"""Application exception hierarchy.

``AppError`` carries a stable ``code`` plus structured ``context`` so the CLI
and the runner can log failures uniformly. Subclasses cover the three ways a
build fails: bad configuration, a malformed website description and an
output file that cannot be produced or written.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all application-level errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'DATA_VALIDATION_ERROR'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging, such as the offending
        field or output path.
    transient : bool, optional
        Whether retrying the same operation may succeed.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'path': 'index.html'})
    >>> str(e)
    'CODE: message'
    >>> e.to_dict()['context']
    {'path': 'index.html'}
    """

    __slots__ = ("code", "message", "context", "transient")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
        }


class ConfigurationError(AppError):
    """Raised for invalid or missing configuration (AI credentials, renderer tables)."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("CONFIGURATION_ERROR", message, context=context)


class DataValidationError(AppError):
    """Raised when a website description or an output path is malformed."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("DATA_VALIDATION_ERROR", message, context=context)


class ExportError(AppError):
    """Raised when a single output file of a site export cannot be produced.

    ``context["path"]`` names the file.
    """

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("EXPORT_ERROR", message, context=context)


__all__ = ["AppError", "ConfigurationError", "DataValidationError", "ExportError"]
