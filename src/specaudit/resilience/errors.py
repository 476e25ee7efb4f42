"""Error taxonomy for the analysis engine and its boundary layers.

Core analysis never raises for malformed or partial input; it degrades
to fewer findings. These exceptions cover the cases that cannot
degrade:
- a document the operation needs is absent (InputMissingError)
- a caller-supplied feature name or path is unsafe
- a document write failed (surfaced, never half-applied)
"""

from __future__ import annotations

from enum import Enum


class SpecAuditError(Exception):
    """Base class for all specaudit errors."""


class InputMissingError(SpecAuditError):
    """A document required by the operation is absent."""

    def __init__(self, key: str, operation: str) -> None:
        self.key = key
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: required document '{key}' is missing"
        )


class InvalidFeatureNameError(SpecAuditError, ValueError):
    """Feature name contains characters outside the allowed set."""


class PathTraversalError(SpecAuditError, ValueError):
    """A resolved path escapes the project root."""


class DocumentWriteError(SpecAuditError):
    """Writing a document failed; the stored content is unchanged."""


class ErrorClass(Enum):
    INPUT_MISSING = "input_missing"  # absent document, tell the user
    INVALID_INPUT = "invalid_input"  # bad name, path or answer
    IO = "io"  # filesystem failure
    UNKNOWN = "unknown"


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error for user-facing messages and logging."""
    if isinstance(error, InputMissingError):
        return ErrorClass.INPUT_MISSING
    if isinstance(error, (DocumentWriteError, OSError)):
        return ErrorClass.IO
    if isinstance(error, ValueError):
        return ErrorClass.INVALID_INPUT
    return ErrorClass.UNKNOWN


def describe_error(error: Exception) -> str:
    """Render an error as a single readable line."""
    label = {
        ErrorClass.INPUT_MISSING: "Missing input",
        ErrorClass.INVALID_INPUT: "Invalid input",
        ErrorClass.IO: "I/O error",
        ErrorClass.UNKNOWN: "Error",
    }[classify_error(error)]
    return f"{label}: {error}"
