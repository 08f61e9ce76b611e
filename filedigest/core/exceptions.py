"""
Custom exception hierarchy for filedigest.

I/O problems met while hashing a file are reported as result values, not
raised. These exceptions cover configuration, programming errors and the
points where a caller must decide how to surface a failure.
"""

from __future__ import annotations


class FiledigestException(Exception):
    """
    Base exception for all filedigest errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, algorithm names, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class FiledigestConfigError(FiledigestException):
    """Base class for configuration-related errors."""

    pass


class ConfigValidationError(FiledigestConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so callers validating user input can catch
    ValueError.
    """

    exit_code: int = 2

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Hashing Errors
# =============================================================================


class FiledigestHashingError(FiledigestException):
    """Base class for hashing-related errors."""

    pass


class UnknownAlgorithmError(FiledigestHashingError, ValueError):
    """Requested algorithm name or identifier is not registered."""

    exit_code: int = 2

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


class SourceReadError(FiledigestHashingError):
    """
    Error reading file contents after the file was opened.

    The engine turns this into an "Error reading file: ..." result for
    every requested algorithm.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class HashDecodeError(FiledigestHashingError, ValueError):
    """Text could not be decoded as a hex or base64 digest."""

    pass


# =============================================================================
# Session Errors
# =============================================================================


class FiledigestSessionError(FiledigestException):
    """Base class for hashing session errors."""

    pass


class MissingFileError(FiledigestSessionError):
    """A calculation was requested before a file was selected."""

    def __init__(self, message: str = "Missing file", **kwargs) -> None:
        super().__init__(message, **kwargs)
