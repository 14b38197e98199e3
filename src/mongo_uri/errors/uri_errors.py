# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Classes.

Error Hierarchy:
    ValueError
    └── MongoUriError (base parse error)
        ├── InvalidSchemeError
        ├── InvalidUserinfoError
        ├── InvalidHostError
        │   └── InvalidPortError
        └── InvalidOptionError

All errors:
    - Are terminal for the parse call; no partial result accompanies them
    - Use EnumUriErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Support correlation IDs for request tracking
    - Accept ModelUriErrorContext for bundled context parameters

Error messages never contain the connection string itself, since it may
carry credentials. Pass ``value="[REDACTED]"`` for anything sensitive.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from mongo_uri.enums import EnumUriErrorCode
from mongo_uri.errors.model_uri_error_context import ModelUriErrorContext


class MongoUriError(ValueError):
    """Base error class for connection string parse failures.

    Structured Fields (via ModelUriErrorContext):
        operation: Operation being performed
        stage: Parsing stage that failed
        position: Cursor offset at which the failing stage started
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelUriErrorContext(operation="parse_uri", stage="scheme")
        >>> raise MongoUriError("Parse failed", context=context)

        # Or with extra context:
        >>> raise MongoUriError("Parse failed", context=context, value="[REDACTED]")
    """

    default_error_code: EnumUriErrorCode = EnumUriErrorCode.INVALID_INPUT

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumUriErrorCode] = None,
        context: Optional[ModelUriErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize MongoUriError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default)
            context: Bundled parse context (operation, stage, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: UUID | None = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.stage is not None:
                structured_context["stage"] = context.stage
            if context.position is not None:
                structured_context["position"] = context.position
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"error_code={self.error_code.value!r}, "
            f"correlation_id={self.correlation_id!s})"
        )


class InvalidSchemeError(MongoUriError):
    """Raised when the connection string does not start with ``mongodb://``.

    The comparison is case sensitive; ``MONGODB://`` is rejected.
    """

    default_error_code = EnumUriErrorCode.INVALID_SCHEME


class InvalidUserinfoError(MongoUriError):
    """Raised when an ``@`` is present but the credentials lack a ``:``.

    Example:
        >>> raise InvalidUserinfoError(
        ...     "Credentials must be given as username:password",
        ...     context=context,
        ...     value="[REDACTED]",
        ... )
    """

    default_error_code = EnumUriErrorCode.INVALID_USERINFO


class InvalidHostError(MongoUriError):
    """Raised when the host list is empty or a host token is malformed."""

    default_error_code = EnumUriErrorCode.INVALID_HOST


class InvalidPortError(InvalidHostError):
    """Raised when a host token carries an invalid port.

    A port must start with a decimal digit and fit in 16 bits. Catching
    InvalidHostError also catches this error.
    """

    default_error_code = EnumUriErrorCode.INVALID_PORT


class InvalidOptionError(MongoUriError):
    """Raised when an option token has no ``=`` separator."""

    default_error_code = EnumUriErrorCode.INVALID_OPTION


__all__ = [
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidPortError",
    "InvalidSchemeError",
    "InvalidUserinfoError",
    "MongoUriError",
]
