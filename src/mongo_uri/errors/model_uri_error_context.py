# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Context Model.

This module defines the context model bundled into every connection string
parse error. It keeps the error constructors small while giving each error
strongly typed, structured fields for logging and tracing.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelUriErrorContext(BaseModel):
    """Structured context for connection string parse errors.

    Attributes:
        operation: Operation being performed (parse_uri, parse_host, etc.)
        stage: Parsing stage that rejected the input (scheme, userinfo,
            hosts, database, options)
        position: Cursor offset into the input at which the stage started
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelUriErrorContext.with_correlation(
        ...     operation="parse_uri",
        ...     stage="hosts",
        ...     position=10,
        ... )
        >>> raise InvalidHostError("Empty host list", context=context)
    """

    model_config = ConfigDict(
        frozen=True,  # Immutable for thread safety
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (parse_uri, parse_host, etc.)",
    )
    stage: Optional[str] = Field(
        default=None,
        description="Parsing stage that rejected the input",
    )
    position: Optional[int] = Field(
        default=None,
        ge=0,
        description="Cursor offset into the input where the stage started",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelUriErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Correlation ID to propagate. A new UUID4 is
                generated if ``None``.
            **kwargs: Remaining context fields.

        Returns:
            A new context with ``correlation_id`` always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelUriErrorContext"]
