# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Errors Module.

Exports:
    ModelUriErrorContext: Configuration model for bundled error context
    MongoUriError: Base parse error class
    InvalidSchemeError: Missing or wrong ``mongodb://`` scheme
    InvalidUserinfoError: Malformed credentials
    InvalidHostError: Empty host list or malformed host token
    InvalidPortError: Malformed port (subclass of InvalidHostError)
    InvalidOptionError: Option token without ``=``

Correlation ID Assignment:
    Every parse call resolves exactly one correlation ID. When the caller
    passes one it is propagated into any raised error; otherwise a UUID4 is
    generated via ModelUriErrorContext.with_correlation().

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - The connection string itself
        - Usernames or passwords
        - Option values (they may carry secrets)

    SAFE to include:
        - Parsing stage and cursor position
        - Error codes
        - Correlation IDs
        - Option keys and host/option counts
"""

from mongo_uri.errors.model_uri_error_context import ModelUriErrorContext
from mongo_uri.errors.uri_errors import (
    InvalidHostError,
    InvalidOptionError,
    InvalidPortError,
    InvalidSchemeError,
    InvalidUserinfoError,
    MongoUriError,
)

__all__: list[str] = [
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidPortError",
    "InvalidSchemeError",
    "InvalidUserinfoError",
    "ModelUriErrorContext",
    "MongoUriError",
]
