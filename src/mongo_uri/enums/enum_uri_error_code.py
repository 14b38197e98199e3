# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Error Code Enumeration.

Error codes attached to every error raised while parsing a connection string.
Each code identifies the parsing stage that rejected the input.
"""

from enum import Enum


class EnumUriErrorCode(str, Enum):
    """Classification of connection string parse failures.

    Attributes:
        INVALID_INPUT: The input was not a string.
        INVALID_SCHEME: The ``mongodb://`` prefix is missing.
        INVALID_USERINFO: Credentials were present but malformed.
        INVALID_HOST: The host list is empty or a host token is invalid.
        INVALID_PORT: A host token carries a non-numeric or out-of-range port.
            Port errors are a refinement of host errors.
        INVALID_OPTION: An option token has no ``=`` separator.
    """

    INVALID_INPUT = "invalid_input"
    INVALID_SCHEME = "invalid_scheme"
    INVALID_USERINFO = "invalid_userinfo"
    INVALID_HOST = "invalid_host"
    INVALID_PORT = "invalid_port"
    INVALID_OPTION = "invalid_option"


__all__ = ["EnumUriErrorCode"]
