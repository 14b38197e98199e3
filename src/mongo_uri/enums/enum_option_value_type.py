# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Option Value Type Enumeration.

Identifies the typed value an option was coerced into.
"""

from enum import Enum


class EnumOptionValueType(str, Enum):
    """Typed value kinds stored in the option multimap.

    Attributes:
        INT32: Signed 32-bit integer (timeouts, pool sizes, numeric ``w``).
        BOOL: Boolean (``journal``, ``slaveok``, ``ssl``).
        STRING: Verbatim string (textual ``w`` and every unrecognized key).
    """

    INT32 = "int32"
    BOOL = "bool"
    STRING = "string"


__all__ = ["EnumOptionValueType"]
