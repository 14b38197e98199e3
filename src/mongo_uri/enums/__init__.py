# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for the mongo_uri package.

Exports:
    EnumHostAddressKind: Network host vs. UNIX domain socket
    EnumOptionValueType: Typed value kinds of parsed options
    EnumUriErrorCode: Parse failure classification
"""

from mongo_uri.enums.enum_host_address_kind import EnumHostAddressKind
from mongo_uri.enums.enum_option_value_type import EnumOptionValueType
from mongo_uri.enums.enum_uri_error_code import EnumUriErrorCode

__all__: list[str] = [
    "EnumHostAddressKind",
    "EnumOptionValueType",
    "EnumUriErrorCode",
]
