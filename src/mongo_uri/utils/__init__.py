# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the mongo_uri package.

This package provides:
    - util_uri_scanning: Escape-aware separator scanning and integer prefixes
    - util_uri_parser: The connection string parser
    - util_uri_sanitization: Password masking for safe logging
"""

from mongo_uri.utils.util_uri_parser import (
    classify_option_key,
    coerce_option_value,
    copy_mongo_uri,
    parse_host_token,
    parse_mongo_uri,
    try_parse_mongo_uri,
)
from mongo_uri.utils.util_uri_sanitization import sanitize_mongo_uri
from mongo_uri.utils.util_uri_scanning import (
    parse_leading_int,
    scan_to_char,
    split_unescaped,
)

__all__: list[str] = [
    "classify_option_key",
    "coerce_option_value",
    "copy_mongo_uri",
    "parse_host_token",
    "parse_leading_int",
    "parse_mongo_uri",
    "sanitize_mongo_uri",
    "scan_to_char",
    "split_unescaped",
    "try_parse_mongo_uri",
]
