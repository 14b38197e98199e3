# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parse result types for the mongo_uri package."""

from mongo_uri.types.type_parsed_uri import (
    DEFAULT_PORT,
    INT32_MAX,
    INT32_MIN,
    ModelHostEntry,
    ModelParsedMongoUri,
    ModelReadPreferenceTagGroup,
    ModelUriOption,
    OptionValue,
)

__all__: list[str] = [
    "DEFAULT_PORT",
    "INT32_MAX",
    "INT32_MIN",
    "ModelHostEntry",
    "ModelParsedMongoUri",
    "ModelReadPreferenceTagGroup",
    "ModelUriOption",
    "OptionValue",
]
