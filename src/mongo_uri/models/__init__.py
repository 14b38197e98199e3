# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration models for the mongo_uri package."""

from mongo_uri.models.model_mongo_uri_parser_config import (
    DEFAULT_ENV_PREFIX,
    DEFAULT_MAX_HOSTNAME_LENGTH,
    DEFAULT_PARSER_CONFIG,
    ModelMongoUriParserConfig,
)

__all__: list[str] = [
    "DEFAULT_ENV_PREFIX",
    "DEFAULT_MAX_HOSTNAME_LENGTH",
    "DEFAULT_PARSER_CONFIG",
    "ModelMongoUriParserConfig",
]
