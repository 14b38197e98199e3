# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection String Parser Configuration Model.

This module provides the Pydantic configuration model for the connection
string parser, with an optional environment-variable override helper.

Environment Variables (with the default ``MONGO_URI_PARSER`` prefix):
    MONGO_URI_PARSER_DEFAULT_PORT: Port assigned to hosts written without one
    MONGO_URI_PARSER_MAX_HOSTNAME_LENGTH: Longest accepted hostname
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "MONGO_URI_PARSER"

# Host name buffer of the reference client is 256 bytes including the
# terminator.
DEFAULT_MAX_HOSTNAME_LENGTH = 255


class ModelMongoUriParserConfig(BaseModel):
    """Configuration for parse_mongo_uri().

    Attributes:
        default_port: Port used for host tokens without ``:port``.
        max_hostname_length: Hostnames longer than this are rejected.
        socket_suffix: Marker that identifies a domain socket path.

    Example:
        >>> config = ModelMongoUriParserConfig(default_port=27018)
        >>> parse_mongo_uri("mongodb://db", config=config).hosts[0].port
        27018
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_port: int = Field(
        default=27017,
        ge=0,
        le=65535,
        description="Port assigned to hosts written without one.",
    )
    max_hostname_length: int = Field(
        default=DEFAULT_MAX_HOSTNAME_LENGTH,
        ge=1,
        description="Longest accepted hostname, in characters.",
    )
    socket_suffix: str = Field(
        default=".sock",
        min_length=1,
        description="Substring that marks a hostname as a domain socket path.",
    )

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> ModelMongoUriParserConfig:
        """Build a config, overriding defaults from ``{prefix}_*`` variables.

        Unset or empty variables keep their defaults. Values are validated by
        the model, so a malformed value raises ``pydantic.ValidationError``.

        Args:
            prefix: Environment variable prefix.

        Returns:
            A new frozen configuration.
        """
        overrides: dict[str, str] = {}
        for field_name in ("default_port", "max_hostname_length"):
            env_name = f"{prefix}_{field_name.upper()}"
            env_value = os.environ.get(env_name)
            if env_value:
                overrides[field_name] = env_value.strip()

        if overrides:
            logger.debug(
                "Parser configuration overridden from environment",
                extra={"prefix": prefix, "fields": sorted(overrides)},
            )

        return cls.model_validate(overrides)


DEFAULT_PARSER_CONFIG = ModelMongoUriParserConfig()


__all__ = [
    "DEFAULT_ENV_PREFIX",
    "DEFAULT_MAX_HOSTNAME_LENGTH",
    "DEFAULT_PARSER_CONFIG",
    "ModelMongoUriParserConfig",
]
