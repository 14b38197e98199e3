# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""mongo_uri - MongoDB connection string parsing.

Parses ``mongodb://`` connection strings (credentials, host lists with UNIX
domain sockets, database, typed options and read preference tag groups) into
frozen Pydantic models.

Example:
    >>> from mongo_uri import parse_mongo_uri
    >>> uri = parse_mongo_uri("mongodb://db1,db2:27018/app?w=majority")
    >>> uri.get_option("w")
    'majority'
"""

from mongo_uri.enums import EnumHostAddressKind, EnumOptionValueType, EnumUriErrorCode
from mongo_uri.errors import (
    InvalidHostError,
    InvalidOptionError,
    InvalidPortError,
    InvalidSchemeError,
    InvalidUserinfoError,
    ModelUriErrorContext,
    MongoUriError,
)
from mongo_uri.models import ModelMongoUriParserConfig
from mongo_uri.types import (
    ModelHostEntry,
    ModelParsedMongoUri,
    ModelReadPreferenceTagGroup,
    ModelUriOption,
)
from mongo_uri.utils import (
    copy_mongo_uri,
    parse_mongo_uri,
    sanitize_mongo_uri,
    try_parse_mongo_uri,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "EnumHostAddressKind",
    "EnumOptionValueType",
    "EnumUriErrorCode",
    "InvalidHostError",
    "InvalidOptionError",
    "InvalidPortError",
    "InvalidSchemeError",
    "InvalidUserinfoError",
    "ModelHostEntry",
    "ModelMongoUriParserConfig",
    "ModelParsedMongoUri",
    "ModelReadPreferenceTagGroup",
    "ModelUriErrorContext",
    "ModelUriOption",
    "MongoUriError",
    "copy_mongo_uri",
    "parse_mongo_uri",
    "sanitize_mongo_uri",
    "try_parse_mongo_uri",
]
