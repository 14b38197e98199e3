# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Strongly-typed connection string parse result models.

This module provides the Pydantic models produced by parsing a
``mongodb://`` connection string: the host entries, the typed option
multimap, the read preference tag groups, and the aggregate result.

Example:
    >>> from mongo_uri import parse_mongo_uri
    >>> uri = parse_mongo_uri("mongodb://u:p@db1,db2:27018/app?ssl=true")
    >>> [host.display for host in uri.hosts]
    ['db1:27017', 'db2:27018']
    >>> uri.get_option("SSL")
    True

Note:
    All models are frozen. A parsed connection string is built in one pass
    and never mutated afterwards, so it may be shared across threads freely.
    Sequences are stored as tuples for the same reason.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    computed_field,
    model_validator,
)

from mongo_uri.enums import EnumHostAddressKind, EnumOptionValueType

if TYPE_CHECKING:
    from mongo_uri.models import ModelMongoUriParserConfig

DEFAULT_PORT = 27017

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

OptionValue = StrictInt | StrictBool | StrictStr


class ModelHostEntry(BaseModel):
    """One endpoint of the connection string host list.

    Attributes:
        hostname: Raw hostname text, or the filesystem path of a domain socket.
            Escape backslashes are kept as written.
        port: TCP port (0-65535). Defaults to 27017 when omitted.
        address_kind: Whether the entry is a network host or a domain socket.

    Example:
        >>> host = ModelHostEntry(hostname="db.example.com", port=27018)
        >>> host.display
        'db.example.com:27018'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hostname: str = Field(
        min_length=1,
        description="Raw hostname or domain socket path.",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        ge=0,
        le=65535,
        description="Port number (16-bit unsigned).",
    )
    address_kind: EnumHostAddressKind = Field(
        default=EnumHostAddressKind.NETWORK_HOST,
        description="Network host or UNIX domain socket.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display(self) -> str:
        """Presentation form ``{hostname}:{port}``."""
        return f"{self.hostname}:{self.port}"

    @property
    def is_unix_domain_socket(self) -> bool:
        return self.address_kind is EnumHostAddressKind.UNIX_DOMAIN_SOCKET

    def __str__(self) -> str:
        return self.display


class ModelUriOption(BaseModel):
    """A single typed ``key=value`` option.

    The key is stored exactly as written; only the coercion rule was chosen
    by comparing it case-insensitively.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(description="Option key, case preserved.")
    value: OptionValue = Field(description="Coerced option value.")
    value_type: EnumOptionValueType = Field(
        description="Coercion rule applied to the raw value.",
    )

    @model_validator(mode="after")
    def validate_value_matches_type(self) -> ModelUriOption:
        if self.value_type is EnumOptionValueType.BOOL:
            if not isinstance(self.value, bool):
                raise ValueError("BOOL option requires a bool value")
        elif self.value_type is EnumOptionValueType.INT32:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError("INT32 option requires an int value")
            if not INT32_MIN <= self.value <= INT32_MAX:
                raise ValueError("INT32 option value out of range")
        elif not isinstance(self.value, str):
            raise ValueError("STRING option requires a str value")
        return self


class ModelReadPreferenceTagGroup(BaseModel):
    """Ordered tags produced by one ``readPreferenceTags`` option.

    Tags are kept as ``(key, value)`` pairs in the order they were written.

    Example:
        >>> group = ModelReadPreferenceTagGroup(tags=(("dc", "ny"), ("rack", "1")))
        >>> group.to_dict()
        {'dc': 'ny', 'rack': '1'}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tags: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Ordered (key, value) tag pairs.",
    )

    def to_dict(self) -> dict[str, str]:
        return dict(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.tags)


class ModelParsedMongoUri(BaseModel):
    """Strongly-typed parse result of a ``mongodb://`` connection string.

    Attributes:
        original_string: The exact input, kept verbatim for display and
            re-parsing. Excluded from ``repr()`` since it may hold credentials.
        hosts: Host entries in order of appearance. Never empty; duplicates
            are preserved.
        username: Username, or None when no credentials were given.
        password: Password, or None when no credentials were given. Excluded
            from ``repr()``.
        database: Database name, or None.
        options: Typed options in order of appearance. Duplicate keys are kept
            as separate entries.
        read_preference_tag_groups: One group per ``readPreferenceTags``
            occurrence, in order.

    Note:
        ``str()`` of this model returns the connection string with the
        password masked. Use ``original_string`` when the raw text is needed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    original_string: str = Field(
        repr=False,
        description="Exact input connection string. May contain credentials.",
    )
    hosts: tuple[ModelHostEntry, ...] = Field(
        min_length=1,
        description="Host entries in order of appearance.",
    )
    username: str | None = Field(default=None, description="Username.")
    password: str | None = Field(
        default=None,
        repr=False,
        description="Password. Handle with care.",
    )
    database: str | None = Field(default=None, description="Database name.")
    options: tuple[ModelUriOption, ...] = Field(
        default=(),
        description="Typed options; duplicate keys preserved.",
    )
    read_preference_tag_groups: tuple[ModelReadPreferenceTagGroup, ...] = Field(
        default=(),
        description="Read preference tag groups in order of appearance.",
    )

    @model_validator(mode="after")
    def validate_credentials(self) -> ModelParsedMongoUri:
        if self.password is not None and self.username is None:
            raise ValueError("password requires username")
        return self

    def get_options(self, key: str) -> list[OptionValue]:
        """Return every value stored under ``key``, compared case-insensitively.

        Args:
            key: Option key in any case.

        Returns:
            Values in order of appearance; empty if the key is absent.
        """
        wanted = key.lower()
        return [option.value for option in self.options if option.key.lower() == wanted]

    def get_option(
        self,
        key: str,
        default: OptionValue | None = None,
    ) -> OptionValue | None:
        """Return the first value stored under ``key``, or ``default``."""
        values = self.get_options(key)
        return values[0] if values else default

    def options_as_dict(self) -> dict[str, OptionValue]:
        """Map each key (as written) to its first value.

        This is a lookup convenience only; ``options`` keeps every entry.
        """
        result: dict[str, OptionValue] = {}
        for option in self.options:
            result.setdefault(option.key, option.value)
        return result

    @property
    def redacted_string(self) -> str:
        """The connection string with its password masked."""
        # Lazy import to avoid circular dependency (types -> utils -> types)
        from mongo_uri.utils.util_uri_sanitization import sanitize_mongo_uri

        return sanitize_mongo_uri(self.original_string)

    def reparse(
        self,
        *,
        config: ModelMongoUriParserConfig | None = None,
    ) -> ModelParsedMongoUri:
        """Copy this value by parsing ``original_string`` again."""
        from mongo_uri.utils.util_uri_parser import copy_mongo_uri

        return copy_mongo_uri(self, config=config)

    def __str__(self) -> str:
        return self.redacted_string


__all__ = [
    "DEFAULT_PORT",
    "INT32_MAX",
    "INT32_MIN",
    "ModelHostEntry",
    "ModelParsedMongoUri",
    "ModelReadPreferenceTagGroup",
    "ModelUriOption",
    "OptionValue",
]
