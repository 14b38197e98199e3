# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""MongoDB connection string parser.

This module parses ``mongodb://`` connection strings into a frozen
ModelParsedMongoUri in a single top-to-bottom pass. The pass is split into
ordered stages, each consuming a prefix of the remaining string:

    1. scheme       ``mongodb://`` (case sensitive)
    2. userinfo     ``username:password@`` (optional)
    3. hosts        ``host[:port]`` and ``/path/to.sock`` entries, comma separated
    4. database     ``/name`` (optional)
    5. options      ``?key=value&key=value`` (optional), with
                    ``readPreferenceTags`` values parsed as tag groups

Grammar:
    uri      := "mongodb://" [ userinfo "@" ] hostlist [ "/" [ database ] ] [ "?" options ]
    userinfo := username ":" password
    hostlist := host { "," host }
    host     := sockpath | hostname [ ":" port ]
    options  := option { "&" option }
    option   := key "=" value

Escaping:
    A backslash stops the next character from acting as a separator. The
    backslash is kept in the captured text; nothing is unescaped.

Failure Policy:
    The top-level grammar is strict: any malformed stage raises a
    MongoUriError subclass and no partial result is produced. The tag group
    grammar is lenient: a tag without ``:`` is skipped with a warning.

Limitations:
    - No IPv6 bracket literals; ``[::1]:27017`` splits on the first ``:``.
    - Unknown option keys are accepted and stored as strings.
    - The ``@`` search for credentials covers the whole remainder of the
      string, including the option list.

Example:
    >>> uri = parse_mongo_uri("mongodb://a,b:27018,/tmp/x.sock,c/")
    >>> [(h.display, h.address_kind.value) for h in uri.hosts]  # doctest: +NORMALIZE_WHITESPACE
    [('a:27017', 'network_host'), ('b:27018', 'network_host'),
     ('/tmp/x.sock:27017', 'unix_domain_socket'), ('c:27017', 'network_host')]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import UUID

from mongo_uri.enums import EnumHostAddressKind, EnumOptionValueType
from mongo_uri.errors import (
    InvalidHostError,
    InvalidOptionError,
    InvalidPortError,
    InvalidSchemeError,
    InvalidUserinfoError,
    ModelUriErrorContext,
    MongoUriError,
)
from mongo_uri.models import DEFAULT_PARSER_CONFIG, ModelMongoUriParserConfig
from mongo_uri.types import (
    ModelHostEntry,
    ModelParsedMongoUri,
    ModelReadPreferenceTagGroup,
    ModelUriOption,
)
from mongo_uri.utils.util_uri_scanning import (
    is_ascii_digit,
    leading_digits,
    parse_leading_int,
    scan_to_any,
    scan_to_char,
    significant_digits,
    split_unescaped,
)

logger = logging.getLogger(__name__)

MONGODB_SCHEME = "mongodb://"

MAX_PORT = 65535
_MAX_PORT_DIGITS = len(str(MAX_PORT))

# Option keys are matched case-insensitively against these lowercase names.
INT32_OPTION_KEYS = frozenset(
    {
        "connecttimeoutms",
        "sockettimeoutms",
        "maxpoolsize",
        "minpoolsize",
        "maxidletimems",
        "waitqueuemultiple",
        "waitqueuetimeoutms",
        "wtimeoutms",
    }
)
BOOL_OPTION_KEYS = frozenset({"journal", "slaveok", "ssl"})
WRITE_CONCERN_OPTION_KEY = "w"
READ_PREFERENCE_TAGS_OPTION_KEY = "readpreferencetags"


@dataclass
class _UriScratch:
    """Stage output collected before the result is published."""

    hosts: list[ModelHostEntry] = field(default_factory=list)
    username: str | None = None
    password: str | None = None
    database: str | None = None
    options: list[ModelUriOption] = field(default_factory=list)
    tag_groups: list[ModelReadPreferenceTagGroup] = field(default_factory=list)


def _stage_context(
    context: ModelUriErrorContext,
    stage: str,
    position: int,
) -> ModelUriErrorContext:
    return context.model_copy(update={"stage": stage, "position": position})


# =============================================================================
# Coercion
# =============================================================================


def classify_option_key(key: str) -> EnumOptionValueType | None:
    """Return the coercion rule for an option key.

    Args:
        key: Option key in any case.

    Returns:
        The value type the key coerces to, or None for ``readPreferenceTags``
        which is parsed into a tag group instead of an option. The ``w`` key
        reports INT32 here; its actual type depends on the value (see
        coerce_option_value()).
    """
    lowered = key.lower()
    if lowered == READ_PREFERENCE_TAGS_OPTION_KEY:
        return None
    if lowered in INT32_OPTION_KEYS or lowered == WRITE_CONCERN_OPTION_KEY:
        return EnumOptionValueType.INT32
    if lowered in BOOL_OPTION_KEYS:
        return EnumOptionValueType.BOOL
    return EnumOptionValueType.STRING


def coerce_option_value(key: str, value: str) -> ModelUriOption:
    """Coerce a raw option value into its typed form.

    Rules (keys compared case-insensitively, stored as written):
        - Timeout and pool keys: leading decimal integer, 0 if none.
        - ``w``: integer when the value starts with ``-`` or a digit,
          otherwise the verbatim string.
        - ``journal``, ``slaveOk``, ``ssl``: True only for exactly ``true``.
        - Any other key: the verbatim string.

    Args:
        key: Option key as written.
        value: Raw option value.

    Returns:
        The typed option.

    Raises:
        ValueError: If ``key`` is ``readPreferenceTags``, which has no
            option form.
    """
    value_type = classify_option_key(key)
    if value_type is None:
        raise ValueError("readPreferenceTags values are parsed as tag groups")

    if key.lower() == WRITE_CONCERN_OPTION_KEY and not (
        value[:1] == "-" or is_ascii_digit(value[:1])
    ):
        value_type = EnumOptionValueType.STRING

    if value_type is EnumOptionValueType.INT32:
        return ModelUriOption(
            key=key,
            value=parse_leading_int(value),
            value_type=value_type,
        )
    if value_type is EnumOptionValueType.BOOL:
        return ModelUriOption(key=key, value=value == "true", value_type=value_type)
    return ModelUriOption(key=key, value=value, value_type=value_type)


# =============================================================================
# Host tokens
# =============================================================================


def parse_host_token(
    token: str,
    *,
    config: ModelMongoUriParserConfig | None = None,
    context: ModelUriErrorContext | None = None,
) -> ModelHostEntry:
    """Parse one ``hostname[:port]`` or socket path token into a host entry.

    The token is split on its first unescaped ``:``. The port text must start
    with a digit; the leading digits are read and anything after them is
    ignored.

    Empty tokens are rejected here, so ``a,,b`` and ``:27017`` fail with
    InvalidHostError. A trailing ``,`` directly before ``/``, ``?`` or the end
    of the string never reaches this function: the host loop stops at those
    characters, so ``mongodb://a,b,`` parses to two hosts.

    Args:
        token: Raw host token, escapes left in place.
        config: Parser configuration (default port, hostname limit).
        context: Error context to attach to raised errors.

    Returns:
        The host entry.

    Raises:
        InvalidPortError: If the port is missing, non-numeric, or above 65535.
        InvalidHostError: If the hostname is empty or too long.
    """
    cfg = config or DEFAULT_PARSER_CONFIG

    colon = scan_to_char(token, ":")
    if colon is not None:
        hostname = token[:colon]
        port_text = token[colon + 1 :]
        if not is_ascii_digit(port_text[:1]):
            raise InvalidPortError(
                "Port must start with a decimal digit",
                context=context,
            )
        digits = significant_digits(leading_digits(port_text))
        if len(digits) > _MAX_PORT_DIGITS:
            raise InvalidPortError(
                f"Port must be between 0 and {MAX_PORT}",
                context=context,
                digit_count=len(digits),
            )
        port = int(digits)
        if port > MAX_PORT:
            raise InvalidPortError(
                f"Port must be between 0 and {MAX_PORT}, got {port}",
                context=context,
                port=port,
            )
    else:
        hostname = token
        port = cfg.default_port

    if not hostname:
        raise InvalidHostError("Host name must not be empty", context=context)

    if len(hostname) > cfg.max_hostname_length:
        raise InvalidHostError(
            f"Host name exceeds {cfg.max_hostname_length} characters",
            context=context,
            length=len(hostname),
        )

    address_kind = (
        EnumHostAddressKind.UNIX_DOMAIN_SOCKET
        if cfg.socket_suffix in hostname
        else EnumHostAddressKind.NETWORK_HOST
    )
    return ModelHostEntry(hostname=hostname, port=port, address_kind=address_kind)


# =============================================================================
# Stages
# =============================================================================


def _parse_scheme(uri: str, context: ModelUriErrorContext) -> int:
    if not uri.startswith(MONGODB_SCHEME):
        raise InvalidSchemeError(
            f"Connection string must start with '{MONGODB_SCHEME}'",
            context=_stage_context(context, "scheme", 0),
            value="[REDACTED]",
        )
    return len(MONGODB_SCHEME)


def _parse_userinfo(
    uri: str,
    pos: int,
    scratch: _UriScratch,
    context: ModelUriErrorContext,
) -> int:
    at = scan_to_char(uri, "@", pos)
    if at is None:
        return pos

    userinfo = uri[pos:at]
    colon = scan_to_char(userinfo, ":")
    if colon is None:
        raise InvalidUserinfoError(
            "Credentials must be given as username:password",
            context=_stage_context(context, "userinfo", pos),
            value="[REDACTED]",
        )

    scratch.username = userinfo[:colon]
    scratch.password = userinfo[colon + 1 :]
    return at + 1


def _socket_path_end(uri: str, pos: int, suffix: str) -> int | None:
    """Return the end of a socket path starting at ``pos``, if there is one.

    A socket path starts with ``/`` and runs through the first occurrence of
    ``suffix``, provided no ``,`` or ``?`` appears before that occurrence.
    """
    if uri[pos : pos + 1] != "/":
        return None
    sock = uri.find(suffix, pos)
    if sock == -1:
        return None
    for separator in (",", "?"):
        found = uri.find(separator, pos)
        if found != -1 and found < sock:
            return None
    return sock + len(suffix)


def _parse_hosts(
    uri: str,
    pos: int,
    scratch: _UriScratch,
    config: ModelMongoUriParserConfig,
    context: ModelUriErrorContext,
) -> int:
    host_context = _stage_context(context, "hosts", pos)
    length = len(uri)

    while pos < length:
        sock_end = _socket_path_end(uri, pos, config.socket_suffix)
        if sock_end is not None:
            scratch.hosts.append(
                parse_host_token(uri[pos:sock_end], config=config, context=host_context)
            )
            pos = sock_end
            if uri[pos : pos + 1] == ",":
                pos += 1
                continue
            if pos < length and uri[pos] not in "/?":
                raise InvalidHostError(
                    "Unexpected character after domain socket path",
                    context=host_context,
                    offset=pos,
                )
            break

        if uri[pos] in "/?":
            break

        end = scan_to_any(uri, ",/?", pos)
        if end is None:
            scratch.hosts.append(
                parse_host_token(uri[pos:], config=config, context=host_context)
            )
            pos = length
            break

        scratch.hosts.append(
            parse_host_token(uri[pos:end], config=config, context=host_context)
        )
        if uri[end] == ",":
            pos = end + 1
            continue
        pos = end
        break

    if not scratch.hosts:
        raise InvalidHostError(
            "Connection string must name at least one host",
            context=host_context,
        )
    return pos


def _parse_database(uri: str, pos: int, scratch: _UriScratch) -> int:
    # Called with the cursor on "/".
    pos += 1
    if pos >= len(uri) or uri[pos] == "?":
        return pos

    end = scan_to_char(uri, "?", pos)
    if end is None:
        end = len(uri)
    scratch.database = uri[pos:end]
    return end


def _parse_read_preference_tags(value: str) -> ModelReadPreferenceTagGroup:
    """Parse one ``readPreferenceTags`` value into a tag group.

    Tags are ``key:value`` pairs separated by ``,``. A tag without ``:`` is
    dropped. The group is returned even if it ends up empty.
    """
    tags: list[tuple[str, str]] = []
    for index, tag in enumerate(split_unescaped(value, ",")):
        colon = scan_to_char(tag, ":")
        if colon is None:
            logger.warning(
                "Skipping read preference tag without ':' separator",
                extra={"tag_index": index},
            )
            continue
        tags.append((tag[:colon], tag[colon + 1 :]))
    return ModelReadPreferenceTagGroup(tags=tuple(tags))


def _parse_options(
    uri: str,
    pos: int,
    scratch: _UriScratch,
    context: ModelUriErrorContext,
) -> None:
    # Called with the cursor on "?".
    pos += 1
    option_context = _stage_context(context, "options", pos)

    for index, token in enumerate(split_unescaped(uri[pos:], "&")):
        eq = scan_to_char(token, "=")
        if eq is None:
            raise InvalidOptionError(
                "Option must be given as key=value",
                context=option_context,
                option_index=index,
            )

        key = token[:eq]
        value = token[eq + 1 :]
        if key.lower() == READ_PREFERENCE_TAGS_OPTION_KEY:
            scratch.tag_groups.append(_parse_read_preference_tags(value))
        else:
            scratch.options.append(coerce_option_value(key, value))


# =============================================================================
# Public API
# =============================================================================


def parse_mongo_uri(
    uri: object,
    *,
    config: ModelMongoUriParserConfig | None = None,
    correlation_id: UUID | None = None,
) -> ModelParsedMongoUri:
    """Parse a ``mongodb://`` connection string.

    Parsing is all-or-nothing: stage output is collected into a local scratch
    value and the frozen result is only built after every stage succeeded.

    Args:
        uri: The connection string (any type - validated).
        config: Parser configuration. Defaults to DEFAULT_PARSER_CONFIG.
        correlation_id: Optional correlation ID for distributed tracing.
            Propagated into any raised error. A new UUID is generated if
            ``None``.

    Returns:
        The parsed connection string.

    Raises:
        MongoUriError: If ``uri`` is not a string.
        InvalidSchemeError: If the ``mongodb://`` prefix is missing.
        InvalidUserinfoError: If credentials are present without ``:``.
        InvalidHostError: If no host is given or a host token is malformed.
        InvalidPortError: If a port is non-numeric or out of range.
        InvalidOptionError: If an option lacks ``=``.

    Example:
        >>> uri = parse_mongo_uri("mongodb://u:p@h:1234/db?ssl=true")
        >>> uri.username, uri.database, uri.hosts[0].display
        ('u', 'db', 'h:1234')
        >>> uri.get_option("ssl")
        True
    """
    cfg = config or DEFAULT_PARSER_CONFIG
    context = ModelUriErrorContext.with_correlation(
        correlation_id=correlation_id,
        operation="parse_uri",
    )

    if not isinstance(uri, str):
        raise MongoUriError(
            f"Invalid connection string type: expected str, got {type(uri).__name__}",
            context=context,
            value=type(uri).__name__,
        )

    scratch = _UriScratch()
    try:
        pos = _parse_scheme(uri, context)
        pos = _parse_userinfo(uri, pos, scratch, context)
        pos = _parse_hosts(uri, pos, scratch, cfg, context)
        if uri[pos : pos + 1] == "/":
            pos = _parse_database(uri, pos, scratch)
        if uri[pos : pos + 1] == "?":
            _parse_options(uri, pos, scratch, context)
    except MongoUriError as e:
        logger.debug(
            "Connection string rejected",
            extra={
                "error_code": e.error_code.value,
                "stage": e.context.get("stage"),
                "correlation_id": str(context.correlation_id),
            },
        )
        raise

    parsed = ModelParsedMongoUri(
        original_string=uri,
        hosts=tuple(scratch.hosts),
        username=scratch.username,
        password=scratch.password,
        database=scratch.database,
        options=tuple(scratch.options),
        read_preference_tag_groups=tuple(scratch.tag_groups),
    )

    logger.debug(
        "Connection string parsed",
        extra={
            "host_count": len(parsed.hosts),
            "option_count": len(parsed.options),
            "tag_group_count": len(parsed.read_preference_tag_groups),
            "has_credentials": parsed.username is not None,
            "correlation_id": str(context.correlation_id),
        },
    )
    return parsed


def try_parse_mongo_uri(
    uri: object,
    *,
    config: ModelMongoUriParserConfig | None = None,
    correlation_id: UUID | None = None,
) -> ModelParsedMongoUri | None:
    """Parse a connection string, returning None instead of raising.

    Only MongoUriError is converted to None; anything else propagates.
    """
    try:
        return parse_mongo_uri(uri, config=config, correlation_id=correlation_id)
    except MongoUriError:
        return None


def copy_mongo_uri(
    parsed: ModelParsedMongoUri,
    *,
    config: ModelMongoUriParserConfig | None = None,
) -> ModelParsedMongoUri:
    """Copy a parsed connection string by parsing its original text again.

    This is not a structural clone: the copy is whatever ``original_string``
    parses to under ``config``.
    """
    return parse_mongo_uri(parsed.original_string, config=config)


__all__: list[str] = [
    "BOOL_OPTION_KEYS",
    "INT32_OPTION_KEYS",
    "MONGODB_SCHEME",
    "READ_PREFERENCE_TAGS_OPTION_KEY",
    "WRITE_CONCERN_OPTION_KEY",
    "classify_option_key",
    "coerce_option_value",
    "copy_mongo_uri",
    "parse_host_token",
    "parse_mongo_uri",
    "try_parse_mongo_uri",
]
