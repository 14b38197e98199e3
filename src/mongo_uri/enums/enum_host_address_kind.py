# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host Address Kind Enumeration.

Defines how a host entry of a connection string is reached. The kind is
derived from the hostname text alone: a hostname containing ``.sock`` is a
filesystem path to a UNIX domain socket, anything else is a network host.
"""

from enum import Enum


class EnumHostAddressKind(str, Enum):
    """Address kinds for connection string host entries.

    Attributes:
        NETWORK_HOST: A network ``hostname:port`` endpoint. No distinction is
            made between DNS names and IPv4/IPv6 literals.
        UNIX_DOMAIN_SOCKET: A filesystem path to a local domain socket.
    """

    NETWORK_HOST = "network_host"
    UNIX_DOMAIN_SOCKET = "unix_domain_socket"


__all__ = ["EnumHostAddressKind"]
