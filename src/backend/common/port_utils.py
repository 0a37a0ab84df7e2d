# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT

"""Utilities for binding the service listener."""

import socket

# Hosts that mean "every interface"
ALL_INTERFACES = ("", "::")


class BindError(OSError):
    """Raised when the listener socket cannot be bound."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"Failed to bind listener on {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


def _listener_family(host: str) -> tuple[socket.AddressFamily, bool]:
    """Pick the address family and whether to accept IPv4 on an IPv6 socket."""
    if host in ALL_INTERFACES and socket.has_dualstack_ipv6():
        return socket.AF_INET6, True
    if ":" in host:
        return socket.AF_INET6, False
    return socket.AF_INET, False


def bind_listener(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on host:port.

    An empty host (or "::") listens on every interface: a dual-stack IPv6
    socket where the platform supports it, otherwise IPv4 0.0.0.0.

    Args:
        host: Interface to bind to, "" for all interfaces
        port: TCP port, 0 picks an ephemeral port
        backlog: Listen backlog passed to the socket

    Returns:
        Listening socket with SO_REUSEADDR set, ready to be handed to uvicorn

    Raises:
        BindError: If the address is in use or not permitted
    """
    family, dualstack = _listener_family(host)
    try:
        return socket.create_server(
            (host, port),
            family=family,
            backlog=backlog,
            dualstack_ipv6=dualstack,
        )
    except OSError as err:
        raise BindError(host, port, err.strerror or str(err)) from err
