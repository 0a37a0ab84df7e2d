# SPDX-FileCopyrightText: 2025 robot-visual-perception
#
# SPDX-License-Identifier: MIT
import socket

import pytest

from common.config import config
from common.port_utils import BindError, bind_listener

requires_dualstack = pytest.mark.skipif(
    not socket.has_dualstack_ipv6(), reason="dual-stack IPv6 unavailable"
)


def test_bind_listener_returns_listening_socket() -> None:
    sock = bind_listener("127.0.0.1", 0)
    try:
        host, port = sock.getsockname()
        assert host == "127.0.0.1"
        assert port > 0
        assert sock.getsockopt(socket.SOL_SOCKET, socket.SO_ACCEPTCONN) == 1
        assert sock.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0
    finally:
        sock.close()


def test_bind_listener_raises_bind_error_when_port_taken() -> None:
    occupier = bind_listener("127.0.0.1", 0)
    port = occupier.getsockname()[1]
    try:
        with pytest.raises(BindError) as exc_info:
            bind_listener("127.0.0.1", port)
    finally:
        occupier.close()

    err = exc_info.value
    assert isinstance(err, OSError)
    assert err.host == "127.0.0.1"
    assert err.port == port
    assert str(err).startswith(f"Failed to bind listener on 127.0.0.1:{port}: ")
    assert isinstance(err.__cause__, OSError)


def test_bind_listener_rejects_bad_host() -> None:
    with pytest.raises(BindError):
        bind_listener("256.0.0.1", 0)


@requires_dualstack
def test_all_interfaces_accepts_ipv4_and_ipv6() -> None:
    sock = bind_listener(config.HOST, 0)
    port = sock.getsockname()[1]
    try:
        assert sock.family == socket.AF_INET6
        for address in ("::1", "127.0.0.1"):
            with socket.create_connection((address, port), timeout=5):
                pass
    finally:
        sock.close()


@requires_dualstack
def test_all_interfaces_fails_when_ipv6_side_taken() -> None:
    occupier = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
    occupier.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 1)
    occupier.bind(("::", 0))
    occupier.listen()
    port = occupier.getsockname()[1]
    try:
        with pytest.raises(BindError):
            bind_listener(config.HOST, port)
    finally:
        occupier.close()


def test_all_interfaces_fails_when_ipv4_side_taken() -> None:
    occupier = bind_listener("0.0.0.0", 0)
    port = occupier.getsockname()[1]
    try:
        with pytest.raises(BindError):
            bind_listener(config.HOST, port)
    finally:
        occupier.close()
