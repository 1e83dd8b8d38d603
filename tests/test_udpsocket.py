import socket
import time
from unittest import mock

import pytest

from dmrgw.udpsocket import (
    IPMatchType,
    SocketAddress,
    UDPSocket,
    is_none,
    lookup,
    match,
)


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _read_wait(sock: UDPSocket, length: int = 100, timeout: float = 2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        result = sock.read(length)
        if result is not None:
            return result
        time.sleep(0.01)
    return None


def test_lookup_numeric_ipv4():
    addr = lookup("127.0.0.1", 1234)
    assert addr.family == socket.AF_INET
    assert addr.host == "127.0.0.1"
    assert addr.port == 1234
    assert not is_none(addr)


def test_lookup_failure_gives_none_address():
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("fail")):
        addr = lookup("no.such.host", 62031)
    assert is_none(addr)
    assert addr.port == 62031
    assert addr.family == socket.AF_INET


def test_is_none_only_for_ipv4_broadcast():
    assert is_none(SocketAddress(socket.AF_INET, "255.255.255.255", 1))
    assert not is_none(SocketAddress(socket.AF_INET, "127.0.0.1", 1))
    assert not is_none(SocketAddress(socket.AF_INET6, "::1", 1))


def test_match_address_and_port():
    a = SocketAddress(socket.AF_INET, "10.0.0.1", 100)
    b = SocketAddress(socket.AF_INET, "10.0.0.1", 100)
    c = SocketAddress(socket.AF_INET, "10.0.0.1", 200)
    assert match(a, b)
    assert not match(a, c)
    assert not match(a, c, IPMatchType.ADDRESS_AND_PORT)


def test_match_address_only_ignores_port():
    a = SocketAddress(socket.AF_INET, "10.0.0.1", 100)
    c = SocketAddress(socket.AF_INET, "10.0.0.1", 200)
    d = SocketAddress(socket.AF_INET, "10.0.0.2", 100)
    assert match(a, c, IPMatchType.ADDRESS_ONLY)
    assert not match(a, d, IPMatchType.ADDRESS_ONLY)


def test_match_ipv6_compares_binary_form():
    a = SocketAddress(socket.AF_INET6, "::1", 5)
    b = SocketAddress(socket.AF_INET6, "0:0:0:0:0:0:0:1", 5)
    assert match(a, b)
    assert match(a, b, IPMatchType.ADDRESS_ONLY)


def test_match_different_families():
    a = SocketAddress(socket.AF_INET, "127.0.0.1", 5)
    b = SocketAddress(socket.AF_INET6, "::1", 5)
    assert not match(a, b)
    assert not match(a, b, IPMatchType.ADDRESS_ONLY)


def test_sockaddr_round_trip():
    addr = SocketAddress(socket.AF_INET6, "::1", 7, 3)
    assert SocketAddress.from_sockaddr(addr.family, addr.sockaddr) == addr
    v4 = SocketAddress(socket.AF_INET, "127.0.0.1", 7)
    assert v4.sockaddr == ("127.0.0.1", 7)


def test_read_unopened_returns_none():
    assert UDPSocket("127.0.0.1", 0).read(10) is None


def test_write_unopened_raises():
    sock = UDPSocket("127.0.0.1", 0)
    with pytest.raises(RuntimeError):
        sock.write(b"x", lookup("127.0.0.1", 9))


def test_write_empty_raises():
    with UDPSocket("127.0.0.1", 0) as sock:
        with pytest.raises(ValueError):
            sock.write(b"", lookup("127.0.0.1", 9))


def test_open_twice_raises():
    sock = UDPSocket("127.0.0.1", 0)
    sock.open()
    try:
        with pytest.raises(RuntimeError):
            sock.open()
    finally:
        sock.close()


def test_open_with_invalid_local_address_raises():
    sock = UDPSocket("bad", 0)
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror("fail")):
        with pytest.raises(OSError):
            sock.open()
    assert not sock.is_open


def test_send_and_receive_round_trip():
    port = _free_port()
    with UDPSocket("127.0.0.1", port) as server, UDPSocket("127.0.0.1", 0) as client:
        target = lookup("127.0.0.1", port)
        assert client.write(b"DMRD-payload", target)
        received = _read_wait(server)
        assert received is not None
        data, sender = received
        assert data == b"DMRD-payload"
        assert sender.host == "127.0.0.1"

        assert server.write(b"reply", sender)
        back = _read_wait(client)
        assert back is not None
        assert back[0] == b"reply"
        assert match(back[1], target)


def test_read_with_nothing_waiting_returns_none():
    port = _free_port()
    with UDPSocket("127.0.0.1", port) as server:
        assert server.read(50) is None


def test_open_with_address_sets_family():
    sock = UDPSocket(port=0)
    sock.open(lookup("127.0.0.1", 9))
    try:
        assert sock.is_open
        assert sock.write(b"ping", lookup("127.0.0.1", _free_port()))
    finally:
        sock.close()
    assert not sock.is_open


def test_context_manager_closes():
    with UDPSocket("127.0.0.1", 0) as sock:
        assert sock.is_open
    assert not sock.is_open
    assert sock.read(10) is None