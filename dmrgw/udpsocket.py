"""Non-blocking UDP sockets, address lookup and address matching."""

import errno
import logging
import select
import socket
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

_INADDR_NONE = "255.255.255.255"


class IPMatchType(Enum):
    """How much of two addresses must agree for them to match."""

    ADDRESS_AND_PORT = "address_and_port"
    ADDRESS_ONLY = "address_only"


@dataclass(frozen=True)
class SocketAddress:
    """A resolved IPv4 or IPv6 socket address."""

    family: int
    host: str
    port: int
    scope_id: int = 0

    @property
    def sockaddr(self) -> tuple:
        """The address in the form the socket module expects."""
        if self.family == socket.AF_INET6:
            return (self.host, self.port, 0, self.scope_id)
        return (self.host, self.port)

    @classmethod
    def from_sockaddr(cls, family: int, sockaddr: tuple) -> "SocketAddress":
        """Build an address from a family and a socket-module address tuple."""
        if family == socket.AF_INET6 and len(sockaddr) >= 4:
            return cls(family, sockaddr[0], sockaddr[1], sockaddr[3])
        return cls(family, sockaddr[0], sockaddr[1])


def _none_address(port: int) -> SocketAddress:
    return SocketAddress(socket.AF_INET, _INADDR_NONE, port)


def _resolve(hostname: str, port: int, family: int, flags: int) -> SocketAddress:
    infos = socket.getaddrinfo(
        hostname or None,
        str(port),
        family,
        0,
        0,
        flags | socket.AI_NUMERICSERV,
    )
    if not infos:
        raise socket.gaierror(f"no address for {hostname!r}")
    fam, _, _, _, sockaddr = infos[0]
    return SocketAddress.from_sockaddr(fam, sockaddr)


def lookup(hostname: str, port: int, family: int = socket.AF_UNSPEC) -> SocketAddress:
    """Resolve a host and port; an unresolvable host gives the IPv4 "none" address."""
    try:
        return _resolve(hostname, port, family, 0)
    except OSError:
        logger.error("Cannot find address for host %s", hostname)
        return _none_address(port)


def _packed(addr: SocketAddress) -> bytes:
    try:
        return socket.inet_pton(addr.family, addr.host)
    except (OSError, ValueError):
        return addr.host.encode()


def match(
    addr1: SocketAddress,
    addr2: SocketAddress,
    match_type: IPMatchType = IPMatchType.ADDRESS_AND_PORT,
) -> bool:
    """Whether two addresses agree on address, and on port when asked."""
    if addr1.family != addr2.family:
        return False
    if addr1.family not in (socket.AF_INET, socket.AF_INET6):
        return False
    same_address = _packed(addr1) == _packed(addr2)
    if match_type is IPMatchType.ADDRESS_AND_PORT:
        return same_address and addr1.port == addr2.port
    if match_type is IPMatchType.ADDRESS_ONLY:
        return same_address
    return False


def is_none(addr: SocketAddress) -> bool:
    """Whether the address is the IPv4 "none" address left by a failed lookup."""
    return addr.family == socket.AF_INET and _packed(addr) == _packed(
        _none_address(0)
    )


class UDPSocket:
    """A UDP socket whose reads never block."""

    def __init__(self, address: str = "", port: int = 0) -> None:
        self._local_address = address
        self._local_port = port
        self._family = socket.AF_UNSPEC
        self._sock: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def open(self, address: SocketAddress | None = None) -> None:
        """Create the socket, binding it when a local port was given.

        The family is taken from the given address, else from the local address.
        """
        if self._sock is not None:
            raise RuntimeError("socket already open")
        if address is not None:
            self._family = address.family

        try:
            local = _resolve(
                self._local_address, self._local_port, self._family, socket.AI_PASSIVE
            )
        except OSError as exc:
            logger.error("The local address is invalid - %s", self._local_address)
            raise OSError(f"invalid local address {self._local_address!r}") from exc

        self._family = local.family

        try:
            sock = socket.socket(self._family, socket.SOCK_DGRAM)
        except OSError as exc:
            logger.error("Cannot create the UDP socket, err: %s", exc.errno)
            raise

        if self._local_port > 0:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as exc:
                logger.error("Cannot set the UDP socket option, err: %s", exc.errno)
                sock.close()
                raise
            try:
                sock.bind(local.sockaddr)
            except OSError as exc:
                logger.error("Cannot bind the UDP address, err: %s", exc.errno)
                sock.close()
                raise
            logger.info("Opening UDP port on %u", self._local_port)

        self._sock = sock

    def read(self, length: int) -> tuple[bytes, SocketAddress] | None:
        """Return a waiting datagram and its sender, or None if nothing is waiting."""
        if length <= 0:
            raise ValueError("length must be positive")
        if self._sock is None:
            return None

        try:
            readable, _, _ = select.select([self._sock], [], [], 0)
        except (OSError, ValueError) as exc:
            logger.error("Error returned from UDP poll, err: %s", exc)
            raise OSError("UDP poll failed") from exc

        if not readable:
            return None

        try:
            data, sockaddr = self._sock.recvfrom(length)
        except OSError as exc:
            logger.error("Error returned from recvfrom, err: %s", exc.errno)
            if exc.errno == errno.ENOTSOCK:
                logger.info("Re-opening UDP port on %u", self._local_port)
                self.close()
                self.open()
            raise

        return data, SocketAddress.from_sockaddr(self._sock.family, sockaddr)

    def write(self, data: bytes, address: SocketAddress) -> bool:
        """Send a datagram; True only when all of it was sent."""
        if not data:
            raise ValueError("nothing to send")
        if self._sock is None:
            raise RuntimeError("socket not open")
        try:
            sent = self._sock.sendto(data, address.sockaddr)
        except OSError as exc:
            logger.error("Error returned from sendto, err: %s", exc.errno)
            return False
        return sent == len(data)

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "UDPSocket":
        if self._sock is None:
            self.open()
        return self

    def __exit__(self, *args) -> None:
        self.close()