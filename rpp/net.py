"""IPv4 addresses and a non-blocking UDP socket."""

from __future__ import annotations

import socket
from typing import Any

_DEFAULT_RECV_SIZE = 65535


class Address:
    """IPv4 host and port."""

    __slots__ = ("host", "port")

    def __init__(self, host: str, port: int) -> None:
        if not isinstance(port, int) or not 0 <= port <= 0xFFFF:
            raise ValueError(f"invalid port {port!r}")
        try:
            socket.inet_pton(socket.AF_INET, host)
        except (OSError, TypeError) as exc:
            raise ValueError(f"invalid address {host!r}") from exc
        self.host = host
        self.port = port

    @classmethod
    def any_interface(cls, port: int) -> Address:
        """Address matching every local interface on ``port``."""
        return cls("0.0.0.0", port)

    def _sockaddr(self) -> tuple[str, int]:
        return (self.host, self.port)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return (self.host, self.port) == (other.host, other.port)

    def __hash__(self) -> int:
        return hash((self.host, self.port))

    def __repr__(self) -> str:
        return f"Address({self.host!r}, {self.port})"

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class Udp:
    """Non-blocking IPv4 UDP socket."""

    def __init__(self) -> None:
        self._socket: socket.socket | None = socket.socket(
            socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP
        )
        try:
            self._socket.setblocking(False)
        except OSError:
            self._socket.close()
            self._socket = None
            raise

    def _sock(self) -> socket.socket:
        if self._socket is None:
            raise ValueError("socket is closed")
        return self._socket

    def bind(self, address: Address) -> None:
        """Bind to a local address; raises OSError on failure."""
        self._sock().bind(address._sockaddr())

    def recv(self, size: int = _DEFAULT_RECV_SIZE) -> tuple[bytes, Address] | None:
        """Next datagram and its sender, or None when nothing is waiting."""
        try:
            data, (host, port) = self._sock().recvfrom(size)[:2]
        except OSError:
            return None
        return data, Address(host, port)

    def send(self, address: Address, data: bytes | bytearray | memoryview) -> int:
        """Send a datagram and return the number of bytes sent; raises OSError on failure."""
        return self._sock().sendto(bytes(data), address._sockaddr())

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> Udp:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_socket", None) is not None:
            self.close()