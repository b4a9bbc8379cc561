# Copyright 2021-2025, Francis Clairicia-Rose-Claire-Josephine
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
"""Socket addresses and TCP socket options."""

from __future__ import annotations

__all__ = [
    "IPv4SocketAddress",
    "IPv6SocketAddress",
    "SocketAddress",
    "SocketLike",
    "new_socket_address",
    "set_tcp_keepalive",
    "set_tcp_nodelay",
]

import socket as _socket
from typing import TYPE_CHECKING, Any, Literal, NamedTuple, Protocol, TypeAlias, overload

if TYPE_CHECKING:
    from socket import _RetAddress


class IPv4SocketAddress(NamedTuple):
    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port:d}"


class IPv6SocketAddress(NamedTuple):
    host: str
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    def __str__(self) -> str:
        return f"[{self.host}]:{self.port:d}"


SocketAddress: TypeAlias = IPv4SocketAddress | IPv6SocketAddress


@overload
def new_socket_address(addr: tuple[str, int], family: Literal[_socket.AddressFamily.AF_INET]) -> IPv4SocketAddress: ...


@overload
def new_socket_address(
    addr: tuple[str, int] | tuple[str, int, int, int], family: Literal[_socket.AddressFamily.AF_INET6]
) -> IPv6SocketAddress: ...


@overload
def new_socket_address(addr: tuple[Any, ...], family: int) -> SocketAddress: ...


def new_socket_address(addr: tuple[Any, ...], family: int) -> SocketAddress:
    """
    Wraps an address returned by :meth:`socket.socket.getsockname` or :meth:`socket.socket.getpeername`.

    Example:
        >>> import socket
        >>> new_socket_address(("127.0.0.1", 7878), socket.AF_INET)
        IPv4SocketAddress(host='127.0.0.1', port=7878)
        >>> print(new_socket_address(("::1", 7878, 0, 0), socket.AF_INET6))
        [::1]:7878

    Raises:
        ValueError: `family` is neither :data:`~socket.AF_INET` nor :data:`~socket.AF_INET6`.
    """
    match family:
        case _socket.AddressFamily.AF_INET:
            return IPv4SocketAddress(*addr)
        case _socket.AddressFamily.AF_INET6:
            return IPv6SocketAddress(*addr)
        case _:
            raise ValueError(f"Unsupported address family {family!r}")


class SocketLike(Protocol):
    """The subset of :class:`socket.socket` used by the client helpers."""

    @property
    def family(self) -> int: ...

    def fileno(self) -> int: ...

    def getpeername(self) -> _RetAddress: ...

    def getsockname(self) -> _RetAddress: ...

    def setsockopt(self, level: int, optname: int, value: int | bytes, /) -> None: ...


def _set_flag(sock: SocketLike, level: int, option_name: str, state: bool) -> None:
    # Some platforms do not define every option.
    option: int | None = getattr(_socket, option_name, None)
    if option is None:
        return
    sock.setsockopt(level, option, bool(state))


def set_tcp_nodelay(sock: SocketLike, state: bool) -> None:
    """
    Sets ``TCP_NODELAY``: if `state` is :data:`True`, each write is sent on the wire immediately.

    Does nothing if the platform does not define the option.
    """
    _set_flag(sock, _socket.IPPROTO_TCP, "TCP_NODELAY", state)


def set_tcp_keepalive(sock: SocketLike, state: bool) -> None:
    """
    Sets ``SO_KEEPALIVE``. Does nothing if the platform does not define the option.
    """
    _set_flag(sock, _socket.SOL_SOCKET, "SO_KEEPALIVE", state)
