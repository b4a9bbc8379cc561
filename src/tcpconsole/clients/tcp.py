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
"""Blocking TCP client: one ``sendall()`` per command, one ``recv()`` per reply."""

from __future__ import annotations

__all__ = ["TCPNetworkClient"]

import contextlib
import logging
import socket as _socket
import warnings
from collections.abc import Callable, Iterator
from typing import Any, final, overload

from .._typevars import _T_ReceivedPacket, _T_SentPacket
from ..exceptions import ClientClosedError, PeerClosedError
from ..lowlevel import _utils, constants
from ..lowlevel.socket import SocketAddress, new_socket_address, set_tcp_keepalive, set_tcp_nodelay
from ..serializers.abc import AbstractPacketSerializer
from .abc import AbstractNetworkClient

logger = logging.getLogger(__name__)


class TCPNetworkClient(AbstractNetworkClient[_T_SentPacket, _T_ReceivedPacket]):
    """
    A connected TCP socket and the serializer used to talk through it.

    Replies are never reassembled: :meth:`recv_packet` deserializes the bytes returned by exactly
    one ``recv()`` of at most :attr:`max_recv_size` bytes. Whatever the server sent beyond that
    stays in the kernel buffer until the next read.
    """

    __slots__ = (
        "__socket",
        "__serializer",
        "__max_recv_size",
    )

    @overload
    def __init__(
        self,
        address: tuple[str, int],
        /,
        serializer: AbstractPacketSerializer[_T_SentPacket, _T_ReceivedPacket],
        *,
        family: int = ...,
        connect_timeout: float | None = ...,
        local_address: tuple[str, int] | None = ...,
        max_recv_size: int | None = ...,
        nodelay: bool = ...,
    ) -> None: ...

    @overload
    def __init__(
        self,
        socket: _socket.socket,
        /,
        serializer: AbstractPacketSerializer[_T_SentPacket, _T_ReceivedPacket],
        *,
        max_recv_size: int | None = ...,
        nodelay: bool = ...,
    ) -> None: ...

    def __init__(
        self,
        __arg: _socket.socket | tuple[str, int],
        /,
        serializer: AbstractPacketSerializer[_T_SentPacket, _T_ReceivedPacket],
        *,
        max_recv_size: int | None = None,
        nodelay: bool = True,
        **kwargs: Any,
    ) -> None:
        """
        The first argument is either a ``(host, port)`` pair to connect to, or a socket
        which is already connected. In the latter case the client takes ownership of it.

        Connection options (address form only):
            family: :data:`socket.AF_INET` or :data:`socket.AF_INET6` to restrict name resolution.
                    Every resolved address is tried in order by default.
            connect_timeout: Maximum time in seconds to establish the connection.
                             Reads and writes are never subject to a timeout.
            local_address: ``(host, port)`` to bind to before connecting.

        Other parameters:
            serializer: Converts commands to bytes and replies back.
            max_recv_size: Size of the single read done by :meth:`recv_packet`. 1024 by default.
            nodelay: Set ``TCP_NODELAY`` so that each command leaves immediately. On by default.
        """
        super().__init__()

        if not isinstance(serializer, AbstractPacketSerializer):
            raise TypeError(f"Expected a serializer instance, got {serializer!r}")

        if max_recv_size is None:
            max_recv_size = constants.DEFAULT_REPLY_BUFSIZE
        if not isinstance(max_recv_size, int) or max_recv_size <= 0:
            raise ValueError("'max_recv_size' must be a strictly positive integer")

        socket: _socket.socket
        match __arg:
            case _socket.socket() as socket if not kwargs:
                pass
            case (str(host), int(port)):
                _utils.replace_kwargs(kwargs, {"connect_timeout": "timeout"})
                socket = _utils.create_connection((host, port), **kwargs)
            case _:
                raise TypeError("Invalid arguments")

        try:
            _utils.check_inet_socket_family(socket.family)
            _utils.check_socket_is_connected(socket)

            # Option failures are ignored.
            if nodelay:
                with contextlib.suppress(OSError):
                    set_tcp_nodelay(socket, True)
            with contextlib.suppress(OSError):
                set_tcp_keepalive(socket, True)
        except BaseException:
            socket.close()
            raise

        self.__socket: _socket.socket = socket
        self.__serializer: AbstractPacketSerializer[_T_SentPacket, _T_ReceivedPacket] = serializer
        self.__max_recv_size: int = max_recv_size

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Connected to %s from %s", self.get_remote_address(), self.get_local_address())

    def __del__(self, *, _warn: Callable[..., None] = warnings.warn) -> None:
        try:
            socket = self.__socket
        except AttributeError:
            return
        if socket.fileno() >= 0:
            _warn(f"unclosed client {self!r}", ResourceWarning, source=self)
            socket.close()

    def __repr__(self) -> str:
        try:
            return f"<{self.__class__.__name__} socket={self.__socket!r}>"
        except AttributeError:
            return f"<{self.__class__.__name__} (partially initialized)>"

    def is_closed(self) -> bool:
        return self.__socket.fileno() < 0

    def close(self) -> None:
        socket = self.__socket
        if socket.fileno() < 0:
            return
        socket.close()
        logger.debug("Connection closed")

    def send_packet(self, packet: _T_SentPacket) -> None:
        socket = self.__ensure_opened()
        data: bytes = self.__serializer.serialize(packet)
        with self.__socket_errors():
            socket.sendall(data)
        logger.debug("%d byte(s) sent", len(data))

    def recv_raw(self) -> bytes:
        """
        Does the single read of :meth:`recv_packet`, without deserializing.

        Raises:
            PeerClosedError: the read returned no data.

        Returns:
            between 1 and :attr:`max_recv_size` bytes.
        """
        socket = self.__ensure_opened()
        with self.__socket_errors():
            data: bytes = socket.recv(self.__max_recv_size)
        if not data:
            logger.debug("Remote end closed the connection")
            raise PeerClosedError("Server closed the connection.")
        logger.debug("%d byte(s) received", len(data))
        return data

    def recv_packet(self) -> _T_ReceivedPacket:
        return self.__serializer.deserialize(self.recv_raw())

    def __ensure_opened(self) -> _socket.socket:
        socket = self.__socket
        if socket.fileno() < 0:
            raise self.__closed()
        return socket

    @contextlib.contextmanager
    def __socket_errors(self) -> Iterator[None]:
        try:
            yield
        except OSError as exc:
            if exc.errno in constants.CLOSED_SOCKET_ERRNOS:
                if self.__socket.fileno() < 0:
                    raise self.__closed() from exc
                exc.add_note("The socket file descriptor was closed unexpectedly.")
            raise

    @staticmethod
    def __closed() -> ClientClosedError:
        return ClientClosedError("Closed client")

    def get_local_address(self) -> SocketAddress:
        socket = self.__ensure_opened()
        return new_socket_address(socket.getsockname(), socket.family)

    def get_remote_address(self) -> SocketAddress:
        socket = self.__ensure_opened()
        return new_socket_address(socket.getpeername(), socket.family)

    def fileno(self) -> int:
        return self.__socket.fileno()

    @property
    @final
    def socket(self) -> _socket.socket:
        """The connected socket. Read-only attribute."""
        return self.__socket

    @property
    @final
    def serializer(self) -> AbstractPacketSerializer[_T_SentPacket, _T_ReceivedPacket]:
        return self.__serializer

    @property
    @final
    def max_recv_size(self) -> int:
        """Size of the single read done per reply. Read-only attribute."""
        return self.__max_recv_size
