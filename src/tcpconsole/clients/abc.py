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
"""Client interface shared by the connection implementations."""

from __future__ import annotations

__all__ = ["AbstractNetworkClient"]

from abc import ABCMeta, abstractmethod
from types import TracebackType
from typing import Generic, Self

from .._typevars import _T_ReceivedPacket, _T_SentPacket
from ..lowlevel.socket import SocketAddress


class AbstractNetworkClient(Generic[_T_SentPacket, _T_ReceivedPacket], metaclass=ABCMeta):
    """
    A connection to one remote endpoint, owned by a single caller.

    Used as a context manager, the connection is closed when the block exits, whatever the reason::

        with client:
            client.send_packet("ping")
            reply = client.recv_packet()
    """

    __slots__ = ("__weakref__",)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None) -> None:
        self.close()

    @abstractmethod
    def is_closed(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """
        Releases the connection. Calling it again does nothing.

        Afterwards, sending and receiving raise :exc:`.ClientClosedError`.
        """
        raise NotImplementedError

    @abstractmethod
    def get_local_address(self) -> SocketAddress:
        raise NotImplementedError

    @abstractmethod
    def get_remote_address(self) -> SocketAddress:
        raise NotImplementedError

    @abstractmethod
    def send_packet(self, packet: _T_SentPacket) -> None:
        """
        Serializes `packet` and writes the whole result.

        Raises:
            ClientClosedError: :meth:`close` has been called.
            ConnectionError: the connection is broken; the caller should close the client.
            OSError: any other socket error.
        """
        raise NotImplementedError

    @abstractmethod
    def recv_packet(self) -> _T_ReceivedPacket:
        """
        Blocks until the remote end sends something, then returns it deserialized.

        Raises:
            ClientClosedError: :meth:`close` has been called.
            PeerClosedError: the remote end closed the connection.
            ConnectionError: the connection is broken; the caller should close the client.
            OSError: any other socket error.
            DeserializeError: the received bytes could not be deserialized.
        """
        raise NotImplementedError

    @abstractmethod
    def fileno(self) -> int:
        """The socket file descriptor, ``-1`` once closed."""
        raise NotImplementedError
