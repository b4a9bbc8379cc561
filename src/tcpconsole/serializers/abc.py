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
"""Serializer interface: objects to bytes on the way out, bytes to objects on the way in."""

from __future__ import annotations

__all__ = ["AbstractPacketSerializer"]

from abc import ABCMeta, abstractmethod
from typing import Generic

from .._typevars import _T_ReceivedPacket, _T_SentPacket


class AbstractPacketSerializer(Generic[_T_SentPacket, _T_ReceivedPacket], metaclass=ABCMeta):
    """
    Converts what the client sends into the exact bytes written to the socket,
    and the bytes returned by one read into what the client returns.

    No framing happens here: :meth:`deserialize` gets whatever a single read returned.
    """

    __slots__ = ("__weakref__",)

    @abstractmethod
    def serialize(self, packet: _T_SentPacket, /) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def deserialize(self, data: bytes, /) -> _T_ReceivedPacket:
        """
        Raises:
            DeserializeError: `data` is not valid for this format.
        """
        raise NotImplementedError
