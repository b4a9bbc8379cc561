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
"""Command line packet serializer module."""

from __future__ import annotations

__all__ = ["CommandLineSerializer", "Newline"]

from typing import Literal, TypeAlias, assert_never, final

from ..exceptions import DeserializeError
from .abc import AbstractPacketSerializer

Newline: TypeAlias = Literal["LF", "CR", "CRLF"]


class CommandLineSerializer(AbstractPacketSerializer[str, str]):
    """
    A :term:`serializer` for text commands terminated by a newline sequence.

    Replies are not framed: :meth:`deserialize` decodes whatever bytes it is given.
    """

    __slots__ = (
        "__separator",
        "__encoding",
        "__unicode_errors",
        "__reply_errors",
        "__debug",
    )

    def __init__(
        self,
        newline: Newline = "LF",
        *,
        encoding: str = "utf-8",
        unicode_errors: str = "strict",
        reply_errors: str = "replace",
        debug: bool = False,
    ) -> None:
        r"""
        Parameters:
            newline: Terminator appended to every command: ``"LF"`` (``\n``, the default),
                     ``"CR"`` (``\r``) or ``"CRLF"`` (``\r\n``).
            encoding: Codec for commands and replies.
            unicode_errors: Error handler used when a command cannot be encoded.
            reply_errors: Error handler used when a reply cannot be decoded. With the default
                          ``"replace"``, invalid or truncated sequences become U+FFFD.
            debug: Attach the offending bytes to :exc:`.DeserializeError` as ``error_info``.
        """
        separator: bytes
        match newline:
            case "LF":
                separator = b"\n"
            case "CR":
                separator = b"\r"
            case "CRLF":
                separator = b"\r\n"
            case _:
                assert_never(newline)
        super().__init__()
        self.__separator: bytes = separator
        self.__encoding: str = encoding
        self.__unicode_errors: str = unicode_errors
        self.__reply_errors: str = reply_errors
        self.__debug: bool = bool(debug)

    @final
    def serialize(self, packet: str) -> bytes:
        r"""
        Encodes the given command and appends `separator`.

        The separator is always appended, even to an empty command.

        Example:
            >>> s = CommandLineSerializer()
            >>> s.serialize("ping")
            b'ping\n'
            >>> CommandLineSerializer("CR").serialize("ping")
            b'ping\r'

        Raises:
            UnicodeEncodeError: `packet` cannot be encoded and `unicode_errors` is ``"strict"``.
        """
        return bytes(packet, self.__encoding, self.__unicode_errors) + self.__separator

    @final
    def deserialize(self, data: bytes) -> str:
        r"""
        Decodes `data` and returns the string as is (trailing newlines included).

        Example:
            >>> s = CommandLineSerializer()
            >>> s.deserialize(b"pong\n")
            'pong\n'
            >>> s.deserialize(b"caf\xc3")
            'caf�'

        Raises:
            DeserializeError: `data` cannot be decoded with `reply_errors` (never the case with ``"replace"``).
        """
        try:
            return str(data, self.__encoding, self.__reply_errors)
        except UnicodeError as exc:
            msg = str(exc)
            if self.__debug:
                raise DeserializeError(msg, error_info={"data": data}) from exc
            raise DeserializeError(msg) from exc
        finally:
            del data

    @property
    @final
    def separator(self) -> bytes:
        """The encoded terminator. Read-only attribute."""
        return self.__separator

    @property
    @final
    def debug(self) -> bool:
        return self.__debug

    @property
    @final
    def encoding(self) -> str:
        return self.__encoding

    @property
    @final
    def unicode_errors(self) -> str:
        return self.__unicode_errors

    @property
    @final
    def reply_errors(self) -> str:
        return self.__reply_errors
