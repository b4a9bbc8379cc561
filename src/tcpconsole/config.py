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
"""Client configuration module."""

from __future__ import annotations

__all__ = ["ClientConfig"]

import codecs
import dataclasses
import socket as _socket
from typing import TYPE_CHECKING, Any, Self

from .lowlevel import _utils, constants
from .serializers.line import CommandLineSerializer, Newline

if TYPE_CHECKING:
    import argparse

_SUPPORTED_FAMILIES: frozenset[int] = frozenset({_socket.AF_UNSPEC, _socket.AF_INET, _socket.AF_INET6})
_SUPPORTED_NEWLINES: frozenset[str] = frozenset({"LF", "CR", "CRLF"})


@dataclasses.dataclass(frozen=True, kw_only=True)
class ClientConfig:
    """
    Every tunable of the console client.
    """

    host: str = constants.DEFAULT_HOST
    """Remote host name or IP address."""

    port: int = constants.DEFAULT_PORT
    """Remote TCP port."""

    family: int = _socket.AF_UNSPEC
    """Address family used for name resolution: AF_UNSPEC (any), AF_INET or AF_INET6."""

    newline: Newline = "LF"
    """Line terminator appended to each command."""

    encoding: str = "utf-8"
    """Encoding of commands and replies."""

    reply_bufsize: int = constants.DEFAULT_REPLY_BUFSIZE
    """Size of the single read performed after each command."""

    connect_timeout: float | None = None
    """Connection timeout in seconds, or None to block."""

    exit_keyword: str = constants.DEFAULT_EXIT_KEYWORD
    """Typing this (case-insensitive) ends the session without sending anything."""

    prompt: str = constants.DEFAULT_PROMPT

    reply_errors: str = "replace"
    """Error handler for undecodable replies. With ``"strict"``, such a reply ends the session."""

    debug: bool = False
    """Attach the raw reply to decoding errors (see :attr:`.DeserializeError.error_info`)."""

    def __post_init__(self) -> None:
        if not isinstance(self.port, int) or not (0 <= self.port <= 65535):
            raise ValueError(f"Invalid port: {self.port!r}")
        if self.family not in _SUPPORTED_FAMILIES:
            raise ValueError("Only these families are supported: AF_UNSPEC, AF_INET, AF_INET6")
        if self.newline not in _SUPPORTED_NEWLINES:
            raise ValueError(f"Invalid newline: {self.newline!r}")
        if self.reply_bufsize <= 0:
            raise ValueError("reply_bufsize must be a strictly positive integer")
        connect_timeout = _utils.validate_optional_timeout_delay(self.connect_timeout, positive_check=True)
        # settimeout(0) switches the socket to non-blocking mode
        if connect_timeout == 0:
            raise ValueError("connect_timeout must be strictly positive")
        object.__setattr__(self, "connect_timeout", connect_timeout)
        try:
            codecs.lookup_error(self.reply_errors)
        except LookupError:
            raise ValueError(f"Unknown error handler: {self.reply_errors!r}") from None

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> Self:
        """
        Builds a configuration from the command line arguments parsed by :func:`tcpconsole.cli.build_parser`.

        Attributes missing from `args` keep their default value.
        """
        fields = {field.name for field in dataclasses.fields(cls)}
        options: dict[str, Any] = {name: value for name, value in vars(args).items() if name in fields}
        return cls(**options)

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)

    def create_serializer(self) -> CommandLineSerializer:
        return CommandLineSerializer(
            self.newline,
            encoding=self.encoding,
            reply_errors=self.reply_errors,
            debug=self.debug,
        )
