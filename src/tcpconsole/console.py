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
"""Interactive console module.

:class:`LineConsole` runs the read-eval-print loop: read a command from the operator,
send it to the server, wait for one reply and print it.
"""

from __future__ import annotations

__all__ = ["LineConsole"]

import logging
import sys
from typing import TextIO

from .clients.tcp import TCPNetworkClient
from .config import ClientConfig
from .exceptions import PeerClosedError
from .lowlevel._utils import exception_message

logger = logging.getLogger(__name__)


class LineConsole:
    """
    A console session bound to one TCP connection.

    Every error raised while connecting, sending, receiving or decoding ends the session:
    the message is printed with an ``Error:`` prefix, and the connection (if any) is closed.
    There is no retry.
    """

    __slots__ = ("__config", "__stdin", "__stdout")

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """
        Parameters:
            config: The client configuration. Defaults to ``ClientConfig()``.
            stdin: Where commands are read from. Defaults to :data:`sys.stdin`.
            stdout: Where prompts, replies and errors are written. Defaults to :data:`sys.stdout`.
        """
        if config is None:
            config = ClientConfig()
        self.__config: ClientConfig = config
        self.__stdin: TextIO | None = stdin
        self.__stdout: TextIO | None = stdout

    def run(self) -> None:
        """
        Connects to the server and runs the loop until the exit keyword, the end of input,
        the server closing the connection, or an error.
        """
        config = self.__config
        try:
            with self.connect() as client:
                self.print(f"Connected to {config.host}:{config.port}.")
                self.print(f"Enter commands to send to the server (type {config.exit_keyword!r} to quit).")
                self.__loop(client)
        except Exception as exc:
            logger.debug("Session aborted", exc_info=exc)
            self.print(f"Error: {exception_message(exc)}")

    def connect(self) -> TCPNetworkClient[str, str]:
        config = self.__config
        return TCPNetworkClient(
            config.address,
            config.create_serializer(),
            family=config.family,
            connect_timeout=config.connect_timeout,
            max_recv_size=config.reply_bufsize,
        )

    def __loop(self, client: TCPNetworkClient[str, str]) -> None:
        while True:
            command = self.read_command()
            if command is None or self.is_exit_command(command):
                break
            client.send_packet(command)
            try:
                reply = client.recv_packet()
            except PeerClosedError:
                self.print("Server closed the connection.")
                break
            self.print(f"Server reply: {reply}")

    def read_command(self) -> str | None:
        """
        Writes the prompt, then blocks until the operator enters a line.

        Returns:
            the line without its line ending, or :data:`None` at the end of input.
        """
        stdout = self.stdout
        stdout.write(self.__config.prompt)
        stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.removesuffix("\n").removesuffix("\r")

    def is_exit_command(self, command: str) -> bool:
        return command.casefold() == self.__config.exit_keyword.casefold()

    def print(self, message: str) -> None:
        print(message, file=self.stdout, flush=True)

    @property
    def config(self) -> ClientConfig:
        """The client configuration. Read-only attribute."""
        return self.__config

    @property
    def stdin(self) -> TextIO:
        return self.__stdin if self.__stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self.__stdout if self.__stdout is not None else sys.stdout
