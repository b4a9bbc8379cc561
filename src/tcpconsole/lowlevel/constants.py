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
"""tcpconsole's constants module."""

from __future__ import annotations

__all__ = [
    "CLOSED_SOCKET_ERRNOS",
    "DEFAULT_EXIT_KEYWORD",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_PROMPT",
    "DEFAULT_REPLY_BUFSIZE",
    "NOT_CONNECTED_SOCKET_ERRNOS",
]

import errno as _errno
from typing import Final

DEFAULT_HOST: Final[str] = "localhost"

DEFAULT_PORT: Final[int] = 7878

# Buffer size for the single recv(2) done after each command
DEFAULT_REPLY_BUFSIZE: Final[int] = 1024

DEFAULT_EXIT_KEYWORD: Final[str] = "exit"

DEFAULT_PROMPT: Final[str] = "> "

# Errors that socket operations can return if the socket is closed
CLOSED_SOCKET_ERRNOS: Final[frozenset[int]] = frozenset(
    {
        # Unix
        _errno.EBADF,
        # Windows
        _errno.ENOTSOCK,
    }
)

# Errors that socket operations can return if the socket is not connected
NOT_CONNECTED_SOCKET_ERRNOS: Final[frozenset[int]] = frozenset(
    {
        # Most of the operating systems
        _errno.ENOTCONN,
        # macOS
        _errno.EINVAL,
    }
)
