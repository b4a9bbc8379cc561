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
from __future__ import annotations

__all__ = [
    "check_inet_socket_family",
    "check_socket_is_connected",
    "create_connection",
    "error_from_errno",
    "exception_message",
    "exception_with_notes",
    "is_socket_connected",
    "replace_kwargs",
    "validate_optional_timeout_delay",
    "validate_timeout_delay",
]

import errno as _errno
import math
import os
import socket as _socket
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from . import constants

if TYPE_CHECKING:
    from .socket import SocketLike

_T_Exception = TypeVar("_T_Exception", bound=BaseException)


def error_from_errno(errno: int, msg: str = "{strerror}") -> OSError:
    msg = msg.format(strerror=os.strerror(errno))
    return OSError(errno, msg)


def exception_with_notes(exc: _T_Exception, notes: str | Iterable[str]) -> _T_Exception:
    if isinstance(notes, str):
        notes = (notes,)
    for note in notes:
        exc.add_note(note)
    return exc


def exception_message(exc: BaseException) -> str:
    """Text shown to the operator for `exc`: the OS error description if any, else ``str(exc)``."""
    match exc:
        case OSError(strerror=str(strerror)) if strerror:
            return strerror
        case _:
            return str(exc) or type(exc).__name__


def check_inet_socket_family(family: int) -> None:
    if family not in {_socket.AF_INET, _socket.AF_INET6}:
        raise ValueError("Only these families are supported: AF_INET, AF_INET6")


def validate_timeout_delay(delay: float, *, positive_check: bool) -> float:
    if math.isnan(delay):
        raise ValueError("Invalid delay: NaN (not a number)")
    if positive_check and delay < 0.0:
        raise ValueError("Invalid delay: negative value")
    return float(delay)


def validate_optional_timeout_delay(delay: float | None, *, positive_check: bool) -> float | None:
    match delay:
        case None:
            return None
        case _:
            return validate_timeout_delay(delay, positive_check=positive_check)


def is_socket_connected(sock: SocketLike) -> bool:
    try:
        sock.getpeername()
    except OSError as exc:
        if exc.errno not in constants.NOT_CONNECTED_SOCKET_ERRNOS:
            raise
        connected = False
    else:
        connected = True
    return connected


def check_socket_is_connected(sock: SocketLike) -> None:
    if not is_socket_connected(sock):
        raise error_from_errno(_errno.ENOTCONN)


def create_connection(
    address: tuple[str, int],
    *,
    family: int = _socket.AF_UNSPEC,
    timeout: float | None = None,
    local_address: tuple[str, int] | None = None,
) -> _socket.socket:
    """
    Connects a TCP socket to `address`, restricted to `family` if it is not :data:`socket.AF_UNSPEC`.

    Every address returned by :func:`socket.getaddrinfo` is tried in order. `timeout` only applies
    to the connection phase: the returned socket is in blocking mode.

    Raises:
        OSError: No address could be reached. If several attempts failed with different reasons,
                 the message lists all of them.
    """
    if timeout is not None and timeout <= 0:
        raise ValueError("Connect timeout must be strictly positive")
    host, port = address
    infos: list[tuple[Any, ...]] = _socket.getaddrinfo(host, port, family, _socket.SOCK_STREAM)
    if not infos:
        raise OSError(f"getaddrinfo({host!r}) returned empty list")

    errors: list[OSError] = []
    try:
        for af, socktype, proto, _, sa in infos:
            try:
                sock = _socket.socket(af, socktype, proto)
            except OSError as exc:
                # Assume it's a bad family/type/protocol combination.
                errors.append(exc)
                continue
            try:
                sock.settimeout(timeout)
                if local_address is not None:
                    sock.bind(local_address)
                sock.connect(sa)
                sock.settimeout(None)
            except OSError as exc:
                sock.close()
                errors.append(exception_with_notes(exc, f"while attempting to connect to {sa!r}"))
                continue
            except BaseException:
                sock.close()
                raise
            return sock

        if len(errors) == 1 or len({str(exc) for exc in errors}) == 1:
            raise errors[0]
        raise OSError("Multiple exceptions: {}".format(", ".join(str(exc) for exc in errors)))
    finally:
        # Break reference cycles with the raised exception's traceback.
        errors = []


def replace_kwargs(kwargs: dict[str, Any], keys: dict[str, str]) -> None:
    if not keys:
        raise ValueError("Empty key dict")
    for old_key, new_key in keys.items():
        if new_key in kwargs:
            raise ValueError(f"Cannot set {old_key!r} to {new_key!r}: {new_key!r} in dictionary")
        try:
            kwargs[new_key] = kwargs.pop(old_key)
        except KeyError:
            pass
