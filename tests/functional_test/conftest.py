from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import ExitStack
from socket import AF_INET, AF_INET6, SOCK_STREAM, has_ipv6 as HAS_IPV6, socket as Socket
from typing import Any

import pytest

from .server import RecordingTCPServer

_FAMILY_TO_LOCALHOST: dict[int, str] = {
    AF_INET: "127.0.0.1",
    AF_INET6: "::1",
}

_SUPPORTED_FAMILIES = tuple(_FAMILY_TO_LOCALHOST)


@pytest.fixture(params=_SUPPORTED_FAMILIES, ids=lambda f: str(getattr(f, "name", f)))
def socket_family(request: Any) -> int:
    return request.param


@pytest.fixture
def localhost_ip(socket_family: int) -> str:
    return _FAMILY_TO_LOCALHOST[socket_family]


@pytest.fixture
def tcp_socket_factory(socket_family: int) -> Iterator[Callable[[], Socket]]:
    if not HAS_IPV6 and socket_family == AF_INET6:
        pytest.skip("socket.has_ipv6 is False")

    socket_stack = ExitStack()

    def tcp_socket_factory() -> Socket:
        return socket_stack.enter_context(Socket(socket_family, SOCK_STREAM))

    with socket_stack:
        yield tcp_socket_factory


# Connected pair without a thread: the client connects in non-blocking mode, then the listener accepts.
@pytest.fixture
def inet_socket_pair(localhost_ip: str, tcp_socket_factory: Callable[[], Socket]) -> Iterator[tuple[Socket, Socket]]:
    lsock = tcp_socket_factory()
    try:
        lsock.bind((localhost_ip, 0))
        lsock.listen()
        # On IPv6, ignore flow_info and scope_id
        addr, port = lsock.getsockname()[:2]
        csock = tcp_socket_factory()
        try:
            csock.setblocking(False)
            try:
                csock.connect((addr, port))
            except (BlockingIOError, InterruptedError):
                pass
            csock.setblocking(True)
            ssock, _ = lsock.accept()
        except BaseException:
            csock.close()
            raise
    finally:
        lsock.close()
    with ssock:  # csock will be closed later by tcp_socket_factory() teardown
        yield ssock, csock


@pytest.fixture
def server(localhost_ip: str, socket_family: int) -> Iterator[RecordingTCPServer]:
    if not HAS_IPV6 and socket_family == AF_INET6:
        pytest.skip("socket.has_ipv6 is False")

    with RecordingTCPServer((localhost_ip, 0), socket_family) as server:
        server_thread = threading.Thread(target=server.serve_forever, daemon=True)
        server_thread.start()
        yield server
        server.shutdown()
        server_thread.join()
