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
"""Command line entry point."""

from __future__ import annotations

__all__ = ["build_parser", "main"]

import argparse
import logging
import socket as _socket
from collections.abc import Sequence

from . import __version__
from .config import ClientConfig
from .console import LineConsole
from .lowlevel import constants


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcpconsole",
        description="Send each line typed to a TCP server and print its reply.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const="DEBUG",
        default="WARNING",
        help="Increase verbose level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-H",
        "--host",
        dest="host",
        default=constants.DEFAULT_HOST,
    )
    parser.add_argument(
        "-p",
        "--port",
        dest="port",
        type=int,
        default=constants.DEFAULT_PORT,
    )
    parser.add_argument(
        "--newline",
        dest="newline",
        choices=["LF", "CR", "CRLF"],
        default="LF",
        help="Line terminator appended to each command",
    )
    parser.add_argument(
        "--encoding",
        dest="encoding",
        default="utf-8",
    )
    parser.add_argument(
        "--bufsize",
        dest="reply_bufsize",
        type=int,
        default=constants.DEFAULT_REPLY_BUFSIZE,
        help="Maximum size of a reply (one read per command)",
    )
    parser.add_argument(
        "--connect-timeout",
        dest="connect_timeout",
        type=float,
        default=None,
    )
    parser.add_argument(
        "--reply-errors",
        dest="reply_errors",
        default="replace",
        help="Error handler for replies which are not valid in the chosen encoding (e.g. 'strict')",
    )

    family_parser = parser.add_mutually_exclusive_group()
    family_parser.add_argument("-4", "--ipv4", dest="family", action="store_const", const=_socket.AF_INET, help="Use IPv4 only")
    family_parser.add_argument("-6", "--ipv6", dest="family", action="store_const", const=_socket.AF_INET6, help="Use IPv6 only")
    family_parser.set_defaults(family=_socket.AF_UNSPEC)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="[ %(levelname)s ] [ %(name)s ] %(message)s")

    try:
        config = ClientConfig.from_namespace(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        LineConsole(config).run()
    except KeyboardInterrupt:
        pass
