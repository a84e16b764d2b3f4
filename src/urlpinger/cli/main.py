from __future__ import annotations

"""
url-pinger, repeated HTTP(S) latency probing for a single URL.
Copyright (C) 2025  Theori Inc.

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""url-pinger CLI."""

import argparse
import logging
import sys

from ..config import PingerConfig
from ..errors import ProbeError, error_category_to_reason
from ..log import DEFAULT_LOG_LEVEL, setup_logging
from ..runtime import UrlPinger
from ..version import __version__

PROG = "url-pinger"
EXAMPLES = (
    f"{PROG} https://www.google.com",
    f"{PROG} -delay 2 https://www.google.com",
)

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}: expected an integer") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}: must not be negative")
    return parsed


def _non_negative_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}: expected a number") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"invalid value {value!r}: must not be negative")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [OPTIONS] URL",
        description="Repeatedly GET a URL and print status, latency and selected response headers.",
        epilog="***If you do not specify the protocol in the URL, we default to HTTPS",
        allow_abbrev=False,
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="Target URL to probe")
    parser.add_argument("-example", "--example", action="store_true", help="Print example usage")
    parser.add_argument(
        "-usehttp",
        "--usehttp",
        dest="use_http",
        action="store_true",
        help="Default to HTTP instead of HTTPS",
    )
    parser.add_argument(
        "-delay",
        "--delay",
        type=_non_negative_int,
        default=0,
        help="The time between in requests, in seconds",
    )
    parser.add_argument(
        "-responseHeaders",
        "--responseHeaders",
        dest="response_headers",
        default="",
        help="Comma delimited list of response headers to return",
    )
    parser.add_argument(
        "-timeout",
        "--timeout",
        type=_non_negative_float,
        default=0.0,
        help="Per-request timeout in seconds (0 waits indefinitely)",
    )
    parser.add_argument(
        "-loglevel",
        "--loglevel",
        default=DEFAULT_LOG_LEVEL,
        help="Diagnostic log level written to stderr",
    )
    parser.add_argument("-v", "-version", "--version", action="version", version=f"{PROG} {__version__}")
    return parser


def print_examples() -> None:
    for line in EXAMPLES:
        print(line)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.loglevel)

    if len(args.urls) != 1:
        parser.print_help(sys.stderr)
        return 2

    if args.example:
        print_examples()
        return 0

    config = PingerConfig.from_options(
        args.urls[0],
        use_http=args.use_http,
        delay=args.delay,
        response_headers=args.response_headers,
        timeout=args.timeout,
    )

    with UrlPinger(config) as pinger:
        try:
            return pinger.run()
        except ProbeError as exc:
            logger.error("%s (%s)", exc, error_category_to_reason(exc.category))
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
