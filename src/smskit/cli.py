"""Command-line entry point: ``smskit send``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from pydantic import SecretStr

from smskit._version import __version__
from smskit.client import SMSClient
from smskit.config import SMSSettings
from smskit.errors import SMSKitError
from smskit.telemetry.console import ConsoleTelemetryProvider

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="smskit", description="Send SMS messages over HTTP.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    send = subparsers.add_parser("send", help="Send one message")
    send.add_argument(
        "--to",
        dest="recipients",
        action="append",
        required=True,
        metavar="NUMBER",
        help="Recipient phone number (repeat for several recipients)",
    )
    send.add_argument("--from", dest="sender", required=True, help="Sender name or number")
    send.add_argument("--text", required=True, help="Message body")
    send.add_argument("--api-token", help="API token (default: $SMSKIT_API_TOKEN)")
    send.add_argument("--api-url", help="API endpoint (default: $SMSKIT_API_URL)")
    send.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate and hostname verification",
    )
    send.add_argument("--timeout", type=float, help="Request timeout in seconds")
    return parser


def _send(args: argparse.Namespace) -> int:
    settings = SMSSettings()
    if args.api_token is not None:
        settings.api_token = SecretStr(args.api_token)
    if args.api_url is not None:
        settings.api_url = args.api_url
    if args.insecure:
        settings.verify_tls = False
    if args.timeout is not None:
        settings.timeout = args.timeout

    telemetry = ConsoleTelemetryProvider(level=logging.DEBUG) if args.verbose else None
    with SMSClient.from_config(settings.to_config(), telemetry=telemetry) as client:
        result = client.send(args.recipients, args.sender, args.text)

    print(json.dumps({"http_code": result.http_status, "response": result.body}, indent=4))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return _send(args)
    except SMSKitError as exc:
        logger.debug("send failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
