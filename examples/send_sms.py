"""Send an SMS alert to one or more recipients.

Reads the API credentials from the environment:

    export SMSKIT_API_TOKEN=your-api-token
    export SMSKIT_API_URL=https://sms.example.com/v1/send

Run with:
    uv run python examples/send_sms.py
"""

from __future__ import annotations

import json
import logging

from smskit import SMSClient, SMSKitError

logging.basicConfig(level=logging.DEBUG)


def main() -> None:
    # A single recipient works too: recipients = "+35850123456"
    recipients = ["+35850123456", "+35850234567"]

    try:
        with SMSClient.from_env() as client:
            result = client.send(recipients, "Valvonta", "Monitoroinnin raja-arvo on ylittynyt.")
    except SMSKitError as exc:
        print(f"Error: {exc}")
        return

    print(json.dumps({"http_code": result.http_status, "response": result.body}, indent=4))


if __name__ == "__main__":
    main()
