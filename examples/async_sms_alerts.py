"""Fan out alerts concurrently with the async client.

Uses a mock transport so it runs without network access; swap in
``AsyncSMSClient.from_env()`` to send for real.

Run with:
    uv run python examples/async_sms_alerts.py
"""

from __future__ import annotations

import asyncio
import json
import logging

from smskit import AsyncSMSClient, MockAsyncTransport, SMSKitError
from smskit.telemetry import ConsoleTelemetryProvider

logging.basicConfig(level=logging.INFO)

ALERTS = {
    "+358501234567": "Disk usage above 90% on db-1",
    "+358 40 765 4321": "Backup job failed on db-2",
    "12345": "This recipient is rejected before anything is sent",
}


async def send_one(client: AsyncSMSClient, number: str, text: str) -> None:
    try:
        result = await client.send(number, "Valvonta", text)
    except SMSKitError as exc:
        print(f"{number}: error: {exc}")
        return
    print(f"{number}: {result.http_status} {result.body}")


async def main() -> None:
    transport = MockAsyncTransport(202, "queued")
    async with AsyncSMSClient(
        "demo-token",
        "https://sms.example.com/v1/send",
        transport=transport,
        telemetry=ConsoleTelemetryProvider(),
    ) as client:
        await asyncio.gather(*(send_one(client, n, t) for n, t in ALERTS.items()))

    print(f"\n{len(transport.requests)} request(s) sent. First payload:")
    print(json.dumps(json.loads(transport.requests[0]["content"]), indent=2))


if __name__ == "__main__":
    asyncio.run(main())
