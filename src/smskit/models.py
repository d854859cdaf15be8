"""Request and result models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from smskit.errors import ValidationError
from smskit.phone import validate_phone


class Destination(BaseModel):
    """Per-recipient wrapper object in the API payload."""

    to: str


class Message(BaseModel):
    """A single message object: one sender and text, many destinations."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    destinations: list[Destination]
    text: str


class SendRequest(BaseModel):
    """A validated, per-call send request.

    Build instances with :meth:`create`, which applies the input checks in
    a fixed order so the first violation always produces the same error.
    """

    model_config = ConfigDict(frozen=True)

    recipients: list[str]
    from_: str
    text: str

    @classmethod
    def create(cls, recipients: str | Sequence[str], from_: str, text: str) -> SendRequest:
        """Validate caller input and return a request.

        Args:
            recipients: A single phone number or an ordered sequence of them.
            from_: Sender name or number shown to the recipient.
            text: Message body.

        Raises:
            ValidationError: On the first violated check.
        """
        if not recipients:
            raise ValidationError("recipients required")
        if not from_:
            raise ValidationError("sender required")
        if not text:
            raise ValidationError("message text required")
        if not isinstance(from_, str):
            raise ValidationError("sender must be a string")
        if not isinstance(text, str):
            raise ValidationError("message text must be a string")
        if not isinstance(recipients, str | Sequence):
            raise ValidationError("recipients must be a phone number or a sequence of them")

        numbers = [recipients] if isinstance(recipients, str) else list(recipients)
        for number in numbers:
            validate_phone(number)

        return cls(recipients=numbers, from_=from_, text=text)

    def to_message(self) -> Message:
        return Message(
            from_=self.from_,
            destinations=[Destination(to=number) for number in self.recipients],
            text=self.text,
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready request body.

        The API accepts several message objects per request; this client
        always sends exactly one, covering every destination.
        """
        return {"messages": [self.to_message().model_dump(by_alias=True)]}


class SendResult(BaseModel):
    """Outcome of a completed HTTP round trip.

    The body is passed through untouched. A 4xx/5xx status is reported here
    rather than raised.
    """

    http_status: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.http_status < 300
