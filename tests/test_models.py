"""Tests for request and result models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from smskit.errors import ValidationError
from smskit.models import Destination, Message, SendRequest, SendResult


class TestSendRequest:
    def test_single_recipient_is_wrapped(self) -> None:
        request = SendRequest.create("+358501234567", "Alerts", "hi")
        assert request.recipients == ["+358501234567"]

    def test_payload_shape(self) -> None:
        request = SendRequest.create(["+358501234567", "+358501234568"], "Alerts", "hi")
        assert request.to_payload() == {
            "messages": [
                {
                    "from": "Alerts",
                    "destinations": [{"to": "+358501234567"}, {"to": "+358501234568"}],
                    "text": "hi",
                }
            ]
        }

    def test_text_is_passed_through(self) -> None:
        text = 'Raja-arvo ylittyi: "CPU" > 90 %\nTarkista palvelin.'
        request = SendRequest.create("+358501234567", "Valvonta", text)
        assert request.to_payload()["messages"][0]["text"] == text

    def test_request_is_frozen(self) -> None:
        request = SendRequest.create("+358501234567", "A", "hi")
        with pytest.raises(PydanticValidationError):
            request.text = "changed"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("args", "message"),
        [
            (("", "A", "t"), "recipients required"),
            (([], "A", "t"), "recipients required"),
            (("+358501234567", "", "t"), "sender required"),
            (("+358501234567", "A", ""), "message text required"),
            (("+1", "A", "t"), "invalid phone number format: \\+1"),
            (("+358501234567", 123, "t"), "sender must be a string"),
            (("+358501234567", "A", b"hi"), "message text must be a string"),
            ((358501234567, "A", "t"), "recipients must be a phone number"),
        ],
    )
    def test_validation_errors(self, args: tuple[object, str, str], message: str) -> None:
        with pytest.raises(ValidationError, match=message):
            SendRequest.create(*args)  # type: ignore[arg-type]

    def test_empty_string_inside_list(self) -> None:
        with pytest.raises(ValidationError) as info:
            SendRequest.create(["+358501234567", ""], "A", "t")
        assert info.value.value == ""


class TestMessage:
    def test_from_alias(self) -> None:
        message = Message.model_validate(
            {"from": "Alerts", "destinations": [{"to": "+358501234567"}], "text": "hi"}
        )
        assert message.from_ == "Alerts"
        assert message.destinations == [Destination(to="+358501234567")]
        assert "from" in message.model_dump(by_alias=True)


class TestSendResult:
    @pytest.mark.parametrize(("status", "ok"), [(200, True), (204, True), (302, False), (500, False)])
    def test_ok(self, status: int, ok: bool) -> None:
        assert SendResult(http_status=status, body="").ok is ok
