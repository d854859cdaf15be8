"""smskit - Small client for bearer-token SMS sending HTTP APIs."""

from smskit._version import __version__
from smskit.client import AsyncSMSClient, SMSClient
from smskit.config import SMSClientConfig, SMSSettings
from smskit.errors import ConfigError, SMSKitError, TransportError, ValidationError
from smskit.models import Destination, Message, SendRequest, SendResult
from smskit.phone import PHONE_PATTERN, is_valid_phone, validate_phone
from smskit.transport import (
    AsyncHTTPTransport,
    AsyncHttpxTransport,
    HTTPTransport,
    HttpxTransport,
    MockAsyncTransport,
    MockTransport,
    TransportResponse,
)

__all__ = [
    "PHONE_PATTERN",
    "AsyncHTTPTransport",
    "AsyncHttpxTransport",
    "AsyncSMSClient",
    "ConfigError",
    "Destination",
    "HTTPTransport",
    "HttpxTransport",
    "Message",
    "MockAsyncTransport",
    "MockTransport",
    "SMSClient",
    "SMSClientConfig",
    "SMSKitError",
    "SMSSettings",
    "SendRequest",
    "SendResult",
    "TransportError",
    "TransportResponse",
    "ValidationError",
    "__version__",
    "is_valid_phone",
    "validate_phone",
]
