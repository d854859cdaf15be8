"""Exceptions raised by smskit."""

from __future__ import annotations


class SMSKitError(Exception):
    """Base exception for all smskit errors."""


class ConfigError(SMSKitError):
    """The client was constructed without a credential or endpoint."""


class ValidationError(SMSKitError):
    """Caller-supplied recipients, sender or text were rejected.

    Raised before any network I/O takes place.

    Attributes:
        value: The offending recipient string, if the failure concerns one.
    """

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class TransportError(SMSKitError):
    """The HTTP round trip could not be completed.

    A response with a 4xx/5xx status is *not* a transport error; it is
    returned to the caller as a normal result.

    Attributes:
        cause: The underlying transport exception, if any.
        timeout: Whether the failure was a timeout.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        timeout: bool = False,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.timeout = timeout
