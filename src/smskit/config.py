"""Client configuration."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SMSClientConfig(BaseModel):
    """SMS API client configuration.

    Attributes:
        api_token: Bearer token sent in the ``Authorization`` header.
        api_url: Endpoint that messages are POSTed to, used verbatim.
        verify_tls: Verify the server certificate and hostname. Only disable
            this for self-signed or test endpoints.
        timeout: Seconds before the HTTP transport gives up.
    """

    api_token: SecretStr
    api_url: str
    verify_tls: bool = True
    timeout: float = 10.0


class SMSSettings(BaseSettings):
    """Configuration loaded from ``SMSKIT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="SMSKIT_", env_file=".env", extra="ignore")

    api_token: SecretStr = SecretStr("")
    api_url: str = ""
    verify_tls: bool = True
    timeout: float = 10.0

    def to_config(self) -> SMSClientConfig:
        return SMSClientConfig(
            api_token=self.api_token,
            api_url=self.api_url,
            verify_tls=self.verify_tls,
            timeout=self.timeout,
        )
