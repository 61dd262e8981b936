"""Marathon connection settings loaded from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_SCHEMES = ("http", "https")


class MarathonSettings(BaseSettings):
    """Marathon connection and discovery settings.

    All settings use the MARATHON_ prefix by default.

    Environment Variables:
        MARATHON_ENDPOINT: Full Marathon URL (takes precedence)
        MARATHON_SCHEME: http or https
        MARATHON_HOST: Marathon host
        MARATHON_PORT: Marathon port
        MARATHON_TOKEN: DC/OS ACS token
        MARATHON_USERNAME: HTTP basic auth user
        MARATHON_PASSWORD: HTTP basic auth password
        MARATHON_TIMEOUT: Request timeout in seconds
        MARATHON_DISCOVERY_ENABLED: Whether discovery is enabled
        MARATHON_MAX_CONCURRENT_FETCHES: Cap on parallel application fetches

    Example:
        # Using full URL
        export MARATHON_ENDPOINT="http://marathon.mesos:8080"

        # Or using individual settings
        export MARATHON_HOST="marathon.mesos"
        export MARATHON_PORT="8080"
        export MARATHON_TOKEN="eyJhbGciOi..."

        # In code
        from marathon_discovery import MarathonSettings
        settings = MarathonSettings()
        url = settings.get_url()
    """

    model_config = SettingsConfigDict(
        env_prefix="MARATHON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Direct URL (takes precedence)
    endpoint: str | None = Field(
        default=None,
        description="Full Marathon URL",
    )

    # Individual connection settings (used if endpoint is not set)
    scheme: str = Field(
        default="http",
        description="Marathon URL scheme",
    )
    host: str = Field(
        default="localhost",
        description="Marathon host",
    )
    port: int = Field(
        default=8080,
        description="Marathon port",
    )

    # Authentication
    token: str | None = Field(
        default=None,
        description="DC/OS ACS token",
    )
    username: str | None = Field(
        default=None,
        description="HTTP basic auth user",
    )
    password: str | None = Field(
        default=None,
        description="HTTP basic auth password",
    )

    timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds",
    )
    discovery_enabled: bool = Field(
        default=True,
        description="Enable the Marathon discovery client",
    )
    max_concurrent_fetches: int | None = Field(
        default=None,
        ge=1,
        description="Cap on simultaneous application fetches per lookup",
    )

    def get_url(self) -> str:
        """Get the Marathon base URL.

        If `endpoint` is set, returns it without a trailing slash. Otherwise,
        constructs the URL from individual settings.
        """
        if self.endpoint:
            return self.endpoint.rstrip("/")

        return f"{self.scheme}://{self.host}:{self.port}"

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        """Username/password pair, if both are configured."""
        if self.username and self.password:
            return self.username, self.password
        return None

    def model_post_init(self, __context: Any) -> None:
        """Validate settings after initialization."""
        if bool(self.username) != bool(self.password):
            raise ValueError("Marathon username and password must be set together")

        if self.endpoint:
            return

        if self.scheme not in _SCHEMES:
            raise ValueError(f"Unsupported Marathon scheme: {self.scheme}")
        if not self.host:
            raise ValueError("Marathon host is required when endpoint is not set")
