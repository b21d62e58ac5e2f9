from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT_URLS = {
    "sandbox": {
        "iam_url": "https://iam-sandbox.ecospend.com/connect/token",
        "pis_base_url": "https://pis-api-sandbox.ecospend.com/api/v2.0",
        "ais_base_url": "https://aisapi-sandbox.ecospend.com/api/v2.0",
    },
    "production": {
        "iam_url": "https://iam.ecospend.com/connect/token",
        "pis_base_url": "https://pis-api.ecospend.com/api/v2.0",
        "ais_base_url": "https://aisapi.ecospend.com/api/v2.0",
    },
}

Environment = Literal["sandbox", "production"]


class Settings(BaseSettings):
    """SDK settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYBYBANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment selection
    environment: Environment = Field(
        default="sandbox",
        description="Ecospend environment (sandbox or production)",
    )

    # Endpoint overrides
    iam_url: str | None = Field(
        default=None,
        description="Token endpoint, defaults to the environment's IAM URL",
    )
    pis_base_url: str | None = Field(
        default=None,
        description="Payment API base URL (FrPayment)",
    )
    ais_base_url: str | None = Field(
        default=None,
        description="Consent API base URL (Datalink)",
    )

    # HTTP
    http_timeout: float = Field(
        default=30,
        gt=0,
        description="Total timeout per HTTP request in seconds",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )

    # Compatibility switches
    legacy_double_completion: bool = Field(
        default=False,
        description="Invoke the completion twice from the error channel, as older SDKs did",
    )
    continue_after_auth_failure: bool = Field(
        default=False,
        description="Keep resolving the link after a token error has been reported",
    )

    def url_for(self, name: str, environment: Environment | None = None) -> str:
        """Return an endpoint URL, preferring an explicit override."""
        override = getattr(self, name)
        if override:
            return override.rstrip("/")
        return _ENVIRONMENT_URLS[environment or self.environment][name]


settings = Settings()
