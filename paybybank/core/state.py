"""Process-wide SDK state set by the host application."""

from pydantic import BaseModel, Field

from paybybank.core.config import Environment, settings


class Authentication(BaseModel):
    """Client credentials issued by Ecospend."""

    client_id: str = Field(..., min_length=1, description="OAuth client id")
    client_secret: str = Field(..., min_length=1, description="OAuth client secret")
    scope: str | None = Field(default=None, description="Requested token scope")


class PayByBankState:
    """Holds configuration written once by the host and read by the flows."""

    authentication: Authentication | None = None
    environment: Environment = settings.environment
    access_token: str | None = None

    @classmethod
    def configure(
        cls,
        authentication: Authentication,
        environment: Environment | None = None,
    ) -> None:
        cls.authentication = authentication
        if environment is not None:
            cls.environment = environment
        cls.access_token = None

    @classmethod
    def is_configured(cls) -> bool:
        return cls.authentication is not None

    @classmethod
    def reset(cls) -> None:
        cls.authentication = None
        cls.environment = settings.environment
        cls.access_token = None
