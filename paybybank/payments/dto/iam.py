from pydantic import BaseModel, ConfigDict


class TokenResponse(BaseModel):
    """Client-credentials token issued by the IAM service."""

    model_config = ConfigDict(extra="ignore")

    access_token: str | None = None
    expires_in: int | None = None
    token_type: str | None = None
    scope: str | None = None

    @property
    def is_valid(self) -> bool:
        return bool(self.access_token and self.access_token.strip())
