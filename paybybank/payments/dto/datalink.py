"""Datalink (consent journey) DTOs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DatalinkCreateRequest(BaseModel):
    """Request body for POST /datalink."""

    model_config = ConfigDict(extra="allow")

    redirect_url: str = Field(..., description="URL the bank redirects to when the consent ends")
    merchant_id: str | None = Field(default=None)
    merchant_user_id: str | None = Field(default=None)
    consent_end_date: datetime | None = Field(default=None)
    expiry_date: datetime | None = Field(default=None)
    allow_multiple_consent: bool | None = Field(default=None)
    limit: int | None = Field(default=None, ge=1, description="Remaining usages of the link")


class DatalinkCreateResponse(BaseModel):
    """Response of POST /datalink."""

    model_config = ConfigDict(extra="ignore")

    unique_id: str | None = None
    url: str | None = None
    qr_code: str | None = None


class DatalinkModel(BaseModel):
    """The datalink part of a GET /datalink response."""

    model_config = ConfigDict(extra="ignore")

    unique_id: str | None = None
    url: str | None = None
    expire_date: datetime | None = None
    limit: int | None = None


class DatalinkGetResponse(BaseModel):
    """Response of GET /datalink/{unique_id} and GET /datalink/consent/{consent_id}."""

    model_config = ConfigDict(extra="ignore")

    datalink: DatalinkModel | None = None
    redirect_url: str | None = None
    merchant_id: str | None = None
    merchant_user_id: str | None = None

    def link_fields(self) -> tuple[str | None, str | None, str | None]:
        """Return (unique_id, url, redirect_url)."""
        if self.datalink is None:
            return None, None, self.redirect_url
        return self.datalink.unique_id, self.datalink.url, self.redirect_url
