"""FrPayment (standing order) DTOs."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FrPaymentPeriod(str, Enum):
    """Standing order payment interval."""

    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"


class AccountIdentification(BaseModel):
    """Bank account of a creditor or debtor."""

    type: str = Field(default="SortCode", description="Identification scheme")
    identification: str = Field(..., description="Sort code and account number, IBAN, ...")
    name: str | None = Field(default=None, description="Account holder name")
    currency: str = Field(default="GBP", description="Account currency")


class FrPaymentCreateRequest(BaseModel):
    """Request body for POST /frpayments."""

    model_config = ConfigDict(extra="allow")

    redirect_url: str = Field(..., description="URL the bank redirects to when the journey ends")
    amount: Decimal = Field(..., gt=0, description="Amount of every payment")
    reference: str = Field(..., max_length=18, description="Reference shown on statements")
    creditor_account: AccountIdentification = Field(..., description="Receiving account")
    currency: str = Field(default="GBP")
    description: str | None = Field(default=None)
    debtor_account: AccountIdentification | None = Field(default=None)
    first_payment_date: date | None = Field(default=None)
    number_of_payments: int | None = Field(default=None, ge=1)
    period: FrPaymentPeriod | None = Field(default=None)
    merchant_id: str | None = Field(default=None)
    merchant_user_id: str | None = Field(default=None)


class FrPaymentCreateResponse(BaseModel):
    """Response of POST /frpayments."""

    model_config = ConfigDict(extra="ignore")

    unique_id: str | None = None
    url: str | None = None
    reference: str | None = None
    qr_code: str | None = None


class FrPaymentGetResponse(BaseModel):
    """Response of GET /frpayments/{unique_id}."""

    model_config = ConfigDict(extra="ignore")

    unique_id: str | None = None
    url: str | None = None
    redirect_url: str | None = None
    amount: Decimal | None = None
    currency: str | None = None
    reference: str | None = None
    status: str | None = None

    def link_fields(self) -> tuple[str | None, str | None, str | None]:
        """Return (unique_id, url, redirect_url)."""
        return self.unique_id, self.url, self.redirect_url
