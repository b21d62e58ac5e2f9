"""Request and response DTOs for the Ecospend APIs."""

from paybybank.payments.dto.datalink import (
    DatalinkCreateRequest,
    DatalinkCreateResponse,
    DatalinkGetResponse,
    DatalinkModel,
)
from paybybank.payments.dto.frpayment import (
    AccountIdentification,
    FrPaymentCreateRequest,
    FrPaymentCreateResponse,
    FrPaymentGetResponse,
    FrPaymentPeriod,
)
from paybybank.payments.dto.iam import TokenResponse

__all__ = [
    "AccountIdentification",
    "DatalinkCreateRequest",
    "DatalinkCreateResponse",
    "DatalinkGetResponse",
    "DatalinkModel",
    "FrPaymentCreateRequest",
    "FrPaymentCreateResponse",
    "FrPaymentGetResponse",
    "FrPaymentPeriod",
    "TokenResponse",
]
