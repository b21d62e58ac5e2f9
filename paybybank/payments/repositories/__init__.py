"""Repositories for the IAM, payment and consent APIs."""

from paybybank.payments.repositories.base import BaseIdentityClient, ResourceRepository
from paybybank.payments.repositories.client import ApiClient
from paybybank.payments.repositories.datalink_repository import DatalinkRepository
from paybybank.payments.repositories.frpayment_repository import FrPaymentRepository
from paybybank.payments.repositories.iam_repository import IamRepository

__all__ = [
    "ApiClient",
    "BaseIdentityClient",
    "DatalinkRepository",
    "FrPaymentRepository",
    "IamRepository",
    "ResourceRepository",
]
