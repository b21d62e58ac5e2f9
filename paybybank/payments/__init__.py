"""Payment and consent flow building blocks."""

from paybybank.payments.schemas import (
    Initiate,
    OpenById,
    OpenByUrl,
    PayByBankResult,
    PayByBankResultType,
    ResolvedLink,
)

__all__ = [
    "Initiate",
    "OpenById",
    "OpenByUrl",
    "PayByBankResult",
    "PayByBankResultType",
    "ResolvedLink",
]
