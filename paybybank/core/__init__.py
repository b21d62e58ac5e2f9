"""Core configuration, state, errors and logging."""

from paybybank.core.config import Settings, settings
from paybybank.core.exceptions import (
    NotConfiguredError,
    PayByBankError,
    UnknownError,
    WrongPaylinkError,
)
from paybybank.core.state import Authentication, PayByBankState

__all__ = [
    "Authentication",
    "NotConfiguredError",
    "PayByBankError",
    "PayByBankState",
    "Settings",
    "UnknownError",
    "WrongPaylinkError",
    "settings",
]
