"""PayByBank SDK: bank-redirect standing order and consent journeys."""

from paybybank.core import (
    Authentication,
    NotConfiguredError,
    PayByBankError,
    PayByBankState,
    UnknownError,
    WrongPaylinkError,
)
from paybybank.core.config import Environment
from paybybank.payments import PayByBankResult, PayByBankResultType, ResolvedLink
from paybybank.payments.presentation import ErrorChannel, PresentationSurface, SurfaceFactory
from paybybank.services import (
    DatalinkService,
    FrPaymentService,
    get_datalink_service,
    get_frpayment_service,
    reset_services,
    set_surface_factory,
)

__version__ = "1.0.0"


class PayByBank:
    """Entry point for host applications."""

    @staticmethod
    def configure(
        authentication: Authentication,
        environment: Environment | None = None,
        surface_factory: SurfaceFactory | None = None,
    ) -> None:
        """Store credentials (and optionally the surface) before any flow runs."""
        PayByBankState.configure(authentication, environment)
        if surface_factory is not None:
            set_surface_factory(surface_factory)

    @staticmethod
    def set_surface_factory(factory: SurfaceFactory | None) -> None:
        set_surface_factory(factory)

    @property
    def frpayment(self) -> FrPaymentService:
        return get_frpayment_service()

    @property
    def datalink(self) -> DatalinkService:
        return get_datalink_service()

    @staticmethod
    def reset() -> None:
        """Forget configuration and services."""
        PayByBankState.reset()
        reset_services()


__all__ = [
    "Authentication",
    "DatalinkService",
    "ErrorChannel",
    "FrPaymentService",
    "NotConfiguredError",
    "PayByBank",
    "PayByBankError",
    "PayByBankResult",
    "PayByBankResultType",
    "PayByBankState",
    "PresentationSurface",
    "ResolvedLink",
    "UnknownError",
    "WrongPaylinkError",
    "__version__",
]
