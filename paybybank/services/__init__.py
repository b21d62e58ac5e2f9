"""Flow services."""

from paybybank.payments.presentation import SurfaceFactory
from paybybank.payments.repositories import DatalinkRepository, FrPaymentRepository, IamRepository

from .datalink_service import DatalinkService
from .frpayment_service import FrPaymentService
from .orchestrator import FlowOrchestrator

__all__ = [
    "DatalinkService",
    "FlowOrchestrator",
    "FrPaymentService",
    "get_datalink_service",
    "get_frpayment_service",
    "reset_services",
    "set_surface_factory",
]

_iam: IamRepository | None = None
_frpayment: FrPaymentService | None = None
_datalink: DatalinkService | None = None
_surface_factory: SurfaceFactory | None = None


def get_iam_repository() -> IamRepository:
    """IAM repository (singleton)."""
    global _iam
    if _iam is None:
        _iam = IamRepository()
    return _iam


def get_frpayment_service() -> FrPaymentService:
    """FrPayment service (singleton)."""
    global _frpayment
    if _frpayment is None:
        _frpayment = FrPaymentService(
            identity_client=get_iam_repository(),
            repository=FrPaymentRepository(),
            surface_factory=_surface_factory,
        )
    return _frpayment


def get_datalink_service() -> DatalinkService:
    """Datalink service (singleton)."""
    global _datalink
    if _datalink is None:
        _datalink = DatalinkService(
            identity_client=get_iam_repository(),
            repository=DatalinkRepository(),
            surface_factory=_surface_factory,
        )
    return _datalink


def set_surface_factory(factory: SurfaceFactory | None) -> None:
    """Register the host's presentation surface for all flows."""
    global _surface_factory
    _surface_factory = factory
    for service in (_frpayment, _datalink):
        if service is not None:
            service.orchestrator.surface_factory = factory


def reset_services() -> None:
    global _iam, _frpayment, _datalink, _surface_factory
    _iam = None
    _frpayment = None
    _datalink = None
    _surface_factory = None
