"""Shared fakes and fixtures."""

from typing import Any

import pytest

from paybybank.core.state import Authentication, PayByBankState
from paybybank.payments.dto import (
    DatalinkCreateResponse,
    DatalinkGetResponse,
    DatalinkModel,
    FrPaymentCreateResponse,
    FrPaymentGetResponse,
    TokenResponse,
)
from paybybank.payments.presentation import PresentationSurface
from paybybank.payments.repositories import BaseIdentityClient, ResourceRepository
from paybybank.services import reset_services


class FakeIdentityClient(BaseIdentityClient):
    """Returns a fixed token and counts calls."""

    def __init__(self, access_token: str | None = "token-123"):
        self.access_token = access_token
        self.calls = 0

    async def connect(self) -> TokenResponse | None:
        self.calls += 1
        if self.access_token is None:
            return None
        return TokenResponse(access_token=self.access_token, token_type="Bearer")


class FakeFrPaymentRepository(ResourceRepository):
    """In-memory standing orders."""

    def __init__(self):
        self.resources: dict[str, FrPaymentGetResponse] = {}
        self.create_response: FrPaymentCreateResponse | None = None
        self.delete_response: bool | None = True
        self.calls: list[tuple[str, Any]] = []

    async def create(self, request):
        self.calls.append(("create", request))
        return self.create_response

    async def get(self, unique_id):
        self.calls.append(("get", unique_id))
        return self.resources.get(unique_id)

    async def delete(self, unique_id):
        self.calls.append(("delete", unique_id))
        return self.delete_response

    def add(self, unique_id, url, redirect_url) -> None:
        self.resources[unique_id] = FrPaymentGetResponse(
            unique_id=unique_id,
            url=url,
            redirect_url=redirect_url,
        )


class FakeDatalinkRepository(ResourceRepository):
    """In-memory datalinks."""

    def __init__(self):
        self.resources: dict[str, DatalinkGetResponse] = {}
        self.by_consent: dict[str, DatalinkGetResponse] = {}
        self.create_response: DatalinkCreateResponse | None = None
        self.delete_response: bool | None = True
        self.calls: list[tuple[str, Any]] = []

    async def create(self, request):
        self.calls.append(("create", request))
        return self.create_response

    async def get(self, unique_id):
        self.calls.append(("get", unique_id))
        return self.resources.get(unique_id)

    async def delete(self, unique_id):
        self.calls.append(("delete", unique_id))
        return self.delete_response

    async def get_by_consent(self, consent_id):
        self.calls.append(("get_by_consent", consent_id))
        return self.by_consent.get(consent_id)

    def add(self, unique_id, url, redirect_url) -> None:
        self.resources[unique_id] = DatalinkGetResponse(
            datalink=DatalinkModel(unique_id=unique_id, url=url),
            redirect_url=redirect_url,
        )


class RecordingSurface(PresentationSurface):
    """Surface that records what the host would have shown."""

    def __init__(self, link, on_terminal, error_channel):
        super().__init__(link, on_terminal, error_channel)
        self.presented_in: Any = None
        self.removed = 0

    def _present(self, host_context):
        self.presented_in = host_context

    def _remove(self):
        self.removed += 1


class SurfaceRecorder:
    """Surface factory that keeps every surface it builds."""

    def __init__(self, surface_class: type[PresentationSurface] = RecordingSurface):
        self.surface_class = surface_class
        self.surfaces: list[PresentationSurface] = []

    def __call__(self, link, on_terminal, error_channel):
        surface = self.surface_class(link, on_terminal, error_channel)
        self.surfaces.append(surface)
        return surface

    @property
    def last(self) -> PresentationSurface:
        return self.surfaces[-1]


class CompletionRecorder:
    """Collects (result, error) pairs passed to a completion."""

    def __init__(self):
        self.calls: list[tuple[Any, Any]] = []

    def __call__(self, result, error):
        self.calls.append((result, error))

    @property
    def errors(self) -> list[Any]:
        return [error for _, error in self.calls]


@pytest.fixture(autouse=True)
def configured_state():
    """Configure credentials for every test and clear them afterwards."""
    PayByBankState.configure(Authentication(client_id="client", client_secret="secret"))
    yield PayByBankState
    PayByBankState.reset()
    reset_services()


@pytest.fixture
def identity_client() -> FakeIdentityClient:
    return FakeIdentityClient()


@pytest.fixture
def frpayment_repository() -> FakeFrPaymentRepository:
    return FakeFrPaymentRepository()


@pytest.fixture
def datalink_repository() -> FakeDatalinkRepository:
    return FakeDatalinkRepository()


@pytest.fixture
def surfaces() -> SurfaceRecorder:
    return SurfaceRecorder()


@pytest.fixture
def completion() -> CompletionRecorder:
    return CompletionRecorder()


@pytest.fixture
def host() -> object:
    """Stands in for the host UI context."""
    return object()
