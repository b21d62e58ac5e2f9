"""Public FrPayment and Datalink APIs."""

from decimal import Decimal

import pytest

from paybybank import PayByBank
from paybybank.core.exceptions import WrongPaylinkError
from paybybank.core.state import Authentication, PayByBankState
from paybybank.payments.dto import (
    AccountIdentification,
    DatalinkCreateRequest,
    DatalinkCreateResponse,
    FrPaymentCreateRequest,
    FrPaymentCreateResponse,
)
from paybybank.payments.schemas import ResolvedLink
from paybybank.services import (
    DatalinkService,
    FrPaymentService,
    get_datalink_service,
    get_frpayment_service,
)

BANK_URL = "https://bank.example/pay"
REDIRECT_URL = "https://app.example/done"


@pytest.fixture
def frpayment(identity_client, frpayment_repository, surfaces) -> FrPaymentService:
    return FrPaymentService(identity_client, frpayment_repository, surfaces)


@pytest.fixture
def datalink(identity_client, datalink_repository, surfaces) -> DatalinkService:
    return DatalinkService(identity_client, datalink_repository, surfaces)


@pytest.fixture
def frpayment_request() -> FrPaymentCreateRequest:
    return FrPaymentCreateRequest(
        redirect_url=REDIRECT_URL,
        amount=Decimal("10.00"),
        reference="RENT",
        creditor_account=AccountIdentification(identification="20000055555555", name="Landlord"),
        number_of_payments=12,
        period="Monthly",
    )


@pytest.mark.asyncio
class TestFrPaymentService:
    async def test_initiate_presents_created_order(self, frpayment, frpayment_repository, frpayment_request, surfaces, completion, host):
        frpayment_repository.create_response = FrPaymentCreateResponse(unique_id="abc")
        frpayment_repository.add("abc", BANK_URL, REDIRECT_URL)

        await frpayment.initiate(host, frpayment_request, completion)

        assert frpayment_repository.calls == [("create", frpayment_request), ("get", "abc")]
        assert surfaces.last.link == ResolvedLink("abc", BANK_URL, REDIRECT_URL)
        assert completion.calls == []

    async def test_open_missing_url(self, frpayment, frpayment_repository, surfaces, completion, host):
        frpayment_repository.add("xyz", None, REDIRECT_URL)

        await frpayment.open(host, "xyz", completion)

        assert completion.calls == [(None, WrongPaylinkError("url Error."))]
        assert surfaces.surfaces == []

    async def test_create_passthrough(self, frpayment, frpayment_repository, frpayment_request, completion):
        response = FrPaymentCreateResponse(unique_id="abc", url=BANK_URL)
        frpayment_repository.create_response = response

        await frpayment.create_frpayment(frpayment_request, completion)

        assert frpayment_repository.calls == [("create", frpayment_request)]
        assert completion.calls == [(response, None)]

    async def test_get_passthrough_forwards_none(self, frpayment, frpayment_repository, completion):
        await frpayment.get_frpayment("missing", completion)

        assert frpayment_repository.calls == [("get", "missing")]
        assert completion.calls == [(None, None)]

    async def test_delete_passthrough(self, frpayment, frpayment_repository, completion):
        frpayment_repository.delete_response = None

        await frpayment.delete_frpayment("abc", completion)

        assert frpayment_repository.calls == [("delete", "abc")]
        assert completion.calls == [(None, None)]

    async def test_passthrough_skips_authentication(self, frpayment, identity_client, completion):
        await frpayment.get_frpayment("abc", completion)

        assert identity_client.calls == 0


@pytest.mark.asyncio
class TestDatalinkService:
    async def test_open_url(self, datalink, datalink_repository, surfaces, completion, host):
        await datalink.open_url(host, BANK_URL, REDIRECT_URL, completion)

        assert datalink_repository.calls == []
        assert surfaces.last.link == ResolvedLink("openUrl", BANK_URL, REDIRECT_URL)

    async def test_open(self, datalink, datalink_repository, surfaces, completion, host):
        datalink_repository.add("dl-1", BANK_URL, REDIRECT_URL)

        await datalink.open(host, "dl-1", completion)

        assert surfaces.last.link == ResolvedLink("dl-1", BANK_URL, REDIRECT_URL)

    async def test_initiate_without_unique_id(self, datalink, datalink_repository, completion, host):
        datalink_repository.create_response = DatalinkCreateResponse(url=BANK_URL)

        await datalink.initiate(host, DatalinkCreateRequest(redirect_url=REDIRECT_URL), completion)

        assert completion.calls == [(None, WrongPaylinkError("uniqueID Error."))]
        assert [name for name, _ in datalink_repository.calls] == ["create"]

    async def test_get_datalink_of_consent(self, datalink, datalink_repository, completion):
        datalink_repository.add("dl-1", BANK_URL, REDIRECT_URL)
        datalink_repository.by_consent["consent-1"] = datalink_repository.resources["dl-1"]

        await datalink.get_datalink_of_consent("consent-1", completion)

        assert datalink_repository.calls == [("get_by_consent", "consent-1")]
        assert completion.calls == [(datalink_repository.resources["dl-1"], None)]

    async def test_create_get_delete(self, datalink, datalink_repository, completion):
        request = DatalinkCreateRequest(redirect_url=REDIRECT_URL)
        datalink_repository.create_response = DatalinkCreateResponse(unique_id="dl-1")

        await datalink.create_datalink(request, completion)
        await datalink.get_datalink("dl-1", completion)
        await datalink.delete_datalink("dl-1", completion)

        assert datalink_repository.calls == [("create", request), ("get", "dl-1"), ("delete", "dl-1")]
        assert completion.calls == [
            (DatalinkCreateResponse(unique_id="dl-1"), None),
            (None, None),
            (True, None),
        ]


class TestFacade:
    def test_configure_sets_state(self):
        PayByBank.configure(
            Authentication(client_id="id", client_secret="secret", scope="pis"),
            environment="production",
        )

        assert PayByBankState.authentication.client_id == "id"
        assert PayByBankState.environment == "production"

    def test_services_are_singletons(self):
        sdk = PayByBank()

        assert sdk.frpayment is get_frpayment_service()
        assert sdk.datalink is get_datalink_service()
        assert sdk.datalink.orchestrator.supports_open_by_url
        assert not sdk.frpayment.orchestrator.supports_open_by_url

    def test_surface_factory_reaches_existing_services(self, surfaces):
        sdk = PayByBank()
        service = sdk.frpayment

        PayByBank.set_surface_factory(surfaces)

        assert service.orchestrator.surface_factory is surfaces
        assert sdk.datalink.orchestrator.surface_factory is surfaces

    def test_reset(self):
        PayByBank.reset()

        assert not PayByBankState.is_configured()
