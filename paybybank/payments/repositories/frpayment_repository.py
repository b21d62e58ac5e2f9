"""FrPayment repository."""

from paybybank.payments.dto import FrPaymentCreateRequest, FrPaymentCreateResponse, FrPaymentGetResponse
from paybybank.payments.repositories.base import ResourceRepository, parse_model
from paybybank.payments.repositories.client import ApiClient


class FrPaymentRepository(ResourceRepository):
    """Standing orders on the payment API."""

    PATH = "frpayments"

    def __init__(self, client: ApiClient | None = None):
        self.client = client or ApiClient("pis_base_url")

    async def create(self, request: FrPaymentCreateRequest) -> FrPaymentCreateResponse | None:
        body = request.model_dump(mode="json", exclude_none=True)
        return parse_model(FrPaymentCreateResponse, await self.client.post_json(self.PATH, body))

    async def get(self, unique_id: str) -> FrPaymentGetResponse | None:
        return parse_model(FrPaymentGetResponse, await self.client.get_json(f"{self.PATH}/{unique_id}"))

    async def delete(self, unique_id: str) -> bool | None:
        return await self.client.delete(f"{self.PATH}/{unique_id}")
