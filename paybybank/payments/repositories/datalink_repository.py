"""Datalink repository."""

from paybybank.payments.dto import DatalinkCreateRequest, DatalinkCreateResponse, DatalinkGetResponse
from paybybank.payments.repositories.base import ResourceRepository, parse_model
from paybybank.payments.repositories.client import ApiClient


class DatalinkRepository(ResourceRepository):
    """Consent journey links on the account information API."""

    PATH = "datalink"

    def __init__(self, client: ApiClient | None = None):
        self.client = client or ApiClient("ais_base_url")

    async def create(self, request: DatalinkCreateRequest) -> DatalinkCreateResponse | None:
        body = request.model_dump(mode="json", exclude_none=True)
        return parse_model(DatalinkCreateResponse, await self.client.post_json(self.PATH, body))

    async def get(self, unique_id: str) -> DatalinkGetResponse | None:
        return parse_model(DatalinkGetResponse, await self.client.get_json(f"{self.PATH}/{unique_id}"))

    async def delete(self, unique_id: str) -> bool | None:
        return await self.client.delete(f"{self.PATH}/{unique_id}")

    async def get_by_consent(self, consent_id: str) -> DatalinkGetResponse | None:
        """Return the datalink a consent was given through."""
        return parse_model(
            DatalinkGetResponse,
            await self.client.get_json(f"{self.PATH}/consent/{consent_id}"),
        )
