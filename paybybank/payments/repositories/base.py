"""Repository contracts used by the flows."""

from abc import ABC, abstractmethod
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError

from paybybank.core.logging import get_logger
from paybybank.payments.dto import TokenResponse

logger = get_logger(__name__)


class LinkSource(Protocol):
    """A fetched resource that can yield (unique_id, url, redirect_url)."""

    def link_fields(self) -> tuple[str | None, str | None, str | None]: ...


class CreatedResource(Protocol):
    unique_id: str | None


class BaseIdentityClient(ABC):
    """Obtains an access token.

    Allows replacing the IAM implementation without touching the flows.
    """

    @abstractmethod
    async def connect(self) -> TokenResponse | None:
        """Request a token. None on failure, never raises."""


class ResourceRepository(ABC):
    """Create/get/delete for one remote resource family.

    Implementations return None on failure and never raise into the flows.
    """

    @abstractmethod
    async def create(self, request: BaseModel) -> CreatedResource | None:
        """Create the resource."""

    @abstractmethod
    async def get(self, unique_id: str) -> LinkSource | None:
        """Fetch the resource by its unique id."""

    @abstractmethod
    async def delete(self, unique_id: str) -> bool | None:
        """Delete the resource by its unique id."""


def parse_model(model: type[BaseModel], data: dict[str, Any] | None) -> Any:
    """Validate a response body, None when it is missing or malformed."""
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("Invalid %s: %s", model.__name__, e)
        return None
