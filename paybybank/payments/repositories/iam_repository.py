"""IAM repository (client-credentials token)."""

from paybybank.core.logging import get_logger
from paybybank.core.state import PayByBankState
from paybybank.payments.dto import TokenResponse
from paybybank.payments.repositories.base import BaseIdentityClient, parse_model
from paybybank.payments.repositories.client import ApiClient

logger = get_logger(__name__)


class IamRepository(BaseIdentityClient):
    """Fetches a token from the IAM service and stores it for the API clients."""

    def __init__(self, client: ApiClient | None = None):
        self.client = client or ApiClient("iam_url")

    async def connect(self) -> TokenResponse | None:
        authentication = PayByBankState.authentication
        if authentication is None:
            logger.warning("Token requested before PayByBank.configure()")
            return None

        form = {
            "grant_type": "client_credentials",
            "client_id": authentication.client_id,
            "client_secret": authentication.client_secret,
        }
        if authentication.scope:
            form["scope"] = authentication.scope

        token = parse_model(TokenResponse, await self.client.post_form("", form))
        if token is not None and token.is_valid:
            PayByBankState.access_token = token.access_token
        else:
            PayByBankState.access_token = None
        return token
