"""Datalink API.

Datalink is a white-label consent journey: a single call to /datalink
returns a hosted link that takes the user through bank selection and consent.
"""

import asyncio
from collections.abc import Callable
from functools import partial
from typing import Any

from paybybank.core.exceptions import PayByBankError
from paybybank.payments.dto import DatalinkCreateRequest, DatalinkCreateResponse, DatalinkGetResponse
from paybybank.payments.presentation import SurfaceFactory
from paybybank.payments.repositories import BaseIdentityClient, DatalinkRepository
from paybybank.payments.schemas import Completion, Initiate, OpenById, OpenByUrl
from paybybank.services.orchestrator import FlowOrchestrator


class DatalinkService:
    """Presents and manages consent journey links.

    Every method schedules a task and must be called from a running event loop.
    """

    def __init__(
        self,
        identity_client: BaseIdentityClient,
        repository: DatalinkRepository,
        surface_factory: SurfaceFactory | None = None,
    ):
        self.repository = repository
        self.orchestrator = FlowOrchestrator(
            name="Datalink",
            identity_client=identity_client,
            repository=repository,
            surface_factory=surface_factory,
            supports_open_by_url=True,
        )

    def open(
        self,
        host_context: Any,
        unique_id: str,
        completion: Completion,
    ) -> asyncio.Task:
        """Present an existing datalink by its unique id."""
        return self.orchestrator.execute(host_context, OpenById(unique_id), completion)

    def open_url(
        self,
        host_context: Any,
        datalink_url: str,
        redirect_url: str,
        completion: Completion,
    ) -> asyncio.Task:
        """Present a datalink URL directly, without looking it up.

        Args:
            host_context: Host UI context the surface is presented in
            datalink_url: URL of the datalink
            redirect_url: Redirect URL the journey ends on
            completion: Receives the result or the error
        """
        return self.orchestrator.execute(host_context, OpenByUrl(datalink_url, redirect_url), completion)

    def initiate(
        self,
        host_context: Any,
        request: DatalinkCreateRequest,
        completion: Completion,
    ) -> asyncio.Task:
        """Create a datalink and present it."""
        return self.orchestrator.execute(host_context, Initiate(request), completion)

    def create_datalink(
        self,
        request: DatalinkCreateRequest,
        completion: Callable[[DatalinkCreateResponse | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        return self.orchestrator.dispatch(partial(self.repository.create, request), completion)

    def get_datalink(
        self,
        unique_id: str,
        completion: Callable[[DatalinkGetResponse | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        return self.orchestrator.dispatch(partial(self.repository.get, unique_id), completion)

    def delete_datalink(
        self,
        unique_id: str,
        completion: Callable[[bool | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        """Soft-delete the datalink with the given unique id."""
        return self.orchestrator.dispatch(partial(self.repository.delete, unique_id), completion)

    def get_datalink_of_consent(
        self,
        consent_id: str,
        completion: Callable[[DatalinkGetResponse | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        """Return the datalink the given consent was created through."""
        return self.orchestrator.dispatch(partial(self.repository.get_by_consent, consent_id), completion)
