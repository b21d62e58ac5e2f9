"""FrPayment (standing order) API.

A standing order is an instruction an account holder gives their bank to pay
a fixed amount at regular intervals, until an end date or a number of payments
is reached. Standing orders can only be created, amended or cancelled by the
account holder.
"""

import asyncio
from collections.abc import Callable
from functools import partial
from typing import Any

from paybybank.core.exceptions import PayByBankError
from paybybank.payments.dto import FrPaymentCreateRequest, FrPaymentCreateResponse, FrPaymentGetResponse
from paybybank.payments.presentation import SurfaceFactory
from paybybank.payments.repositories import BaseIdentityClient, FrPaymentRepository
from paybybank.payments.schemas import Completion, Initiate, OpenById
from paybybank.services.orchestrator import FlowOrchestrator


class FrPaymentService:
    """Presents and manages standing orders.

    Every method schedules a task and must be called from a running event loop.
    """

    def __init__(
        self,
        identity_client: BaseIdentityClient,
        repository: FrPaymentRepository,
        surface_factory: SurfaceFactory | None = None,
    ):
        self.repository = repository
        self.orchestrator = FlowOrchestrator(
            name="FrPayment",
            identity_client=identity_client,
            repository=repository,
            surface_factory=surface_factory,
        )

    def initiate(
        self,
        host_context: Any,
        request: FrPaymentCreateRequest,
        completion: Completion,
    ) -> asyncio.Task:
        """Create a standing order and present its bank selection page.

        Args:
            host_context: Host UI context the surface is presented in
            request: Standing order to create
            completion: Receives the result or the error

        Returns:
            Task running the flow
        """
        return self.orchestrator.execute(host_context, Initiate(request), completion)

    def open(
        self,
        host_context: Any,
        unique_id: str,
        completion: Completion,
    ) -> asyncio.Task:
        """Present an existing standing order by its unique id."""
        return self.orchestrator.execute(host_context, OpenById(unique_id), completion)

    def create_frpayment(
        self,
        request: FrPaymentCreateRequest,
        completion: Callable[[FrPaymentCreateResponse | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        return self.orchestrator.dispatch(partial(self.repository.create, request), completion)

    def get_frpayment(
        self,
        unique_id: str,
        completion: Callable[[FrPaymentGetResponse | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        return self.orchestrator.dispatch(partial(self.repository.get, unique_id), completion)

    def delete_frpayment(
        self,
        unique_id: str,
        completion: Callable[[bool | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        """Delete the standing order with the given unique id."""
        return self.orchestrator.dispatch(partial(self.repository.delete, unique_id), completion)
