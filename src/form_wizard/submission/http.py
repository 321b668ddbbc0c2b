"""HTTP submitter — POSTs the payload as JSON to a configured endpoint."""

from __future__ import annotations

import logging

import httpx

from form_wizard.config import SubmitConfig
from form_wizard.models.answers import SubmissionPayload
from form_wizard.submission.base import Submitter

logger = logging.getLogger(__name__)


class HttpSubmitter(Submitter):
    """Submits answers to a JSON HTTP API.

    A 2xx response counts as accepted, any other status as rejected. Network
    errors and timeouts propagate as ``httpx.HTTPError``.
    """

    def __init__(self, config: SubmitConfig, client: httpx.AsyncClient | None = None) -> None:
        if not config.endpoint:
            raise ValueError("endpoint is required for HTTP submission")
        self._config = config
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                headers=self._config.headers,
            )
        return self._client

    async def submit(self, payload: SubmissionPayload) -> bool:
        response = await self.client.post(
            self._config.endpoint,
            json=payload.model_dump(mode="json"),
        )
        if not response.is_success:
            logger.warning(
                "Endpoint %s rejected submission: HTTP %d",
                self._config.endpoint,
                response.status_code,
            )
        return response.is_success

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
