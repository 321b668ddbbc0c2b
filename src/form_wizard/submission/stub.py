"""In-memory submitter for previews, mock mode, and tests."""

from __future__ import annotations

import asyncio

from form_wizard.models.answers import SubmissionPayload
from form_wizard.submission.base import Submitter


class StubSubmitter(Submitter):
    """Answers every submission with a fixed result and records what it received."""

    def __init__(
        self,
        accept: bool = True,
        latency: float = 0.0,
        error: Exception | None = None,
    ) -> None:
        self.accept = accept
        self.latency = latency
        self.error = error
        self.received: list[SubmissionPayload] = []

    async def submit(self, payload: SubmissionPayload) -> bool:
        self.received.append(payload)
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        if self.error is not None:
            raise self.error
        return self.accept
