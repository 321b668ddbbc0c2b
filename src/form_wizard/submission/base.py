"""Pluggable submission interface.

A submitter delivers the collected answers somewhere: an HTTP API, a queue,
or an in-memory stub. The review screen only sees ``submit``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from form_wizard.models.answers import SubmissionPayload


class Submitter(ABC):
    """Abstract interface for sending a SubmissionPayload."""

    @abstractmethod
    async def submit(self, payload: SubmissionPayload) -> bool:
        """Send the payload. Return True when the receiver accepted it.

        Transport failures may raise; the store turns them into failed results.
        """

    async def aclose(self) -> None:
        """Release any resources held by the submitter."""
