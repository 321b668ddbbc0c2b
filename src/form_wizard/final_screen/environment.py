"""Injected dependencies for the review screen's effects."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from form_wizard.models.answers import SubmissionPayload
from form_wizard.scheduling import AsyncioScheduler, Scheduler

# Seconds a submission result is held back before it reaches the reducer
DEFAULT_RESPONSE_DELAY = 0.8

SubmitFn = Callable[[SubmissionPayload], Awaitable[bool]]
CloseFn = Callable[[], Awaitable[None]]


@dataclass
class FinalScreenEnvironment:
    """Submission operation, scheduler, and the delay applied before results land.

    ``close`` releases whatever backs ``submit`` (an HTTP client, say). The
    store awaits it once, on its own loop, when it is torn down.
    """

    submit: SubmitFn
    scheduler: Scheduler = field(default_factory=AsyncioScheduler)
    response_delay: float = DEFAULT_RESPONSE_DELAY
    close: CloseFn | None = None
