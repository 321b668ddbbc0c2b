"""Pure transition function for the review screen.

``reduce`` never performs I/O. It returns the next state together with the
effects the store should run: at most one submission, or one outbound
navigation signal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from form_wizard.models.actions import (
    Action,
    ReceiveSubmitResult,
    ReturnToDateOfBirth,
    ReturnToJob,
    ReturnToName,
    Submit,
)
from form_wizard.models.answers import SubmissionPayload
from form_wizard.models.state import ScreenState

logger = logging.getLogger(__name__)


class NavigationSignal(StrEnum):
    RETURN_TO_NAME = "return_to_name"
    RETURN_TO_DATE_OF_BIRTH = "return_to_date_of_birth"
    RETURN_TO_JOB = "return_to_job"
    SUBMITTED = "submitted"


@dataclass(frozen=True)
class SubmitEffect:
    """Send the payload to the injected submission operation."""

    payload: SubmissionPayload


@dataclass(frozen=True)
class NavigateEffect:
    """Tell the wizard's navigator to move somewhere else."""

    signal: NavigationSignal


Effect = SubmitEffect | NavigateEffect

_RETURN_SIGNALS: dict[type, NavigationSignal] = {
    ReturnToName: NavigationSignal.RETURN_TO_NAME,
    ReturnToDateOfBirth: NavigationSignal.RETURN_TO_DATE_OF_BIRTH,
    ReturnToJob: NavigationSignal.RETURN_TO_JOB,
}


def reduce(state: ScreenState, action: Action) -> tuple[ScreenState, list[Effect]]:
    """Compute the next state and the effects to run for ``action``."""
    if isinstance(action, Submit):
        payload = state.to_payload()
        if payload is None:
            logger.debug("Submit ignored: no job")
            return state, []
        if state.submission_in_flight:
            logger.debug("Submit ignored: submission already in flight")
            return state, []
        new_state = state.model_copy(
            update={"submission_in_flight": True, "submission_error": None}
        )
        return new_state, [SubmitEffect(payload=payload)]

    if isinstance(action, ReceiveSubmitResult):
        result = action.result
        if result.success:
            new_state = state.model_copy(
                update={"submission_in_flight": False, "submission_error": None}
            )
            return new_state, [NavigateEffect(signal=NavigationSignal.SUBMITTED)]
        new_state = state.model_copy(
            update={
                "submission_in_flight": False,
                "submission_error": result.error or "Submission failed",
            }
        )
        return new_state, []

    signal = _RETURN_SIGNALS.get(type(action))
    if signal is None:
        raise ValueError(f"Unknown action: {action!r}")
    return state, [NavigateEffect(signal=signal)]
