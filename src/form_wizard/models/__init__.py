"""Form answers, screen state, and action models."""

from form_wizard.models.actions import (
    Action,
    ReceiveSubmitResult,
    ReturnToDateOfBirth,
    ReturnToJob,
    ReturnToName,
    Submit,
)
from form_wizard.models.answers import FormAnswers, SubmissionPayload, SubmissionResult
from form_wizard.models.state import ScreenState

__all__ = [
    "Action",
    "FormAnswers",
    "ReceiveSubmitResult",
    "ReturnToDateOfBirth",
    "ReturnToJob",
    "ReturnToName",
    "ScreenState",
    "Submit",
    "SubmissionPayload",
    "SubmissionResult",
]
