"""Actions the review screen accepts.

Navigation actions carry no data. ReceiveSubmitResult is dispatched by the
store when a submission effect completes; the view never sends it.
"""

from __future__ import annotations

from pydantic import BaseModel

from form_wizard.models.answers import SubmissionResult


class ReturnToName(BaseModel):
    """Go back to the name step."""


class ReturnToDateOfBirth(BaseModel):
    """Go back to the date-of-birth step."""


class ReturnToJob(BaseModel):
    """Go back to the job step."""


class Submit(BaseModel):
    """Send the answers to the remote endpoint."""


class ReceiveSubmitResult(BaseModel):
    """A submission finished."""

    result: SubmissionResult


Action = ReturnToName | ReturnToDateOfBirth | ReturnToJob | Submit | ReceiveSubmitResult
