"""Answers collected by earlier wizard steps and the submission wire types."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FormAnswers(BaseModel):
    """What the user entered on the name, date-of-birth and job steps.
    The review screen reads these but never edits them."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    date_of_birth: datetime
    job: str | None = None


class SubmissionPayload(BaseModel):
    """Serializable projection of the answers sent to the remote endpoint.
    Unlike FormAnswers, the job is required."""

    first_name: str
    last_name: str
    date_of_birth: datetime
    job: str


class SubmissionResult(BaseModel):
    """Outcome of one submission, fed back into the screen as an action."""

    success: bool
    error: str | None = None

    @classmethod
    def succeeded(cls) -> SubmissionResult:
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> SubmissionResult:
        return cls(success=False, error=error)
