"""ScreenState — everything the review screen renders."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from form_wizard.models.answers import FormAnswers, SubmissionPayload

# Fields that are rendered with a warning cue when empty
CHECKED_FIELDS = ("first_name", "last_name", "job")


class ScreenState(BaseModel):
    """State of the final review screen.

    Created once from the upstream answers when the screen is entered and
    replaced only by the reducer. ``submission_in_flight`` is true only between
    an accepted Submit and its ReceiveSubmitResult.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    date_of_birth: datetime
    job: str | None = None
    submission_in_flight: bool = False
    submission_error: str | None = None

    @classmethod
    def from_answers(cls, answers: FormAnswers) -> ScreenState:
        return cls(**answers.model_dump())

    @property
    def answers(self) -> FormAnswers:
        return FormAnswers(
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            job=self.job,
        )

    @property
    def is_incomplete(self) -> bool:
        """True when first name, last name or job is missing."""
        return not self.first_name or not self.last_name or not self.job

    @property
    def flagged_fields(self) -> list[str]:
        """Names of the checked fields that are empty or absent."""
        return [name for name in CHECKED_FIELDS if not getattr(self, name)]

    def to_payload(self) -> SubmissionPayload | None:
        """Build the submission payload, or None when there is no job."""
        if self.job is None:
            return None
        return SubmissionPayload(
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            job=self.job,
        )
