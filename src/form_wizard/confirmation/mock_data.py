"""Mock answers for previews, mock mode, and tests."""

from __future__ import annotations

from datetime import datetime

from form_wizard.models.answers import FormAnswers

MOCK_DATE_OF_BIRTH = datetime(1992, 3, 14)


def build_mock_answers() -> FormAnswers:
    return FormAnswers(
        first_name="Rhys",
        last_name="Morgan",
        date_of_birth=MOCK_DATE_OF_BIRTH,
        job="iOS Developer",
    )


def build_incomplete_answers() -> FormAnswers:
    """Answers with a missing first name and no job, for exercising the flagged rows."""
    return FormAnswers(
        first_name="",
        last_name="Morgan",
        date_of_birth=MOCK_DATE_OF_BIRTH,
        job=None,
    )
