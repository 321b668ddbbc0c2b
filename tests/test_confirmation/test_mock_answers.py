"""Tests for mock answers."""

from form_wizard.confirmation.mock_data import build_incomplete_answers, build_mock_answers
from form_wizard.models.state import ScreenState


class TestMockAnswers:
    def test_mock_answers_are_complete(self) -> None:
        answers = build_mock_answers()
        assert answers.first_name == "Rhys"
        assert answers.job == "iOS Developer"
        assert not ScreenState.from_answers(answers).is_incomplete

    def test_incomplete_answers(self) -> None:
        state = ScreenState.from_answers(build_incomplete_answers())
        assert state.is_incomplete
        assert state.flagged_fields == ["first_name", "job"]
