"""Tests for the Textual review screen."""

from __future__ import annotations

import pytest
from textual.widgets import Button

from form_wizard.confirmation.app import FormWizardApp
from form_wizard.confirmation.mock_data import build_incomplete_answers, build_mock_answers
from form_wizard.confirmation.screens.final import FinalScreen, _action_for_row, _row_values
from form_wizard.confirmation.widgets.labelled_row import LabelledRow
from form_wizard.final_screen.environment import FinalScreenEnvironment
from form_wizard.final_screen.reducer import NavigationSignal
from form_wizard.models.actions import ReturnToDateOfBirth, ReturnToJob, ReturnToName
from form_wizard.models.state import ScreenState
from form_wizard.submission.stub import StubSubmitter


def _make_app(answers=None) -> FormWizardApp:
    return FormWizardApp(
        answers=answers or build_mock_answers(),
        environment=FinalScreenEnvironment(submit=StubSubmitter().submit),
    )


class TestRowValues:
    def test_complete_answers(self) -> None:
        values = _row_values(ScreenState.from_answers(build_mock_answers()))
        assert values == {
            "first_name": "Rhys",
            "last_name": "Morgan",
            "date_of_birth": "14 Mar 1992",
            "job": "iOS Developer",
        }

    def test_absent_job_shows_dash(self) -> None:
        values = _row_values(ScreenState.from_answers(build_incomplete_answers()))
        assert values["job"] == "-"
        assert values["first_name"] == ""


class TestActionForRow:
    def test_rows_map_to_return_actions(self) -> None:
        assert _action_for_row("row-first-name") == ReturnToName()
        assert _action_for_row("row-last-name") == ReturnToName()
        assert _action_for_row("row-date-of-birth") == ReturnToDateOfBirth()
        assert _action_for_row("row-job") == ReturnToJob()

    def test_unknown_row(self) -> None:
        assert _action_for_row("row-nope") is None
        assert _action_for_row(None) is None


class TestFinalScreen:
    @pytest.mark.asyncio
    async def test_complete_answers_enable_submit(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, FinalScreen)
            assert app.screen.query_one("#btn-submit", Button).disabled is False
            for row in app.screen.query(LabelledRow):
                assert not row.has_class("flagged")

    @pytest.mark.asyncio
    async def test_incomplete_answers_flag_rows_and_disable_submit(self) -> None:
        app = _make_app(build_incomplete_answers())
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            assert screen.query_one("#btn-submit", Button).disabled is True
            assert screen.query_one("#row-first-name", LabelledRow).has_class("flagged")
            assert screen.query_one("#row-job", LabelledRow).has_class("flagged")
            assert not screen.query_one("#row-last-name", LabelledRow).has_class("flagged")
            assert not screen.query_one("#row-date-of-birth", LabelledRow).has_class("flagged")
            assert screen.query_one("#row-job", LabelledRow).value == "-"
            assert screen.query_one("#row-last-name", LabelledRow).value == "Morgan"

    @pytest.mark.asyncio
    async def test_selecting_row_returns_to_step(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            app.screen.query_one("#row-date-of-birth", LabelledRow).action_press()
            await pilot.pause()
        assert app.return_value == NavigationSignal.RETURN_TO_DATE_OF_BIRTH

    @pytest.mark.asyncio
    async def test_render_in_flight_state(self) -> None:
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            in_flight = app.store.state.model_copy(update={"submission_in_flight": True})
            screen.render_state(in_flight)
            assert screen.query_one("#submitting").has_class("visible")
            assert screen.query_one("#form").disabled is True

            screen.render_state(
                in_flight.model_copy(
                    update={"submission_in_flight": False, "submission_error": "HTTP 503"}
                )
            )
            assert not screen.query_one("#submitting").has_class("visible")
            assert screen.query_one("#form").disabled is False
