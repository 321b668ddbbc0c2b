"""Tests for the pure review screen reducer."""

from datetime import datetime

import pytest

from form_wizard.final_screen.reducer import (
    NavigateEffect,
    NavigationSignal,
    SubmitEffect,
    reduce,
)
from form_wizard.models.actions import (
    ReceiveSubmitResult,
    ReturnToDateOfBirth,
    ReturnToJob,
    ReturnToName,
    Submit,
)
from form_wizard.models.answers import SubmissionPayload, SubmissionResult
from form_wizard.models.state import ScreenState

DOB = datetime(1992, 3, 14)


def _make_state(**overrides) -> ScreenState:
    fields = {
        "first_name": "Rhys",
        "last_name": "Morgan",
        "date_of_birth": DOB,
        "job": "iOS Developer",
    }
    fields.update(overrides)
    return ScreenState(**fields)


class TestSubmit:
    def test_sets_in_flight_and_emits_one_submission(self) -> None:
        state, effects = reduce(_make_state(), Submit())
        assert state.submission_in_flight is True
        assert effects == [
            SubmitEffect(
                payload=SubmissionPayload(
                    first_name="Rhys",
                    last_name="Morgan",
                    date_of_birth=DOB,
                    job="iOS Developer",
                )
            )
        ]

    def test_does_not_mutate_input_state(self) -> None:
        before = _make_state()
        reduce(before, Submit())
        assert before.submission_in_flight is False

    def test_no_job_is_noop(self) -> None:
        before = _make_state(job=None)
        state, effects = reduce(before, Submit())
        assert state is before
        assert effects == []

    def test_second_submit_while_in_flight_is_noop(self) -> None:
        in_flight, _ = reduce(_make_state(), Submit())
        state, effects = reduce(in_flight, Submit())
        assert state is in_flight
        assert effects == []

    def test_clears_previous_error(self) -> None:
        state, _ = reduce(_make_state(submission_error="HTTP 500"), Submit())
        assert state.submission_error is None

    def test_empty_job_still_submits(self) -> None:
        # Only an absent job blocks the reducer; the view blocks empty strings
        state, effects = reduce(_make_state(job=""), Submit())
        assert state.submission_in_flight is True
        assert len(effects) == 1


class TestReceiveSubmitResult:
    def test_success_clears_in_flight_and_signals_submitted(self) -> None:
        in_flight = _make_state(submission_in_flight=True)
        state, effects = reduce(in_flight, ReceiveSubmitResult(result=SubmissionResult.succeeded()))
        assert state.submission_in_flight is False
        assert state.submission_error is None
        assert state.answers == in_flight.answers
        assert effects == [NavigateEffect(signal=NavigationSignal.SUBMITTED)]

    def test_failure_clears_in_flight_and_records_error(self) -> None:
        in_flight = _make_state(submission_in_flight=True)
        state, effects = reduce(
            in_flight, ReceiveSubmitResult(result=SubmissionResult.failed("HTTP 503"))
        )
        assert state.submission_in_flight is False
        assert state.submission_error == "HTTP 503"
        assert state.answers == in_flight.answers
        assert effects == []

    def test_failure_without_message(self) -> None:
        state, _ = reduce(
            _make_state(submission_in_flight=True),
            ReceiveSubmitResult(result=SubmissionResult(success=False)),
        )
        assert state.submission_error == "Submission failed"

    def test_result_when_not_in_flight(self) -> None:
        state, _ = reduce(_make_state(), ReceiveSubmitResult(result=SubmissionResult.succeeded()))
        assert state.submission_in_flight is False


class TestReturnActions:
    @pytest.mark.parametrize(
        ("action", "signal"),
        [
            (ReturnToName(), NavigationSignal.RETURN_TO_NAME),
            (ReturnToDateOfBirth(), NavigationSignal.RETURN_TO_DATE_OF_BIRTH),
            (ReturnToJob(), NavigationSignal.RETURN_TO_JOB),
        ],
    )
    def test_state_unchanged_one_signal(self, action, signal: NavigationSignal) -> None:
        before = _make_state()
        state, effects = reduce(before, action)
        assert state is before
        assert effects == [NavigateEffect(signal=signal)]

    def test_allowed_while_in_flight(self) -> None:
        before = _make_state(submission_in_flight=True)
        state, effects = reduce(before, ReturnToJob())
        assert state is before
        assert effects == [NavigateEffect(signal=NavigationSignal.RETURN_TO_JOB)]


class TestUnknownAction:
    def test_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown action"):
            reduce(_make_state(), object())  # type: ignore[arg-type]
