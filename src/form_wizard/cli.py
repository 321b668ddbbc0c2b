"""CLI entry point for the form wizard review step."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from form_wizard.models.answers import FormAnswers

app = typer.Typer(
    name="form-wizard",
    help="Form wizard review step: confirm answers and submit them.",
    no_args_is_help=True,
)
console = Console()

_STEP_NAMES = {
    "return_to_name": "name",
    "return_to_date_of_birth": "date of birth",
    "return_to_job": "job",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _build_answers(
    first_name: str,
    last_name: str,
    date_of_birth: datetime | None,
    job: str | None,
    mock: bool,
) -> FormAnswers:
    if mock:
        from form_wizard.confirmation.mock_data import build_mock_answers

        return build_mock_answers()
    if date_of_birth is None:
        console.print("[red]--dob is required unless --mock is given[/red]")
        raise typer.Exit(1)
    return FormAnswers(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        job=job,
    )


def _load_config(config: Path | None, endpoint: str | None, delay: float | None):
    from form_wizard.config import SubmitConfig

    try:
        submit_config = SubmitConfig.from_yaml(config) if config else SubmitConfig.default()
    except (OSError, ValueError) as e:
        console.print(f"[red]Could not load config: {e}[/red]")
        raise typer.Exit(1) from e
    if endpoint:
        submit_config.endpoint = endpoint
    if delay is not None:
        submit_config.response_delay = delay
    return submit_config


def _build_submitter(submit_config, mock: bool):
    from form_wizard.submission.http import HttpSubmitter
    from form_wizard.submission.stub import StubSubmitter

    if mock or not submit_config.endpoint:
        console.print("[dim]Using stub submitter.[/dim]")
        return StubSubmitter()
    return HttpSubmitter(submit_config)


@app.command()
def review(
    first_name: str = typer.Option("", help="First name from the name step"),
    last_name: str = typer.Option("", help="Last name from the name step"),
    dob: datetime | None = typer.Option(None, help="Date of birth (YYYY-MM-DD)"),
    job: str | None = typer.Option(None, help="Job from the job step"),
    endpoint: str | None = typer.Option(None, help="Submission endpoint URL"),
    config: Path | None = typer.Option(None, help="Path to a YAML submission config"),
    delay: float | None = typer.Option(None, help="Seconds to hold the Submitting overlay"),
    mock: bool = typer.Option(False, help="Use mock answers and a stub submitter"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
) -> None:
    """Launch the review screen (Textual TUI)."""
    from form_wizard.confirmation.app import run_review
    from form_wizard.final_screen.environment import FinalScreenEnvironment

    _configure_logging(verbose)
    answers = _build_answers(first_name, last_name, dob, job, mock)
    submit_config = _load_config(config, endpoint, delay)
    submitter = _build_submitter(submit_config, mock)

    environment = FinalScreenEnvironment(
        submit=submitter.submit,
        close=submitter.aclose,
        response_delay=submit_config.response_delay,
    )
    signal = run_review(answers=answers, environment=environment)

    if signal is None:
        console.print("[dim]Review closed without submitting.[/dim]")
    elif signal == "submitted":
        console.print("[green]Submission accepted.[/green]")
    else:
        step = _STEP_NAMES[signal]
        console.print(f"[yellow]Return to the {step} step to edit your answers.[/yellow]")


@app.command()
def submit(
    first_name: str = typer.Option("", help="First name from the name step"),
    last_name: str = typer.Option("", help="Last name from the name step"),
    dob: datetime | None = typer.Option(None, help="Date of birth (YYYY-MM-DD)"),
    job: str | None = typer.Option(None, help="Job from the job step"),
    endpoint: str | None = typer.Option(None, help="Submission endpoint URL"),
    config: Path | None = typer.Option(None, help="Path to a YAML submission config"),
    delay: float | None = typer.Option(None, help="Seconds to wait before reporting the result"),
    mock: bool = typer.Option(False, help="Use mock answers and a stub submitter"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
) -> None:
    """Submit answers without the TUI, through the same review-screen store."""
    from form_wizard.final_screen.environment import FinalScreenEnvironment
    from form_wizard.final_screen.store import FinalScreenStore
    from form_wizard.models.actions import Submit
    from form_wizard.models.state import ScreenState

    _configure_logging(verbose)
    answers = _build_answers(first_name, last_name, dob, job, mock)
    state = ScreenState.from_answers(answers)
    if state.is_incomplete:
        missing = ", ".join(name.replace("_", " ") for name in state.flagged_fields)
        console.print(f"[red]Answers are incomplete, missing: {missing}[/red]")
        raise typer.Exit(1)

    submit_config = _load_config(config, endpoint, delay)
    submitter = _build_submitter(submit_config, mock)

    async def _submit() -> ScreenState:
        environment = FinalScreenEnvironment(
            submit=submitter.submit,
            close=submitter.aclose,
            response_delay=submit_config.response_delay,
        )
        store = FinalScreenStore(state, environment)
        try:
            console.print(f"[dim]Submitting {answers.first_name} {answers.last_name}...[/dim]")
            store.send(Submit())
            await store.wait_idle()
            return store.state
        finally:
            await store.close()

    final_state = asyncio.run(_submit())
    if final_state.submission_error:
        console.print(f"[red]Submission failed: {final_state.submission_error}[/red]")
        raise typer.Exit(1)
    console.print("[green]Submission accepted.[/green]")


if __name__ == "__main__":
    app()
