"""FinalScreen — shows the collected answers and submits them."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from form_wizard.confirmation.widgets.labelled_row import LabelledRow
from form_wizard.final_screen.store import FinalScreenStore
from form_wizard.models.actions import (
    Action,
    ReturnToDateOfBirth,
    ReturnToJob,
    ReturnToName,
    Submit,
)
from form_wizard.models.state import ScreenState

DATE_FORMAT = "%d %b %Y"

# (row id, label, state field, action sent when the row is selected)
_ROWS: list[tuple[str, str, str, type]] = [
    ("row-first-name", "First name", "first_name", ReturnToName),
    ("row-last-name", "Last name", "last_name", ReturnToName),
    ("row-date-of-birth", "Date of birth", "date_of_birth", ReturnToDateOfBirth),
    ("row-job", "Job", "job", ReturnToJob),
]


def _row_values(state: ScreenState) -> dict[str, str]:
    """Display text for every row, keyed by state field."""
    return {
        "first_name": state.first_name,
        "last_name": state.last_name,
        "date_of_birth": state.date_of_birth.strftime(DATE_FORMAT),
        "job": state.job or "-",
    }


def _action_for_row(row_id: str | None) -> Action | None:
    for rid, _, _, action_cls in _ROWS:
        if rid == row_id:
            return action_cls()
    return None


class FinalScreen(Screen):
    """Review step: every answer is a row that jumps back to its step; Submit sends them."""

    DEFAULT_CSS = """
    FinalScreen {
        layers: base overlay;
        align: center middle;
    }

    FinalScreen .main-content {
        width: 1fr;
        height: 1fr;
        padding: 1 4;
    }

    FinalScreen .section-heading {
        text-style: bold;
        padding: 1 0;
        color: $primary;
    }

    FinalScreen .answers-panel {
        padding: 1 2;
        border: round $secondary;
        background: $surface;
        height: auto;
    }

    FinalScreen #submit-error {
        color: $error;
        padding: 1 0 0 0;
    }

    FinalScreen #btn-submit {
        margin: 2 0;
        min-width: 20;
    }

    FinalScreen #submitting {
        layer: overlay;
        display: none;
        width: auto;
        height: auto;
        padding: 1 3;
        background: $panel;
        border: round $primary;
    }

    FinalScreen #submitting.visible {
        display: block;
    }
    """

    BINDINGS = [
        ("ctrl+s", "submit", "Submit"),
        ("q", "app.quit", "Quit"),
    ]

    TITLE = "Submit"

    def __init__(self, store: FinalScreenStore, **kwargs) -> None:
        super().__init__(**kwargs)
        self.store = store
        self._unsubscribe: Callable[[], None] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        values = _row_values(self.store.state)
        with Vertical(classes="main-content", id="form"):
            yield Static("Confirm Your Info", classes="section-heading")
            with Vertical(classes="answers-panel"):
                for row_id, label, field, _ in _ROWS:
                    yield LabelledRow(label, values[field], id=row_id)
            yield Static("", id="submit-error")
            yield Button("Submit", id="btn-submit", variant="success")
        yield Static("Submitting", id="submitting")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self.render_state)
        self.render_state(self.store.state)

    async def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        await self.store.close()

    def render_state(self, state: ScreenState) -> None:
        """Bring every widget in line with ``state``."""
        values = _row_values(state)
        flagged = set(state.flagged_fields)
        for row_id, _, field, _ in _ROWS:
            self.query_one(f"#{row_id}", LabelledRow).update_value(
                values[field], flagged=field in flagged
            )

        self.query_one("#btn-submit", Button).disabled = state.is_incomplete
        self.query_one("#form", Vertical).disabled = state.submission_in_flight
        self.query_one("#submitting", Static).set_class(state.submission_in_flight, "visible")
        self.query_one("#submit-error", Static).update(
            f"Submission failed: {state.submission_error}" if state.submission_error else ""
        )

    def on_labelled_row_pressed(self, event: LabelledRow.Pressed) -> None:
        action = _action_for_row(event.row.id)
        if action is not None:
            self.store.send(action)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-submit":
            self.action_submit()

    def action_submit(self) -> None:
        if self.store.state.is_incomplete:
            self.notify("Fill in the highlighted answers first", severity="warning")
            return
        self.store.send(Submit())
