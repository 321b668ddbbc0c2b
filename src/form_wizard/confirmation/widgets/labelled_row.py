"""LabelledRow — a selectable "label ....... value" line."""

from __future__ import annotations

from dataclasses import dataclass

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Label, Static


class LabelledRow(Widget, can_focus=True):
    """Label on the left, value on the right. Enter or a click posts Pressed.

    Rows with the ``flagged`` class render in the error colour to draw the
    user's attention to a missing answer.
    """

    DEFAULT_CSS = """
    LabelledRow {
        height: 1;
        padding: 0 1;
    }

    LabelledRow Horizontal {
        height: 1;
    }

    LabelledRow .row-label {
        width: 1fr;
    }

    LabelledRow .row-value {
        width: auto;
        text-align: right;
    }

    LabelledRow:focus {
        background: $boost;
    }

    LabelledRow.flagged {
        color: $error;
    }
    """

    BINDINGS = [
        ("enter", "press", "Edit"),
    ]

    @dataclass
    class Pressed(Message):
        """User selected the row."""

        row: LabelledRow

    def __init__(self, label: str, value: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.row_label = label
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Label(self.row_label, classes="row-label")
            yield Static(self._value, classes="row-value")

    def update_value(self, value: str, flagged: bool = False) -> None:
        """Show a new value and toggle the warning style."""
        self._value = value
        self.query_one(".row-value", Static).update(value)
        self.set_class(flagged, "flagged")

    def on_click(self, event: events.Click) -> None:
        self.action_press()

    def action_press(self) -> None:
        self.post_message(self.Pressed(row=self))
