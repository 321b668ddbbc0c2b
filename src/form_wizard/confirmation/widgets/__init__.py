"""Review screen widgets."""

from form_wizard.confirmation.widgets.labelled_row import LabelledRow

__all__ = [
    "LabelledRow",
]
