"""Review screens."""

from form_wizard.confirmation.screens.final import FinalScreen

__all__ = [
    "FinalScreen",
]
