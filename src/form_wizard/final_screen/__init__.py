"""The final review screen's controller: reducer, environment, and store."""

from form_wizard.final_screen.environment import FinalScreenEnvironment
from form_wizard.final_screen.reducer import (
    Effect,
    NavigateEffect,
    NavigationSignal,
    SubmitEffect,
    reduce,
)
from form_wizard.final_screen.store import FinalScreenStore

__all__ = [
    "Effect",
    "FinalScreenEnvironment",
    "FinalScreenStore",
    "NavigateEffect",
    "NavigationSignal",
    "SubmitEffect",
    "reduce",
]
