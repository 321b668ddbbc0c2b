"""Main Textual application hosting the review screen.

The app stands in for the wizard's navigator: any outbound navigation signal
(return to a step, or submitted) ends the app with that signal as its result.
"""

from __future__ import annotations

import logging

from textual.app import App

from form_wizard.confirmation.screens.final import FinalScreen
from form_wizard.final_screen.environment import FinalScreenEnvironment
from form_wizard.final_screen.reducer import NavigationSignal
from form_wizard.final_screen.store import FinalScreenStore
from form_wizard.models.answers import FormAnswers
from form_wizard.submission.stub import StubSubmitter

logger = logging.getLogger(__name__)


class FormWizardApp(App[NavigationSignal]):
    """Form Wizard — review step."""

    TITLE = "Form Wizard"
    SUB_TITLE = "Review"

    CSS = """
    Screen {
        background: $background;
    }
    """

    def __init__(
        self,
        answers: FormAnswers,
        environment: FinalScreenEnvironment,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.answers = answers
        self.environment = environment
        self.store: FinalScreenStore | None = None

    def on_mount(self) -> None:
        self.store = FinalScreenStore(self.answers, self.environment, navigator=self.navigate)
        self.push_screen(FinalScreen(self.store))

    def navigate(self, signal: NavigationSignal) -> None:
        logger.info("Leaving review screen: %s", signal)
        self.exit(signal)


def run_review(
    answers: FormAnswers | None = None,
    environment: FinalScreenEnvironment | None = None,
) -> NavigationSignal | None:
    """Launch the review screen and return the signal it ended with.

    Without answers, mock answers are shown; without an environment, a stub
    submitter that always accepts is used.
    """
    if answers is None:
        from form_wizard.confirmation.mock_data import build_mock_answers

        answers = build_mock_answers()
    if environment is None:
        environment = FinalScreenEnvironment(submit=StubSubmitter().submit)

    app = FormWizardApp(answers=answers, environment=environment)
    return app.run()


if __name__ == "__main__":
    run_review()
