"""Submission operations that can be injected into the review screen."""

from form_wizard.submission.base import Submitter
from form_wizard.submission.http import HttpSubmitter
from form_wizard.submission.stub import StubSubmitter

__all__ = [
    "HttpSubmitter",
    "StubSubmitter",
    "Submitter",
]
