"""Textual rendering of the review screen."""
