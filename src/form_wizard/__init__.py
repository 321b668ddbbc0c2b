"""Form wizard final review screen: state, reducer, store, and Textual view."""

__version__ = "0.1.0"
