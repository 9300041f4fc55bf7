"""Scrolling display for command feedback."""

from textual.containers import VerticalScroll
from textual.widgets import Static


class ResultDisplay(VerticalScroll):
    """Scrolling container showing echoed commands and their results."""

    DEFAULT_CSS = """
    ResultDisplay {
        height: 1fr;
        padding: 0 1;
    }
    ResultDisplay .command-echo {
        color: $accent;
        margin-top: 1;
    }
    ResultDisplay .command-error {
        color: $error;
    }
    """

    def add_command(self, text: str) -> None:
        """Echo a submitted command."""
        self.mount(Static(f"❯ {text}", classes="command-echo", markup=False))
        self.scroll_end(animate=False)

    def add_feedback(self, text: str) -> None:
        """Show the feedback from a successful command."""
        self.mount(Static(text, classes="command-feedback", markup=False))
        self.scroll_end(animate=False)

    def add_error(self, text: str) -> None:
        """Show a command failure."""
        self.mount(Static(text, classes="command-error", markup=False))
        self.scroll_end(animate=False)

    def clear(self) -> None:
        """Remove all child widgets from the display."""
        for child in list(self.children):
            child.remove()
