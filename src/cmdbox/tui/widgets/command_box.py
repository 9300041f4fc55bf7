"""Single-line command entry widget with history navigation."""

from textual import events
from textual.message import Message
from textual.widgets import TextArea

from cmdbox.history import HistoryBuffer

ERROR_CLASS = "error"


def single_line(text: str) -> str:
    """Join the lines of text with spaces."""
    return " ".join(text.splitlines())


class CommandBox(TextArea):
    """Input widget where commands are typed and submitted.

    Owns one HistoryBuffer. Up/Down browse it, every edit the user makes is
    written into the entry under the history cursor, and Enter commits the
    text and opens a fresh empty draft.
    """

    DEFAULT_CSS = """
    CommandBox {
        height: 1;
        border: none;
        padding: 0;
    }
    CommandBox:focus {
        border: none;
    }
    CommandBox.error {
        color: $error;
    }
    """

    class Submitted(Message):
        """Posted when the user submits a command."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    def __init__(self, default: str = "") -> None:
        super().__init__(language=None, show_line_numbers=False, soft_wrap=False)
        self._default = default
        self._command_history: HistoryBuffer[str] = HistoryBuffer(default)

    @property
    def command_history(self) -> HistoryBuffer[str]:
        """History buffer driven by this widget."""
        return self._command_history

    def indicate_failure(self) -> None:
        """Style the box to show that the last command failed."""
        self.add_class(ERROR_CLASS)

    def _show(self, text: str) -> None:
        """Replace the text without it counting as a user edit."""
        with self.prevent(TextArea.Changed):
            self.text = text
        self.move_cursor((0, len(text)))
        self.remove_class(ERROR_CLASS)

    def _commit(self, text: str) -> None:
        """Record a submitted command and open a fresh draft."""
        self._command_history.pop()
        self._command_history.restore()
        self._command_history.push(text)
        self._command_history.push(self._default)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Write user edits into the entry under the history cursor."""
        if event.text_area is not self:
            return
        text = self.text
        if "\n" in text or "\r" in text:
            # Pasted or inserted line breaks
            text = single_line(text)
            self._show(text)
        self._command_history.set_current_state(text)
        self.remove_class(ERROR_CLASS)

    async def _on_key(self, event: events.Key) -> None:
        """Handle key events."""
        if event.key == "up":
            event.prevent_default()
            event.stop()
            self._show(self._command_history.back())
            return

        if event.key == "down":
            event.prevent_default()
            event.stop()
            self._show(self._command_history.forward())
            return

        if event.key in ("shift+enter", "alt+enter"):
            event.prevent_default()
            event.stop()
            return

        if event.key == "enter":
            event.prevent_default()
            event.stop()
            text = single_line(self.text)
            if not text:
                return
            self._commit(text)
            self._show(self._default)
            self.post_message(CommandBox.Submitted(text))
            return

        await super()._on_key(event)
