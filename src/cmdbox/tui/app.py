"""Main Textual application for cmdbox."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import Static

from cmdbox.exceptions import CommandError, ParseError
from cmdbox.records import Record
from cmdbox.search import FIND_USAGE, filter_records, parse_find
from cmdbox.tui.commands import CommandRegistry, CommandResult
from cmdbox.tui.widgets.command_box import CommandBox
from cmdbox.tui.widgets.result_display import ResultDisplay

logger = logging.getLogger(__name__)

ACCENT = "#00bcd4"

SHOW_USAGE = "show: Shows one contact in full.\nParameters: INDEX (a positive integer)"


class CommandBoxApp(App[None]):
    """Textual app for browsing contacts through typed commands.

    Args:
        records: Contacts available to list, find and show.
    """

    CSS = f"""
    Screen {{
        layout: vertical;
        border: solid {ACCENT};
    }}
    #input-row {{
        height: 1;
    }}
    #prompt {{
        width: 2;
        height: 1;
        color: {ACCENT};
    }}
    #input-row CommandBox {{
        width: 1fr;
    }}
    #help-bar {{
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }}
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(self, records: Sequence[Record] = ()) -> None:
        super().__init__()
        self._records = list(records)
        self._command_registry = CommandRegistry()
        self._register_builtin_commands()

    def _register_builtin_commands(self) -> None:
        """Register the default commands."""
        registry = self._command_registry
        registry.register("help", self._cmd_help, "Show available commands")
        registry.register("list", self._cmd_list, "List all contacts")
        registry.register("find", self._cmd_find, "Find contacts by keywords", FIND_USAGE)
        registry.register("show", self._cmd_show, "Show one contact in full", SHOW_USAGE)
        registry.register("clear", self._cmd_clear, "Clear the result display")
        registry.register("exit", self._cmd_exit, "Exit")

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield ResultDisplay()
        with Horizontal(id="input-row"):
            yield Static("❯", id="prompt")
            yield CommandBox()
        yield Static(
            "Enter: run │ ↑↓: history │ help: commands │ Ctrl+C: quit",
            id="help-bar",
        )

    def on_mount(self) -> None:
        """Focus the command box on startup."""
        try:
            self.query_one(CommandBox).focus()
        except NoMatches:
            pass

    def on_command_box_submitted(self, event: CommandBox.Submitted) -> None:
        """Run a submitted command and show its outcome."""
        output = self.query_one(ResultDisplay)
        output.add_command(event.text)
        logger.debug("Executing command: %r", event.text)
        try:
            result = self._command_registry.execute(event.text)
        except (ParseError, CommandError) as e:
            logger.info("Command failed: %r: %s", event.text, e)
            output.add_error(str(e))
            self.query_one(CommandBox).indicate_failure()
            return
        if result.feedback:
            output.add_feedback(result.feedback)
        if result.exit:
            self.exit()

    # --- Built-in command handlers ---

    def _cmd_help(self, args: str) -> CommandResult:
        """Show help."""
        lines = ["Available commands:"]
        for name, desc in self._command_registry.list_commands():
            lines.append(f"  {name:10s} {desc}")
        return CommandResult("\n".join(lines))

    def _cmd_list(self, args: str) -> CommandResult:
        """List every contact."""
        if not self._records:
            return CommandResult("No contacts.")
        lines = [record.format(i) for i, record in enumerate(self._records, 1)]
        return CommandResult("\n".join(lines))

    def _cmd_find(self, args: str) -> CommandResult:
        """List contacts matching the find filter."""
        matches = filter_records(self._records, parse_find(args))
        noun = "contact" if len(matches) == 1 else "contacts"
        lines = [f"{len(matches)} {noun} listed!"]
        lines.extend(record.format(i) for i, record in enumerate(matches, 1))
        return CommandResult("\n".join(lines))

    def _cmd_show(self, args: str) -> CommandResult:
        """Show a single contact by its 1-based index in the full list."""
        try:
            index = int(args)
        except ValueError:
            raise ParseError(f"Invalid command format!\n{SHOW_USAGE}") from None
        if index < 1:
            raise ParseError(f"Invalid command format!\n{SHOW_USAGE}")
        if index > len(self._records):
            raise CommandError(f"The contact index provided is invalid: {index}")
        return CommandResult(self._records[index - 1].details())

    def _cmd_clear(self, args: str) -> CommandResult:
        """Clear the result display."""
        self.query_one(ResultDisplay).clear()
        return CommandResult("")

    def _cmd_exit(self, args: str) -> CommandResult:
        """Exit the app."""
        return CommandResult("Goodbye.", exit=True)
