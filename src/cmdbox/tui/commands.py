"""Command registry for the command box interpreter."""

from collections.abc import Callable
from dataclasses import dataclass

from cmdbox.exceptions import ParseError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successfully executed command.

    Attributes:
        feedback: Text to show the user.
        exit: Whether the application should quit afterwards.
    """

    feedback: str
    exit: bool = False


CommandHandler = Callable[[str], CommandResult]


class CommandRegistry:
    """Registry mapping command words to handlers.

    Commands are registered with a name (e.g., "find"), a handler callable,
    and a description. The handler receives the argument string (everything
    after the command word, stripped) and returns a CommandResult. Handlers
    report malformed arguments with ParseError and failed execution with
    CommandError.
    """

    def __init__(self) -> None:
        self._commands: dict[str, tuple[CommandHandler, str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        description: str,
        usage: str = "",
    ) -> None:
        """Register a command. Re-registering a name replaces it."""
        self._commands[name] = (handler, description, usage)

    def list_commands(self) -> list[tuple[str, str]]:
        """Return list of (name, description) tuples, sorted by name."""
        return sorted((name, desc) for name, (_handler, desc, _usage) in self._commands.items())

    def usage(self, name: str) -> str:
        """Usage text for a command, or an empty string."""
        entry = self._commands.get(name)
        return entry[2] if entry else ""

    def resolve(self, text: str) -> tuple[CommandHandler, str] | None:
        """Resolve a command string to (handler, args) without executing."""
        parts = text.strip().split(maxsplit=1)
        if not parts:
            return None
        cmd_name = parts[0]
        args = parts[1].strip() if len(parts) > 1 else ""
        if cmd_name not in self._commands:
            return None
        handler, _desc, _usage = self._commands[cmd_name]
        return handler, args

    def execute(self, text: str) -> CommandResult:
        """Parse and run a command string.

        Raises:
            ParseError: If text is blank or names an unknown command, or the
                handler rejects its arguments.
            CommandError: If the handler cannot carry out the command.
        """
        if not text.strip():
            raise ParseError("No command given. Type 'help' to see available commands.")
        resolved = self.resolve(text)
        if resolved is None:
            raise ParseError(f"Unknown command: {text.split()[0]}")
        handler, args = resolved
        return handler(args)
