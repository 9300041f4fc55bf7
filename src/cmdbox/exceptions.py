"""Exception hierarchy for cmdbox."""


class CmdboxError(Exception):
    """Base exception for all cmdbox errors."""


class ParseError(CmdboxError):
    """Raised when user input cannot be parsed into a command."""


class CommandError(CmdboxError):
    """Raised when a well-formed command cannot be executed."""


class RecordError(CmdboxError):
    """Raised when record data is missing or malformed."""
