"""cmdbox: a terminal command box with navigable input history."""

from cmdbox.history import HistoryBuffer

__version__ = "0.1.0"

__all__ = ["HistoryBuffer", "__version__"]
