"""Runtime configuration for cmdbox."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

ENV_RECORDS = "CMDBOX_RECORDS"
ENV_LOG_FILE = "CMDBOX_LOG_FILE"
ENV_LOG_LEVEL = "CMDBOX_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CmdboxConfig:
    """Settings for the command box application.

    Attributes:
        records_path: JSON file holding the contact records, or None for none.
        log_file: File to write logs to. Logging is disabled when None.
        log_level: Name of the logging level used when log_file is set.
    """

    records_path: str | None = None
    log_file: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def load(cls, **overrides: str | None) -> CmdboxConfig:
        """Build config from environment variables, then explicit overrides.

        Overrides whose value is None are ignored, so argparse defaults can be
        passed straight through.

        Raises:
            TypeError: If an override names a field CmdboxConfig does not have.
            ValueError: If the resulting log level is not a known level name.
        """
        config = cls(
            records_path=os.environ.get(ENV_RECORDS) or None,
            log_file=os.environ.get(ENV_LOG_FILE) or None,
            log_level=os.environ.get(ENV_LOG_LEVEL, "WARNING"),
        )
        for name, value in overrides.items():
            if not hasattr(config, name):
                raise TypeError(f"Unknown config option: {name}")
            if value is not None:
                setattr(config, name, value)
        config.log_level = config.log_level.upper()
        if config.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {config.log_level}")
        return config

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)
