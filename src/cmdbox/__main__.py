"""Entry point for cmdbox."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cmdbox.config import CmdboxConfig
from cmdbox.exceptions import RecordError
from cmdbox.records import Record, load_records
from cmdbox.tui.app import CommandBoxApp

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Command box with input history")
    parser.add_argument("--records", type=str, help="JSON file of contacts to load")
    parser.add_argument("--log-file", type=str, help="Write logs to this file")
    parser.add_argument("--log-level", type=str, help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def configure_logging(config: CmdboxConfig) -> None:
    """Send logs to the configured file. The terminal belongs to the TUI."""
    if config.log_file is None:
        logging.getLogger("cmdbox").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=config.log_file,
        level=config.log_level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Run the command box."""
    args = parse_args(argv)
    try:
        config = CmdboxConfig.load(
            records_path=args.records,
            log_file=args.log_file,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config)

    records: list[Record] = []
    if config.records_path:
        try:
            records = load_records(Path(config.records_path))
        except RecordError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    logger.info("Starting cmdbox with %d records", len(records))
    CommandBoxApp(records=records).run()


if __name__ == "__main__":
    main()
