"""Contact records searched and listed by the command box."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from cmdbox.exceptions import RecordError

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("phone", "email", "address")


@dataclass(frozen=True)
class Record:
    """A single contact."""

    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: object) -> Record:
        """Build a record from a decoded JSON object.

        Raises:
            RecordError: If data is not an object, lacks a name, or holds
                values of the wrong type.
        """
        if not isinstance(data, dict):
            raise RecordError(f"Record must be an object, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise RecordError("Record is missing a name")
        values: dict[str, str] = {}
        for key in _TEXT_FIELDS:
            value = data.get(key, "")
            if not isinstance(value, str):
                raise RecordError(f"Record {name!r}: {key} must be a string")
            values[key] = value
        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise RecordError(f"Record {name!r}: tags must be a list of strings")
        return cls(name=name.strip(), tags=tuple(tags), **values)

    def format(self, index: int | None = None) -> str:
        """One-line summary, optionally prefixed with a 1-based index."""
        parts = [self.name]
        if self.phone:
            parts.append(self.phone)
        if self.email:
            parts.append(self.email)
        line = " │ ".join(parts)
        if self.tags:
            line += " " + " ".join(f"[{tag}]" for tag in self.tags)
        if index is not None:
            line = f"{index:3d}. {line}"
        return line

    def details(self) -> str:
        """Multi-line description with every field."""
        lines = [
            f"Name:    {self.name}",
            f"Phone:   {self.phone or '-'}",
            f"Email:   {self.email or '-'}",
            f"Address: {self.address or '-'}",
            f"Tags:    {', '.join(self.tags) if self.tags else '-'}",
        ]
        return "\n".join(lines)


def load_records(path: Path) -> list[Record]:
    """Load records from a JSON file containing an array of objects.

    Raises:
        RecordError: If the file cannot be read or parsed, or an entry is
            malformed. The message names the file.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecordError(f"Cannot read records file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordError(f"Invalid JSON in records file {path}: {e}") from e

    if not isinstance(raw, list):
        raise RecordError(f"Records file {path} must contain a JSON array")

    records: list[Record] = []
    for i, item in enumerate(raw, 1):
        try:
            records.append(Record.from_dict(item))
        except RecordError as e:
            raise RecordError(f"{path}, entry {i}: {e}") from e
    logger.info("Loaded %d records from %s", len(records), path)
    return records
