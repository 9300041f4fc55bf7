"""Keyword filters over contact records for the find command.

Find arguments are a sequence of prefixed queries such as
``n/alice bob t/friends t/colleagues``. Each field's query becomes a predicate
requiring every keyword to match that field, and all field predicates are
combined with AND. Fields that are not mentioned match everything.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from cmdbox.exceptions import ParseError
from cmdbox.records import Record

RecordPredicate = Callable[[Record], bool]

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_TAG = "t/"

FIND_USAGE = (
    "find: Finds contacts matching all of the given keywords.\n"
    "Parameters: [n/NAME...] [p/PHONE...] [e/EMAIL...] [a/ADDRESS...] [t/TAG]...\n"
    "Example: find n/alice t/friends"
)


class RecordField(Enum):
    """Searchable record fields."""

    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    TAG = "tag"


def always_true(record: Record) -> bool:
    """Predicate matching every record."""
    return True


@dataclass
class ArgumentMultimap:
    """Values found for each prefix, in the order they were given."""

    preamble: str = ""
    _values: dict[str, list[str]] = field(default_factory=dict)

    def add(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def value(self, prefix: str) -> str | None:
        """Last value given for prefix, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def all_values(self, prefix: str) -> list[str]:
        """Every value given for prefix."""
        return list(self._values.get(prefix, []))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split an argument string at the given prefixes.

    A prefix only counts at the start of the string or after whitespace, so
    ``n/a/b`` yields a single name value ``a/b``. Values are stripped.
    """
    result = ArgumentMultimap()
    if not prefixes:
        result.preamble = args.strip()
        return result
    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?:^|(?<=\s))({alternatives})")
    matches = list(pattern.finditer(args))
    end_of_preamble = matches[0].start() if matches else len(args)
    result.preamble = args[:end_of_preamble].strip()
    for i, match in enumerate(matches):
        stop = matches[i + 1].start() if i + 1 < len(matches) else len(args)
        result.add(match.group(1), args[match.end() : stop].strip())
    return result


def _contains_word(text: str, word: str) -> bool:
    """Whether word appears in text as a whole word, ignoring case."""
    needle = word.casefold()
    return any(token.casefold() == needle for token in text.split())


@dataclass(frozen=True)
class ContainsKeywords:
    """Matches records whose field contains every keyword as a whole word."""

    keywords: tuple[str, ...]
    field: RecordField

    def __call__(self, record: Record) -> bool:
        if self.field is RecordField.TAG:
            tags = {tag.casefold() for tag in record.tags}
            return all(keyword.casefold() in tags for keyword in self.keywords)
        text = getattr(record, self.field.value)
        return all(_contains_word(text, keyword) for keyword in self.keywords)


def keyword_predicate(query: str, record_field: RecordField) -> RecordPredicate:
    """Predicate for one field's query. A blank query matches everything."""
    keywords = query.split()
    if not keywords:
        return always_true
    return ContainsKeywords(tuple(keywords), record_field)


def intersection(*predicates: RecordPredicate) -> RecordPredicate:
    """Conjunction of predicates. With none given, matches everything."""

    def combined(record: Record) -> bool:
        return all(predicate(record) for predicate in predicates)

    return combined


def parse_find(args: str) -> RecordPredicate:
    """Build the find filter from its argument string.

    Raises:
        ParseError: If args is blank.
    """
    if not args.strip():
        raise ParseError(f"Invalid command format!\n{FIND_USAGE}")

    argmap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
    single_fields = (
        (PREFIX_NAME, RecordField.NAME),
        (PREFIX_PHONE, RecordField.PHONE),
        (PREFIX_EMAIL, RecordField.EMAIL),
        (PREFIX_ADDRESS, RecordField.ADDRESS),
    )
    predicates: list[RecordPredicate] = []
    for prefix, record_field in single_fields:
        query = argmap.value(prefix)
        predicates.append(always_true if query is None else keyword_predicate(query, record_field))
    for tag_query in argmap.all_values(PREFIX_TAG):
        predicates.append(keyword_predicate(tag_query, RecordField.TAG))
    return intersection(*predicates)


def filter_records(records: Iterable[Record], predicate: RecordPredicate) -> list[Record]:
    """Records satisfying predicate, in their original order."""
    return [record for record in records if predicate(record)]
