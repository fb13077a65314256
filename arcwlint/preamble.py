"""Splitting and parsing of the `---` delimited document preamble."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .snippet import Annotation, AnnotationType, Slice, Snippet

_MARKER = re.compile(r"(?:\A|\n)---(?:\n|\Z)")


class SplitError(Exception):
    """The text could not be split into preamble and body."""


class LeadingGarbage(SplitError):
    """Text appears before the opening marker."""


class MissingStart(SplitError):
    """No opening marker was found."""


class MissingEnd(SplitError):
    """No closing marker was found."""


class ParseErrors(Exception):
    """One or more preamble lines could not be parsed."""

    def __init__(self, errors: list[Snippet]):
        super().__init__(f"{len(errors)} preamble parse error(s)")
        self.errors = errors


@dataclass(frozen=True)
class Field:
    """A single `name: value` line of the preamble."""

    line_start: int
    name: str
    value: str
    source: str


class Preamble:
    """The parsed fields of a preamble, in order of appearance."""

    def __init__(self, fields: list[Field] | None = None):
        self._fields: list[Field] = list(fields or [])
        self._by_name: dict[str, Field] = {f.name: f for f in self._fields}

    @staticmethod
    def split(text: str) -> tuple[str, str]:
        """Return the preamble text and the body following it."""
        matches = _MARKER.finditer(text)
        start = next(matches, None)
        if start is None:
            raise MissingStart("missing preamble start marker")
        end = next(matches, None)
        if end is None:
            raise MissingEnd("missing preamble end marker")
        if start.start() != 0:
            raise LeadingGarbage("text before preamble start marker")
        return text[start.end() : end.start()], text[end.end() :]

    @classmethod
    def parse(cls, origin: str | None, text: str) -> Preamble:
        """Parse preamble text; raise ParseErrors listing every bad line."""
        fields: list[Field] = []
        errors: list[Snippet] = []
        for index, line in enumerate(text.split("\n")):
            line_start = index + 2  # lines count from one, after the `---` line
            name, sep, value = line.partition(":")
            if not sep:
                errors.append(
                    Snippet(
                        title=Annotation(
                            AnnotationType.ERROR,
                            label="missing delimiter `:` in preamble field",
                        ),
                        slices=[Slice(source=line, line_start=line_start, origin=origin)],
                    )
                )
            else:
                fields.append(Field(line_start, name, value, line))
        if errors:
            raise ParseErrors(errors)
        return cls(fields)

    def fields(self) -> Iterator[Field]:
        """Iterate over all fields, duplicates included."""
        return iter(self._fields)

    def by_name(self, name: str) -> Field | None:
        return self._by_name.get(name)

    def by_index(self, index: int) -> Field | None:
        if 0 <= index < len(self._fields):
            return self._fields[index]
        return None