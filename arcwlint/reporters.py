"""Reporters that receive snippets produced by lints."""

from __future__ import annotations

import io
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, TextIO

from .snippet import AnnotationType, Snippet, render


class ReportError(Exception):
    """A reporter failed to record a snippet."""

    def __init__(self, source: BaseException):
        super().__init__(f"report failed: {source}")
        self.source = source


class Reporter(ABC):
    """Receives diagnostics."""

    @abstractmethod
    def report(self, snippet: Snippet) -> None:
        """Record one snippet; raise ReportError on failure."""


@dataclass(frozen=True)
class Counts:
    error: int = 0
    warning: int = 0
    info: int = 0
    note: int = 0
    help: int = 0
    other: int = 0


_COUNT_FIELD = {
    AnnotationType.ERROR: "error",
    AnnotationType.WARNING: "warning",
    AnnotationType.INFO: "info",
    AnnotationType.NOTE: "note",
    AnnotationType.HELP: "help",
}


class Count(Reporter):
    """Counts snippets by title severity, then forwards them."""

    def __init__(self, inner: Reporter):
        self.inner = inner
        self._counts = Counts()

    def report(self, snippet: Snippet) -> None:
        key = "other" if snippet.title is None else _COUNT_FIELD[snippet.title.annotation_type]
        self._counts = replace(self._counts, **{key: getattr(self._counts, key) + 1})
        self.inner.report(snippet)

    def counts(self) -> Counts:
        return self._counts


class Json(Reporter):
    """Collects snippets as JSON-ready dictionaries."""

    def __init__(self) -> None:
        self._reports: list[dict[str, Any]] = []

    def report(self, snippet: Snippet) -> None:
        value = snippet.to_dict()
        value["formatted"] = render(snippet)
        self._reports.append(value)

    def reports(self) -> list[dict[str, Any]]:
        return list(self._reports)

    def dumps(self) -> str:
        return json.dumps(self._reports, indent=2)


class Null(Reporter):
    """Discards every snippet."""

    def report(self, snippet: Snippet) -> None:
        return None


class Text(Reporter):
    """Writes rendered snippets, one per block, to a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else io.StringIO()

    def report(self, snippet: Snippet) -> None:
        try:
            self.stream.write(render(snippet) + "\n")
        except (OSError, ValueError) as exc:
            raise ReportError(exc) from exc

    def getvalue(self) -> str:
        """Return everything written so far when backed by a StringIO."""
        return self.stream.getvalue()