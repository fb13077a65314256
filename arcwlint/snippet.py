"""Diagnostic snippets, their serialisable form and a plain-text renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class AnnotationType(enum.Enum):
    """Severity of an annotation."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    NOTE = "Note"
    HELP = "Help"

    @property
    def label(self) -> str:
        return self.value.lower()

    @property
    def marker(self) -> str:
        return "^" if self is AnnotationType.ERROR else "-"


@dataclass(frozen=True)
class Annotation:
    """A titled or footer annotation."""

    annotation_type: AnnotationType
    label: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "annotation_type": self.annotation_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Annotation:
        return cls(
            annotation_type=AnnotationType(data["annotation_type"]),
            label=data.get("label"),
            id=data.get("id"),
        )


@dataclass(frozen=True)
class SourceAnnotation:
    """An annotation pointing at a character range of a slice's source."""

    range: tuple[int, int]
    label: str
    annotation_type: AnnotationType

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": list(self.range),
            "label": self.label,
            "annotation_type": self.annotation_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceAnnotation:
        start, end = data["range"]
        return cls(
            range=(int(start), int(end)),
            label=data["label"],
            annotation_type=AnnotationType(data["annotation_type"]),
        )


@dataclass(frozen=True)
class Slice:
    """A piece of source text with its annotations."""

    source: str
    line_start: int
    origin: str | None = None
    annotations: list[SourceAnnotation] = field(default_factory=list)
    fold: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "line_start": self.line_start,
            "origin": self.origin,
            "annotations": [a.to_dict() for a in self.annotations],
            "fold": self.fold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Slice:
        return cls(
            source=data["source"],
            line_start=data["line_start"],
            origin=data.get("origin"),
            annotations=[SourceAnnotation.from_dict(a) for a in data["annotations"]],
            fold=data.get("fold", False),
        )

    def lines(self) -> list[str]:
        parts = self.source.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        return parts


@dataclass(frozen=True)
class FormatOptions:
    """Rendering options."""

    color: bool = False
    anonymized_line_numbers: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color, "anonymized_line_numbers": self.anonymized_line_numbers}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormatOptions:
        return cls(
            color=data.get("color", False),
            anonymized_line_numbers=data.get("anonymized_line_numbers", False),
        )


@dataclass(frozen=True)
class Snippet:
    """A complete diagnostic."""

    title: Annotation | None = None
    footer: list[Annotation] = field(default_factory=list)
    slices: list[Slice] = field(default_factory=list)
    opt: FormatOptions = field(default_factory=FormatOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title.to_dict() if self.title else None,
            "footer": [f.to_dict() for f in self.footer],
            "opt": self.opt.to_dict(),
            "slices": [s.to_dict() for s in self.slices],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Snippet:
        title = data.get("title")
        return cls(
            title=Annotation.from_dict(title) if title else None,
            footer=[Annotation.from_dict(f) for f in data.get("footer", [])],
            slices=[Slice.from_dict(s) for s in data["slices"]],
            opt=FormatOptions.from_dict(data.get("opt") or {}),
        )


def _title_line(title: Annotation) -> str:
    head = title.annotation_type.label
    if title.id:
        head += f"[{title.id}]"
    return f"{head}: {title.label}" if title.label else head


def _annotation_text(annotation: SourceAnnotation) -> str:
    if annotation.annotation_type is AnnotationType.ERROR:
        return annotation.label
    if annotation.label:
        return f"{annotation.annotation_type.label}: {annotation.label}"
    return annotation.annotation_type.label


def _origin_line(slice_: Slice, width: int) -> str:
    text = f"{' ' * width}--> {slice_.origin}"
    if not slice_.annotations:
        return text
    start = slice_.annotations[0].range[0]
    offset = 0
    for number, line in enumerate(slice_.lines(), start=slice_.line_start):
        if start <= offset + len(line):
            return f"{text}:{number}:{start - offset + 1}"
        offset += len(line) + 1
    return text


def render(snippet: Snippet) -> str:
    """Render a snippet as plain text without a trailing newline."""
    anonymized = snippet.opt.anonymized_line_numbers
    width = 0
    for slice_ in snippet.slices:
        count = len(slice_.lines())
        if count:
            last = "LL" if anonymized else str(slice_.line_start + count - 1)
            width = max(width, len(last))
    gutter = " " * width + " |"

    out: list[str] = []
    if snippet.title is not None:
        out.append(_title_line(snippet.title))

    for slice_ in snippet.slices:
        if slice_.origin is not None:
            out.append(_origin_line(slice_, width))
        out.append(gutter)
        offset = 0
        for number, line in enumerate(slice_.lines(), start=slice_.line_start):
            label = "LL" if anonymized else str(number)
            out.append(f"{label:>{width}} | {line}" if line else f"{label:>{width}} |")
            line_end = offset + len(line)
            for annotation in slice_.annotations:
                start, end = annotation.range
                if start < offset or start > line_end:
                    continue
                local_start = start - offset
                local_end = max(min(end, line_end + 1) - offset, local_start + 1)
                marks = annotation.annotation_type.marker * (local_end - local_start)
                text = _annotation_text(annotation)
                row = f"{gutter} {' ' * local_start}{marks}"
                out.append(f"{row} {text}" if text else row)
            offset = line_end + 1
    if snippet.slices:
        out.append(gutter)

    for footer in snippet.footer:
        head = footer.annotation_type.label
        body = f"{head}: {footer.label}" if footer.label else head
        out.append(f"{' ' * width} = {body}")

    return "\n".join(out)