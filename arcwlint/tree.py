"""A small Markdown syntax tree and a visitor that walks it."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class NodeKind(enum.Enum):
    """The kinds of node a Markdown document tree is built from."""

    DOCUMENT = "document"
    FRONT_MATTER = "front_matter"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    DESCRIPTION_LIST = "description_list"
    DESCRIPTION_ITEM = "description_item"
    DESCRIPTION_TERM = "description_term"
    DESCRIPTION_DETAILS = "description_details"
    CODE_BLOCK = "code_block"
    HTML_BLOCK = "html_block"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    THEMATIC_BREAK = "thematic_break"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    TEXT = "text"
    TASK_ITEM = "task_item"
    SOFT_BREAK = "soft_break"
    LINE_BREAK = "line_break"
    CODE = "code"
    HTML_INLINE = "html_inline"
    EMPH = "emph"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    LINK = "link"
    IMAGE = "image"
    FOOTNOTE_REFERENCE = "footnote_reference"


class Next(enum.Enum):
    """What the walker does after entering a node."""

    TRAVERSE_CHILDREN = "traverse_children"
    SKIP_CHILDREN = "skip_children"


@dataclass(eq=False)
class Node:
    """A tree node: its kind, an optional payload and its children."""

    kind: NodeKind
    value: Any = None
    children: list[Node] = field(default_factory=list)
    line: int | None = None

    def append(self, child: Node) -> Node:
        """Add a child and return it."""
        self.children.append(child)
        return child

    def traverse(self) -> Iterator[tuple[bool, Node]]:
        """Yield ``(True, node)`` on entry and ``(False, node)`` on exit, depth first."""
        stack: list[tuple[bool, Node]] = [(True, self)]
        while stack:
            entering, node = stack.pop()
            yield entering, node
            if entering:
                stack.append((False, node))
                stack.extend((True, child) for child in reversed(node.children))


class Visitor:
    """Base visitor.

    Subclasses define ``enter_<kind>(node)`` and ``depart_<kind>(node)``
    methods for the node kinds they care about; the others fall back to
    ``generic_enter`` and ``generic_depart``.
    """

    def enter(self, node: Node) -> Next:
        handler = getattr(self, f"enter_{node.kind.value}", None)
        result = handler(node) if handler is not None else self.generic_enter(node)
        return Next.TRAVERSE_CHILDREN if result is None else result

    def depart(self, node: Node) -> None:
        handler = getattr(self, f"depart_{node.kind.value}", None)
        if handler is not None:
            handler(node)
        else:
            self.generic_depart(node)

    def generic_enter(self, node: Node) -> Next:
        """Default for unhandled kinds: descend into the children."""
        return Next.TRAVERSE_CHILDREN

    def generic_depart(self, node: Node) -> None:
        """Default for unhandled kinds: accept any tree node, reject anything else."""
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")


def visit(root: Node, visitor: Visitor) -> None:
    """Walk ``root`` with ``visitor``; exceptions from the visitor propagate."""
    skip_until: Node | None = None
    for entering, node in root.traverse():
        if skip_until is not None and not entering and node is skip_until:
            skip_until = None
        if skip_until is not None:
            continue
        if entering:
            if visitor.enter(node) is Next.SKIP_CHILDREN:
                skip_until = node
        else:
            visitor.depart(node)