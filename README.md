# arcwlint

Building blocks for checking Markdown proposal documents that start with a
`---` delimited preamble of `name: value` headers.

The package provides:

- `arcwlint.preamble`: splits a document into its preamble and body, and
  parses the preamble into `Field` objects that know their line numbers.
- `arcwlint.snippet`: diagnostic snippets (title, source slices, source
  annotations, footer notes), rendered as plain text with `render()` or
  converted to and from dictionaries with `Snippet.to_dict()` and
  `Snippet.from_dict()`.
- `arcwlint.reporters`: collects snippets as text (`Text`) or JSON (`Json`),
  throws them away (`Null`), or counts them by severity (`Count`).
- `arcwlint.tree`: a small document tree (`Node`, `NodeKind`) with a
  `Visitor` base class and a `visit()` walker that can skip children.

## Installation

```
pip install .
```

Install with `pip install .[test]` to run the tests with `pytest`.

## Splitting and parsing a preamble

```python
from arcwlint.preamble import Preamble

text = "---\ntitle: Example\nstatus: Draft\n---\n\nBody text\n"
preamble_text, body = Preamble.split(text)

preamble = Preamble.parse("example.md", preamble_text)
for field in preamble.fields():
    print(field.line_start, field.name, field.value.strip())

print(preamble.by_name("status").value)   # " Draft"
```

The opening and closing markers must be lines of exactly `---` separated by
`\n`. `Preamble.split` raises a `SplitError` subclass (`MissingStart`,
`MissingEnd` or `LeadingGarbage`) when the markers are wrong.
`Preamble.parse` raises `ParseErrors`, whose `errors` attribute holds one
snippet for each line that has no `:` delimiter. `fields()` yields every
field in order, duplicates included; `by_name()` returns the last field with
that name and `by_index()` the field at a position, both `None` when absent.

## Reporting

```python
from arcwlint.reporters import Count, Text
from arcwlint.snippet import Annotation, AnnotationType, Slice, Snippet

reporter = Count(Text())
reporter.report(
    Snippet(
        title=Annotation(
            label="something is wrong",
            id="my-lint",
            annotation_type=AnnotationType.ERROR,
        ),
        slices=[Slice(source="title: Example", line_start=2)],
    )
)

print(reporter.counts().error)     # 1
print(reporter.inner.getvalue())
```

`Text` writes to any text stream passed to it, or to its own `StringIO`,
and raises `ReportError` when writing fails. `Json` keeps every report as a
dictionary holding the snippet's fields and a `formatted` string;
`Json.reports()` returns them and `Json.dumps()` returns them as an indented
JSON array.

## Walking a tree

```python
from arcwlint.tree import Next, Node, NodeKind, Visitor, visit

doc = Node(NodeKind.DOCUMENT)
para = doc.append(Node(NodeKind.PARAGRAPH))
para.append(Node(NodeKind.TEXT, value="hello"))

class Texts(Visitor):
    def __init__(self):
        self.found = []

    def enter_text(self, node):
        self.found.append(node.value)
        return Next.TRAVERSE_CHILDREN

visitor = Texts()
visit(doc, visitor)
print(visitor.found)   # ['hello']
```

Methods named `enter_<kind>` and `depart_<kind>` handle the matching
`NodeKind` values; other kinds go to `generic_enter` and `generic_depart`.
Returning `Next.SKIP_CHILDREN` from an enter method skips that node's
children and its depart call.

## What this package does not do

- It has no command-line tool.
- It does not parse Markdown: trees for `arcwlint.tree` must be built by the
  caller.
- It ships no lints and no linter that runs checks over files; it offers only
  the pieces such checks are built from.
- `render()` produces plain text only; the `color` format option is carried
  through dictionaries but not used when rendering.