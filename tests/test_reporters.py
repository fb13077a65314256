import io
import json

import pytest

from arcwlint.reporters import Count, Counts, Json, Null, ReportError, Text
from arcwlint.snippet import Annotation, AnnotationType, Slice, Snippet, render


def _snippet(kind=AnnotationType.ERROR):
    return Snippet(
        title=Annotation(kind, label="boop", id="markdown-re"),
        slices=[Slice(source="hello", line_start=6)],
    )


def test_text_matches_render():
    reporter = Text()
    reporter.report(_snippet())
    reporter.report(_snippet())
    assert reporter.getvalue() == (render(_snippet()) + "\n") * 2


def test_text_known_output():
    reporter = Text()
    reporter.report(_snippet())
    assert reporter.getvalue() == "error[markdown-re]: boop\n  |\n6 | hello\n  |\n"


def test_text_closed_stream_raises():
    stream = io.StringIO()
    stream.close()
    with pytest.raises(ReportError):
        Text(stream).report(_snippet())


def test_count_tallies_and_forwards():
    inner = Text()
    reporter = Count(inner)
    reporter.report(_snippet())
    reporter.report(_snippet(AnnotationType.WARNING))
    reporter.report(Snippet())
    assert reporter.counts() == Counts(error=1, warning=1, other=1)
    assert inner.getvalue().count("error[markdown-re]") == 1


def test_json_reports_contain_formatted():
    reporter = Json()
    reporter.report(_snippet())
    (report,) = reporter.reports()
    assert report["formatted"] == render(_snippet())
    assert Snippet.from_dict(report) == _snippet()


def test_json_dumps_round_trip():
    reporter = Json()
    reporter.report(_snippet())
    assert json.loads(reporter.dumps()) == reporter.reports()


def test_null_with_count():
    reporter = Count(Null())
    reporter.report(_snippet(AnnotationType.HELP))
    assert reporter.counts().help == 1
    assert reporter.counts().error == 0