import pytest

from arcwlint.preamble import (
    Field,
    LeadingGarbage,
    MissingEnd,
    MissingStart,
    ParseErrors,
    Preamble,
)
from arcwlint.snippet import render


def test_split_missing_start():
    with pytest.raises(MissingStart):
        Preamble.split("hello world\n")


def test_split_missing_end():
    with pytest.raises(MissingEnd):
        Preamble.split("---\nfoo: bar\n")


def test_split_leading_garbage():
    with pytest.raises(LeadingGarbage):
        Preamble.split("hello world\n---\nfoo: bar\n---\n")


def test_split_line_feed():
    assert Preamble.split("---\nfoo: bar\n---\n\nhello world") == ("foo: bar", "\nhello world")


def test_split_carriage_return_then_line_feed():
    with pytest.raises(MissingStart):
        Preamble.split("---\r\nfoo: bar\r\n---\r\n\r\nhello world")


def test_split_carriage_return():
    with pytest.raises(MissingStart):
        Preamble.split("---\rfoo: bar\r---\r\rhello world")


def test_split_no_trailing_newline():
    assert Preamble.split("---\nfoo: bar\n---") == ("foo: bar", "")


def test_split():
    assert Preamble.split("---\nfoo: bar\n---\n\nhello world\n") == (
        "foo: bar",
        "\nhello world\n",
    )


def test_parse_missing_colon():
    with pytest.raises(ParseErrors) as info:
        Preamble.parse(None, "foo: bar\nbanana split")
    assert len(info.value.errors) == 1
    expected = """error: missing delimiter `:` in preamble field
  |
3 | banana split
  |"""
    assert render(info.value.errors[0]) == expected


def test_parse():
    preamble = Preamble.parse(None, "foo: bar\nbanana: split")
    assert list(preamble.fields()) == [
        Field(line_start=2, name="foo", value=" bar", source="foo: bar"),
        Field(line_start=3, name="banana", value=" split", source="banana: split"),
    ]


def test_lookup_by_name_and_index():
    preamble = Preamble.parse(None, "a: 1\nb: 2\na: 3")
    assert preamble.by_name("a").value == " 3"
    assert preamble.by_name("zz") is None
    assert preamble.by_index(1).name == "b"
    assert preamble.by_index(5) is None
    assert len(list(preamble.fields())) == 3