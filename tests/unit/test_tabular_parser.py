from __future__ import annotations

import pytest

from src.models.diagnostic import MalformedInputWarning
from src.parsing.tabular import parse, parse_with_diagnostics


def test_parse_simple_rows():
    assert parse("a,b,c\n1,2,3") == [["a", "b", "c"], ["1", "2", "3"]]


def test_parse_quoted_comma_stays_in_field():
    assert parse('a,"b,c",d') == [["a", "b,c", "d"]]


def test_parse_doubled_quote_collapses_to_literal():
    assert parse('"he said ""hi"""') == [['he said "hi"']]


def test_parse_quoted_newline_stays_in_field():
    rows = parse('name,notes\nPikachu,"line one\nline two"\n')
    assert rows == [["name", "notes"], ["Pikachu", "line one\nline two"]]


def test_parse_fields_are_trimmed():
    assert parse("  a ,\tb\t,  c  ") == [["a", "b", "c"]]


@pytest.mark.parametrize(
    "text",
    [
        "set,name\r\nBase,Pikachu\r\nJungle,Snorlax\r\n",
        "set,name\rBase,Pikachu\rJungle,Snorlax\r",
    ],
)
def test_parse_crlf_and_cr_match_lf(text: str):
    lf = "set,name\nBase,Pikachu\nJungle,Snorlax\n"
    assert parse(text) == parse(lf)


def test_parse_crlf_is_single_terminator():
    # CRLF が2行扱いになると空行が混入する
    assert parse("a\r\nb") == [["a"], ["b"]]


def test_parse_keeps_blank_rows():
    assert parse("a\n\nb\n") == [["a"], [""], ["b"]]


def test_parse_trailing_row_without_terminator_is_emitted():
    assert parse("a,b\nc,d") == [["a", "b"], ["c", "d"]]


def test_parse_trailing_delimiter_emits_empty_last_field():
    assert parse("a,") == [["a", ""]]


def test_parse_empty_text_returns_no_rows():
    assert parse("") == []


def test_parse_unterminated_quote_degrades_gracefully():
    result = parse_with_diagnostics('name,notes\nPikachu,"never closed, still here')
    assert result.rows == [["name", "notes"], ["Pikachu", "never closed, still here"]]
    assert len(result.diagnostics) == 1
    diag = result.diagnostics[0]
    assert diag.category is MalformedInputWarning
    assert diag.row == 2
    assert diag.error_type == "MALFORMED_INPUT"


def test_parse_well_formed_text_has_no_diagnostics():
    assert parse_with_diagnostics('a,"b ""c"""\n').diagnostics == []


def test_parse_unquoted_text_roundtrips():
    text = "set, number ,name\nBase,58/102, Pikachu\n\nJungle,1,Snorlax"
    rows = parse(text)
    rejoined = "\n".join(",".join(row) for row in rows)
    expected = "\n".join(
        ",".join(cell.strip() for cell in line.split(","))
        for line in text.split("\n")
    )
    assert rejoined == expected
