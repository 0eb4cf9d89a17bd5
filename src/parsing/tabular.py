from __future__ import annotations

from dataclasses import dataclass, field

from ..models.diagnostic import Diagnostic, MalformedInputWarning

"""Quote-aware CSV text parser.

Converts the raw text of a spreadsheet export into rows of trimmed cells
without any schema knowledge:

- ``,`` ends a field unless inside quotes
- ``"`` toggles quoting; ``""`` inside quotes is one literal quote
- LF or CR ends a row outside quotes; CRLF counts as one terminator
- a final row without terminator is still emitted
- blank lines are kept (as ``[""]``); dropping them is the normalizer's job

The parser never raises. An unterminated quote at end of input yields a
best-effort last field plus a MalformedInputWarning diagnostic.
"""

__all__ = [
    "ParseResult",
    "parse",
    "parse_with_diagnostics",
]

QUOTE = '"'
DELIMITER = ","


@dataclass(frozen=True)
class ParseResult:
    rows: list[list[str]]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def parse(text: str) -> list[list[str]]:
    """Parse CSV ``text`` into a list of rows (lists of trimmed cells)."""
    return parse_with_diagnostics(text).rows


def parse_with_diagnostics(text: str) -> ParseResult:
    """Parse CSV ``text`` and report malformed quoting as diagnostics.

    Row numbers in diagnostics are 1-based positions in the returned row list.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    current: list[str] = []
    in_quotes = False
    # 未終端クォートの開始行 (診断用)
    quote_opened_row = 0

    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c == QUOTE:
            if in_quotes and i + 1 < n and text[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
                if in_quotes:
                    quote_opened_row = len(rows) + 1
        elif c == DELIMITER and not in_quotes:
            row.append("".join(current).strip())
            current = []
        elif c in "\r\n" and not in_quotes:
            row.append("".join(current).strip())
            rows.append(row)
            row = []
            current = []
            if c == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1  # CRLF
        else:
            current.append(c)
        i += 1

    diagnostics: list[Diagnostic] = []
    if current or row or in_quotes:
        row.append("".join(current).strip())
        rows.append(row)
    if in_quotes:
        diagnostics.append(
            Diagnostic(
                row=quote_opened_row,
                category=MalformedInputWarning,
                message="unterminated quote at end of input",
            )
        )
    return ParseResult(rows=rows, diagnostics=diagnostics)
