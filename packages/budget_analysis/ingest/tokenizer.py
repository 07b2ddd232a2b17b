"""Permissive CSV tokenizer for uploaded statement text.

A two-state scanner (``UNQUOTED`` / ``QUOTED``) over the decoded text:

- ``"`` toggles quote mode; inside quotes, ``""`` emits one literal quote.
- Outside quotes, ``,`` ends a field, ``\\n`` ends a field and its row, and
  ``\\r`` is dropped so both LF and CRLF files tokenize the same way.
- Inside quotes every character is literal, including commas and newlines.
- At end of input a pending field or row is flushed, so a missing trailing
  newline loses nothing.

Malformed quoting never raises: an unterminated quote swallows the rest of the
input as literal text. Each call keeps its own local state.
"""

from __future__ import annotations

from enum import Enum, auto

from ..models import RawRow, RawRows


class _State(Enum):
    UNQUOTED = auto()
    QUOTED = auto()


def tokenize(text: str) -> RawRows:
    """Split ``text`` into rows of string fields.

    Empty input yields ``[]``. A lone line break yields ``[[""]]`` (one row
    holding a single empty field), which the record mapper later skips.
    """

    rows: RawRows = []
    row: RawRow = []
    field: list[str] = []
    state = _State.UNQUOTED

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if state is _State.QUOTED:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 2
                    continue
                state = _State.UNQUOTED
            else:
                field.append(ch)
        elif ch == '"':
            state = _State.QUOTED
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        elif ch != "\r":
            field.append(ch)
        i += 1

    if field or row:
        row.append("".join(field))
        rows.append(row)

    return rows


__all__ = ["tokenize"]
