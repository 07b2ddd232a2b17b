"""Locale-tolerant amount parsing for statement cells.

The heuristic targets statements that use a comma as the decimal separator
and a period (or a non-numeric glyph) for thousands, e.g. ``"R$ 1.234,56"``.
Mixed US formatting such as ``"1,234.56"`` becomes ``"1.234.56"`` and fails
to convert; callers substitute ``0`` for that row.
"""

from __future__ import annotations

import re

# ASCII digits only; ``\d`` would also admit other Unicode digit glyphs.
_NON_NUMERIC_RE = re.compile(r"[^0-9,.\-]")


class MalformedAmountError(ValueError):
    """Raised when an amount cell does not reduce to a number."""


def normalize_amount(raw: str) -> float:
    """Convert a formatted amount string into a float.

    Steps: drop every character other than digits, ``,``, ``.`` and ``-``;
    replace the first comma with a period; convert. Raises
    :class:`MalformedAmountError` when nothing numeric is left or the cleaned
    string is not a valid number.
    """

    cleaned = _NON_NUMERIC_RE.sub("", raw).replace(",", ".", 1)
    if not cleaned:
        raise MalformedAmountError(f"invalid amount: {raw!r}")
    try:
        return float(cleaned)
    except ValueError as exc:
        raise MalformedAmountError(f"invalid amount: {raw!r}") from exc


__all__ = ["MalformedAmountError", "normalize_amount"]
