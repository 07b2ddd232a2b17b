"""Map tokenized statement rows to :class:`TransactionRecord` values.

Header contract
---------------
The header row must contain ``date``, ``title`` and ``amount`` (trimmed,
case-insensitive, any order; extra columns are ignored). When a column is
missing the whole upload fails with ``ErrorKind.MISSING_COLUMNS`` and no row is
looked at.

Row rules
---------
- Rows with fewer than two fields are blank or malformed lines and are
  skipped.
- ``id`` is ``"<source_label>-<n>"`` where ``n`` numbers the kept rows from 0;
  skipped rows do not consume a number, so ids stay contiguous.
- ``date`` and ``title`` are trimmed; an empty title becomes ``"Unknown"``.
- An amount that fails to normalize is stored as ``0``; it never aborts the
  batch.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..logging_setup import get_logger
from ..models import (
    REQUIRED_COLUMNS,
    UNKNOWN_TITLE,
    ErrorKind,
    StatementError,
    TransactionRecord,
)
from .amounts import MalformedAmountError, normalize_amount

_logger = get_logger("budget_analysis.ingest.records")

_MIN_ROW_FIELDS = 2


def _missing_columns_error(missing: Sequence[str]) -> StatementError:
    return StatementError(
        kind=ErrorKind.MISSING_COLUMNS,
        message=(
            "Missing columns: "
            + ", ".join(missing)
            + ". Expected headers: "
            + ",".join(REQUIRED_COLUMNS)
            + "."
        ),
        missing_columns=tuple(missing),
    )


def _column_indexes(header_row: Sequence[str]) -> tuple[dict[str, int], list[str]]:
    normalized = [col.strip().lower() for col in header_row]
    indexes: dict[str, int] = {}
    missing: list[str] = []
    for name in REQUIRED_COLUMNS:
        try:
            indexes[name] = normalized.index(name)
        except ValueError:
            missing.append(name)
    return indexes, missing


def _cell(row: Sequence[str], idx: int) -> str:
    return row[idx].strip() if idx < len(row) else ""


def _row_amount(raw: str, record_id: str) -> float:
    try:
        return normalize_amount(raw)
    except MalformedAmountError:
        _logger.debug("Row %s: unparseable amount %r, using 0", record_id, raw)
        return 0.0


def map_records(
    header_row: Sequence[str],
    data_rows: Sequence[Sequence[str]],
    source_label: str,
) -> tuple[list[TransactionRecord], StatementError | None]:
    """Build transaction records from a header row and its data rows.

    Returns ``(records, None)`` on success and ``([], error)`` when the
    header lacks a required column.
    """

    indexes, missing = _column_indexes(header_row)
    if missing:
        return [], _missing_columns_error(missing)

    date_idx = indexes["date"]
    title_idx = indexes["title"]
    amount_idx = indexes["amount"]

    records: list[TransactionRecord] = []
    for row_pos, row in enumerate(data_rows):
        if len(row) < _MIN_ROW_FIELDS:
            _logger.debug("Skipping data row %d with %d field(s)", row_pos, len(row))
            continue

        # Numbered among kept rows only.
        record_id = f"{source_label}-{len(records)}"
        raw_amount = row[amount_idx] if amount_idx < len(row) else ""
        records.append(
            TransactionRecord(
                id=record_id,
                date=_cell(row, date_idx),
                title=_cell(row, title_idx) or UNKNOWN_TITLE,
                amount=_row_amount(raw_amount, record_id),
            )
        )

    return records, None


__all__ = ["map_records"]
