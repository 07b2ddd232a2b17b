"""Public entry points for statement analysis.

``parse_statement`` runs the full ingestion pipeline (tokenize, split header,
map records) and returns a :class:`~budget_analysis.models.StatementParseResult`.
Whole-file failures come back as ``result.error``; nothing is raised across
this boundary for bad input. ``summarize_statement`` bundles the statement
aggregates into a single view for presentation.
"""

from __future__ import annotations

from collections.abc import Iterable

from .aggregate import DEFAULT_TOP_MERCHANTS, statement_totals, top_merchants
from .ingest import map_records, tokenize
from .logging_setup import get_logger
from .models import (
    ErrorKind,
    StatementError,
    StatementParseResult,
    StatementSummary,
    TransactionRecord,
)

_logger = get_logger("budget_analysis.api")

EMPTY_INPUT_MESSAGE = "The file appears to be empty."


def parse_statement(text: str, source_label: str) -> StatementParseResult:
    """Parse uploaded statement text into transaction records.

    Parameters
    ----------
    text:
        Already-decoded file contents.
    source_label:
        Prefix for record ids, normally the uploaded file name.
    """

    rows = tokenize(text)
    if not rows:
        _logger.debug("Statement %s is empty", source_label)
        return StatementParseResult(
            error=StatementError(kind=ErrorKind.EMPTY_INPUT, message=EMPTY_INPUT_MESSAGE)
        )

    header, *data_rows = rows
    records, error = map_records(header, data_rows, source_label)
    if error is not None:
        _logger.debug("Statement %s rejected: %s", source_label, error.message)
        return StatementParseResult(error=error)

    skipped = len(data_rows) - len(records)
    _logger.debug(
        "Statement %s: mapped %d record(s), skipped %d row(s)",
        source_label,
        len(records),
        skipped,
    )
    return StatementParseResult(records=tuple(records), skipped_rows=skipped)


def summarize_statement(
    records: Iterable[TransactionRecord], top_n: int = DEFAULT_TOP_MERCHANTS
) -> StatementSummary:
    items = list(records)
    return StatementSummary(
        totals=statement_totals(items),
        top_merchants=tuple(top_merchants(items, top_n)),
    )


__all__ = ["EMPTY_INPUT_MESSAGE", "parse_statement", "summarize_statement"]
