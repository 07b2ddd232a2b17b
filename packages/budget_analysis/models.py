"""Data models and type aliases for ``budget_analysis``.

Statement-side values (rows, transaction records, summaries, parse failures)
are frozen dataclasses and named tuples: they are produced by the ingestion
core and never mutated afterwards. Planning entries are user input and are
validated with pydantic at construction time.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Raw tokenizer output
# ---------------------------------------------------------------------------

type RawRow = list[str]
"""One logical CSV line as an ordered list of untyped string fields."""

type RawRows = list[RawRow]


# Columns every statement header must carry (matched trimmed, case-insensitive).
REQUIRED_COLUMNS: tuple[str, ...] = ("date", "title", "amount")

UNKNOWN_TITLE = "Unknown"


# ---------------------------------------------------------------------------
# Statement records and summaries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """A single statement transaction.

    ``id`` is ``"<source_label>-<row_index>"`` where ``row_index`` is the
    0-based position among the kept data rows (blank or one-field lines are
    not counted). ``date`` is kept as the trimmed source text and is never
    parsed. ``amount`` is signed:
    positive for charges, negative for credits and refunds.
    """

    id: str
    date: str
    title: str
    amount: float


class MerchantTotal(NamedTuple):
    """Summed charges for one exact merchant title."""

    title: str
    total: float


@dataclass(frozen=True, slots=True)
class StatementTotals:
    """Charges, credits (as a magnitude) and the signed net of a statement."""

    charges: float = 0.0
    credits: float = 0.0
    net: float = 0.0


@dataclass(frozen=True, slots=True)
class StatementSummary:
    totals: StatementTotals
    top_merchants: tuple[MerchantTotal, ...]


# ---------------------------------------------------------------------------
# Whole-file parse failures
# ---------------------------------------------------------------------------


class ErrorKind(StrEnum):
    EMPTY_INPUT = "empty_input"
    MISSING_COLUMNS = "missing_columns"


@dataclass(frozen=True, slots=True)
class StatementError:
    """Structured reason an upload produced no records.

    Row-level problems (malformed amounts, short rows) are recovered in place
    and never show up here.
    """

    kind: ErrorKind
    message: str
    missing_columns: tuple[str, ...] = ()
    expected_columns: tuple[str, ...] = REQUIRED_COLUMNS


@dataclass(frozen=True, slots=True)
class StatementParseResult:
    """Either the mapped records or a :class:`StatementError`, never both."""

    records: tuple[TransactionRecord, ...] = ()
    error: StatementError | None = None
    skipped_rows: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Planning entries (predictions and incomes)
# ---------------------------------------------------------------------------


def _new_entry_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(UTC)


class PlanningEntry(BaseModel):
    """A user-entered monthly prediction (expense) or income.

    ``label`` holds the spending area for predictions and the income source
    for incomes. Surrounding whitespace is stripped from every string field
    before validation, so a blank label is rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    id: str = Field(default_factory=_new_entry_id, min_length=1)
    label: str = Field(min_length=1)
    amount: float = Field(gt=0, allow_inf_nan=False)
    notes: str = ""
    created_at: datetime = Field(default_factory=_utc_now)


type PlanningEntries = Sequence[PlanningEntry]


@dataclass(frozen=True, slots=True)
class PlanSummary:
    """Derived view over the current predictions and incomes."""

    total_expenses: float
    total_income: float
    net_monthly: float
    expense_share: float
    category_totals: dict[str, float] = field(default_factory=dict)
    category_shares: dict[str, float] = field(default_factory=dict)


__all__ = [
    "REQUIRED_COLUMNS",
    "UNKNOWN_TITLE",
    "ErrorKind",
    "MerchantTotal",
    "PlanSummary",
    "PlanningEntries",
    "PlanningEntry",
    "RawRow",
    "RawRows",
    "StatementError",
    "StatementParseResult",
    "StatementSummary",
    "StatementTotals",
    "TransactionRecord",
]
