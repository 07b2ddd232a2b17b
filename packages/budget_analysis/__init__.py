"""Public interface for the ``budget_analysis`` package.

Symbol re-exports only; the implementations live in ``api``, ``ingest``,
``aggregate`` and ``planning``.
"""

from .aggregate import (
    category_shares,
    category_totals,
    expense_share,
    net_balance,
    statement_totals,
    top_merchants,
)
from .api import parse_statement, summarize_statement
from .ingest import MalformedAmountError, map_records, normalize_amount, tokenize
from .models import (
    ErrorKind,
    MerchantTotal,
    PlanningEntry,
    PlanSummary,
    StatementError,
    StatementParseResult,
    StatementSummary,
    StatementTotals,
    TransactionRecord,
)
from .planning import add_entry, new_entry, remove_entry, summarize_plan

__all__ = [
    # Ingestion
    "tokenize",
    "normalize_amount",
    "map_records",
    "parse_statement",
    "MalformedAmountError",
    # Aggregation
    "statement_totals",
    "top_merchants",
    "category_totals",
    "category_shares",
    "net_balance",
    "expense_share",
    "summarize_statement",
    # Planning
    "new_entry",
    "add_entry",
    "remove_entry",
    "summarize_plan",
    # Models / types
    "ErrorKind",
    "MerchantTotal",
    "PlanningEntry",
    "PlanSummary",
    "StatementError",
    "StatementParseResult",
    "StatementSummary",
    "StatementTotals",
    "TransactionRecord",
]
