"""Summary statistics over statement records and planning entries.

Every function here is pure: it reads the collection it is given, returns a
new value, and keeps nothing between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import MerchantTotal, PlanningEntry, StatementTotals, TransactionRecord

DEFAULT_TOP_MERCHANTS = 6


def statement_totals(records: Iterable[TransactionRecord]) -> StatementTotals:
    """Return charges, credits and net for ``records``.

    ``charges`` sums amounts ``>= 0``; ``credits`` sums the magnitude of
    negative amounts. ``net`` is accumulated in the same pass as a signed
    running sum rather than derived from the other two.
    """

    charges = 0.0
    credits = 0.0
    net = 0.0
    for rec in records:
        if rec.amount >= 0:
            charges += rec.amount
        else:
            credits += abs(rec.amount)
        net += rec.amount
    return StatementTotals(charges=charges, credits=credits, net=net)


def top_merchants(
    records: Iterable[TransactionRecord], n: int = DEFAULT_TOP_MERCHANTS
) -> list[MerchantTotal]:
    """Rank merchant titles by summed charges, largest first.

    Only positive amounts count. Titles are grouped by exact string equality,
    so ``"Cafe"`` and ``"Cafe "`` are separate merchants. Ties keep the order in
    which the titles were first seen.
    """

    if n < 0:
        raise ValueError("n must be >= 0")

    totals: dict[str, float] = {}
    for rec in records:
        if rec.amount <= 0:
            continue
        totals[rec.title] = totals.get(rec.title, 0.0) + rec.amount

    # sorted() is stable, also with reverse=True.
    ranked = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)
    return [MerchantTotal(title, total) for title, total in ranked[:n]]


def category_totals(entries: Iterable[PlanningEntry]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for entry in entries:
        totals[entry.label] = totals.get(entry.label, 0.0) + entry.amount
    return totals


def sum_amounts(entries: Iterable[PlanningEntry]) -> float:
    return sum((entry.amount for entry in entries), 0.0)


def net_balance(
    income_entries: Iterable[PlanningEntry], prediction_entries: Iterable[PlanningEntry]
) -> float:
    """Total income minus total predicted expenses."""

    return sum_amounts(income_entries) - sum_amounts(prediction_entries)


def expense_share(total_expenses: float, total_income: float) -> float:
    """Percentage of income consumed by expenses, capped at 100.

    Returns ``0`` when there is no income. The cap is a display limit; totals
    themselves are left untouched.
    """

    if not total_income:
        return 0.0
    return min(100.0, total_expenses / total_income * 100)


def category_shares(entries: Iterable[PlanningEntry]) -> dict[str, float]:
    """Each label's percentage of the summed entries, capped at 100."""

    items = list(entries)
    totals = category_totals(items)
    overall = sum_amounts(items)
    return {label: expense_share(amount, overall) for label, amount in totals.items()}


__all__ = [
    "DEFAULT_TOP_MERCHANTS",
    "category_shares",
    "category_totals",
    "expense_share",
    "net_balance",
    "statement_totals",
    "sum_amounts",
    "top_merchants",
]
