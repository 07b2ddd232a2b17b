"""Planning entries: creation, list updates and the plan summary view.

Lists of entries are treated as immutable values. ``add_entry`` and
``remove_entry`` return new lists and leave their input untouched; clearing a
list is just replacing it with ``[]``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .aggregate import category_shares, category_totals, expense_share, sum_amounts
from .models import PlanningEntry, PlanSummary


def new_entry(label: str, amount: float | str, notes: str = "") -> PlanningEntry:
    """Validate form input and build a fresh entry.

    ``label`` and ``notes`` are trimmed; ``amount`` may be a numeric string.
    Raises ``pydantic.ValidationError`` (a ``ValueError``) when the label is
    blank or the amount is not a finite number greater than zero.
    """

    return PlanningEntry(label=label, amount=amount, notes=notes)


def add_entry(entries: Sequence[PlanningEntry], entry: PlanningEntry) -> list[PlanningEntry]:
    """Return a new list with ``entry`` first (newest entries lead)."""

    return [entry, *entries]


def remove_entry(entries: Iterable[PlanningEntry], entry_id: str) -> list[PlanningEntry]:
    return [e for e in entries if e.id != entry_id]


def summarize_plan(
    predictions: Sequence[PlanningEntry], incomes: Sequence[PlanningEntry]
) -> PlanSummary:
    total_expenses = sum_amounts(predictions)
    total_income = sum_amounts(incomes)
    return PlanSummary(
        total_expenses=total_expenses,
        total_income=total_income,
        net_monthly=total_income - total_expenses,
        expense_share=expense_share(total_expenses, total_income),
        category_totals=category_totals(predictions),
        category_shares=category_shares(predictions),
    )


__all__ = ["add_entry", "new_entry", "remove_entry", "summarize_plan"]
