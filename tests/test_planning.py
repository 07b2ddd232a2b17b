from datetime import datetime

import pytest
from pydantic import ValidationError

from budget_analysis.models import PlanningEntry
from budget_analysis.planning import add_entry, new_entry, remove_entry, summarize_plan


def test_new_entry_trims_and_fills_defaults():
    entry = new_entry("  Housing ", "1200.50", "  rent ")

    assert entry.label == "Housing"
    assert entry.amount == 1200.5
    assert entry.notes == "rent"
    assert entry.id
    assert isinstance(entry.created_at, datetime)
    assert entry.created_at.tzinfo is not None


def test_new_entries_get_unique_ids():
    ids = {new_entry("Food", 10).id for _ in range(50)}
    assert len(ids) == 50


@pytest.mark.parametrize(
    ("label", "amount"),
    [
        ("", 10),
        ("   ", 10),
        ("Food", 0),
        ("Food", -5),
        ("Food", "abc"),
        ("Food", float("nan")),
        ("Food", float("inf")),
    ],
)
def test_new_entry_rejects_invalid_input(label: str, amount: object):
    with pytest.raises(ValidationError):
        new_entry(label, amount)  # type: ignore[arg-type]


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        new_entry("", 1)


def test_entries_are_frozen():
    entry = new_entry("Food", 10)
    with pytest.raises(ValidationError):
        entry.amount = 20  # type: ignore[misc]


def test_add_entry_prepends_and_leaves_input_untouched():
    first = new_entry("Food", 10)
    second = new_entry("Housing", 20)
    original = [first]

    updated = add_entry(original, second)

    assert updated == [second, first]
    assert original == [first]


def test_remove_entry_by_id():
    a = new_entry("Food", 10)
    b = new_entry("Housing", 20)
    entries = [a, b]

    assert remove_entry(entries, a.id) == [b]
    assert remove_entry(entries, "missing") == [a, b]
    assert entries == [a, b]


def test_summarize_plan():
    predictions = [
        PlanningEntry(label="Housing", amount=1200),
        PlanningEntry(label="Food", amount=600),
        PlanningEntry(label="Food", amount=200),
    ]
    incomes = [PlanningEntry(label="Salary", amount=4000)]

    summary = summarize_plan(predictions, incomes)

    assert summary.total_expenses == 2000.0
    assert summary.total_income == 4000.0
    assert summary.net_monthly == 2000.0
    assert summary.expense_share == pytest.approx(50.0)
    assert summary.category_totals == {"Housing": 1200.0, "Food": 800.0}
    assert summary.category_shares == pytest.approx({"Housing": 60.0, "Food": 40.0})


def test_summarize_plan_without_income_has_zero_share():
    summary = summarize_plan([PlanningEntry(label="Food", amount=10)], [])
    assert summary.expense_share == 0.0
    assert summary.net_monthly == -10.0
