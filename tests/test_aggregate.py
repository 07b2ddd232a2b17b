import pytest

from budget_analysis.aggregate import (
    category_shares,
    category_totals,
    expense_share,
    net_balance,
    statement_totals,
    top_merchants,
)
from budget_analysis.models import MerchantTotal, PlanningEntry, StatementTotals, TransactionRecord


def _tx(title: str, amount: float, i: int = 0) -> TransactionRecord:
    return TransactionRecord(id=f"t-{i}", date="2025-01-01", title=title, amount=amount)


def _txs(*pairs: tuple[str, float]) -> list[TransactionRecord]:
    return [_tx(title, amount, i) for i, (title, amount) in enumerate(pairs)]


def _entry(label: str, amount: float) -> PlanningEntry:
    return PlanningEntry(label=label, amount=amount)


# ---- statement_totals ----------------------------------------------------------


def test_statement_totals_splits_charges_and_credits():
    totals = statement_totals(_txs(("a", 100), ("b", -30), ("c", 50)))
    assert totals == StatementTotals(charges=150.0, credits=30.0, net=120.0)


def test_statement_totals_empty_is_all_zero():
    assert statement_totals([]) == StatementTotals(0.0, 0.0, 0.0)


def test_zero_amount_counts_as_charge_side():
    totals = statement_totals(_txs(("a", 0.0), ("b", -1.0)))
    assert totals.charges == 0.0
    assert totals.credits == 1.0
    assert totals.net == -1.0


def test_net_is_a_single_running_sum():
    amounts = [0.1, -0.2, 0.3, -0.4, 0.7]
    expected = 0.0
    for a in amounts:
        expected += a
    totals = statement_totals(_txs(*((f"m{i}", a) for i, a in enumerate(amounts))))
    assert totals.net == expected


def test_statement_totals_accepts_a_generator():
    totals = statement_totals(r for r in _txs(("a", 2), ("b", 3)))
    assert totals.charges == 5.0


# ---- top_merchants -------------------------------------------------------------


def test_top_merchants_groups_and_sorts_descending():
    ranked = top_merchants(_txs(("A", 50), ("B", 80), ("A", 20)), n=2)
    assert ranked == [MerchantTotal("B", 80.0), MerchantTotal("A", 70.0)]


def test_top_merchants_ignores_credits_and_zero_amounts():
    ranked = top_merchants(_txs(("A", 10), ("Refund", -100), ("Free", 0), ("A", -5)))
    assert ranked == [("A", 10.0)]


def test_top_merchants_ties_keep_first_seen_order():
    ranked = top_merchants(_txs(("X", 5), ("Y", 5), ("Z", 9), ("W", 5)))
    assert [m.title for m in ranked] == ["Z", "X", "Y", "W"]


def test_top_merchants_default_limit_is_six():
    ranked = top_merchants(_txs(*((f"m{i}", float(i + 1)) for i in range(10))))
    assert len(ranked) == 6
    assert ranked[0] == ("m9", 10.0)


def test_top_merchants_titles_compare_exactly():
    ranked = top_merchants(_txs(("Cafe", 1), ("Cafe ", 2), ("cafe", 3)))
    assert {m.title for m in ranked} == {"Cafe", "Cafe ", "cafe"}


def test_top_merchants_zero_limit_and_negative_limit():
    assert top_merchants(_txs(("A", 1)), n=0) == []
    with pytest.raises(ValueError):
        top_merchants(_txs(("A", 1)), n=-1)


# ---- planning aggregates -------------------------------------------------------


def test_category_totals_sums_per_label():
    entries = [_entry("Food", 100), _entry("Housing", 900), _entry("Food", 50.5)]
    assert category_totals(entries) == {"Food": 150.5, "Housing": 900.0}


def test_category_totals_empty():
    assert category_totals([]) == {}


def test_net_balance_is_income_minus_predictions():
    incomes = [_entry("Salary", 3000), _entry("Freelance", 500)]
    predictions = [_entry("Housing", 1200), _entry("Food", 800)]
    assert net_balance(incomes, predictions) == 1500.0
    assert net_balance([], predictions) == -2000.0


@pytest.mark.parametrize(
    ("expenses", "income", "expected"),
    [
        (500, 2000, 25.0),
        (0, 2000, 0.0),
        (100, 0, 0.0),
        (0, 0, 0.0),
        (3000, 2000, 100.0),
    ],
)
def test_expense_share(expenses: float, income: float, expected: float):
    assert expense_share(expenses, income) == pytest.approx(expected)


def test_category_shares_relative_to_total_predictions():
    entries = [_entry("Food", 25), _entry("Housing", 75)]
    assert category_shares(entries) == {"Food": 25.0, "Housing": 75.0}
    assert category_shares([]) == {}


def test_aggregates_do_not_mutate_inputs():
    records = _txs(("A", 1), ("B", -2))
    snapshot = list(records)
    statement_totals(records)
    top_merchants(records)
    assert records == snapshot
