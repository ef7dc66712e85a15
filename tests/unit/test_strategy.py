"""Unit tests for strategy prioritization and recommendation"""

import pytest
from debt_planner.domain.exceptions import UnknownStrategyError
from debt_planner.domain.models import Debt, Strategy
from debt_planner.domain.strategy import (
    parse_strategy,
    recommend_strategy,
    resolve_strategy,
    select_priority_debt,
)


def _debt(id: str, balance: float, rate=None, min_payment: float = 50.0) -> Debt:
    return Debt(id, f"Debt {id}", initial_amount=balance, current_amount=balance,
                min_payment=min_payment, interest_rate=rate)


def test_avalanche_prioritizes_highest_rate():
    debts = [_debt("a", 1000, 10), _debt("b", 8000, 25), _debt("c", 500, 18)]
    assert select_priority_debt(debts, Strategy.AVALANCHE).id == "b"


def test_avalanche_tie_breaks_on_largest_balance_then_input_order():
    debts = [_debt("a", 1000, 20), _debt("b", 3000, 20), _debt("c", 3000, 20)]
    assert select_priority_debt(debts, Strategy.AVALANCHE).id == "b"


def test_snowball_prioritizes_smallest_balance():
    debts = [_debt("a", 1000, 10), _debt("b", 8000, 25), _debt("c", 500, 18)]
    assert select_priority_debt(debts, Strategy.SNOWBALL).id == "c"


def test_snowball_tie_breaks_on_highest_rate_then_input_order():
    debts = [_debt("a", 500, 5), _debt("b", 500, 30), _debt("c", 500, 30)]
    assert select_priority_debt(debts, Strategy.SNOWBALL).id == "b"


def test_missing_rate_counts_as_zero():
    debts = [_debt("a", 1000, None), _debt("b", 2000, 1)]
    assert select_priority_debt(debts, Strategy.AVALANCHE).id == "b"


def test_paid_debts_are_never_prioritized():
    debts = [_debt("a", 0, 99), _debt("b", 2000, 10)]
    assert select_priority_debt(debts, Strategy.AVALANCHE).id == "b"
    assert select_priority_debt(debts, Strategy.SNOWBALL).id == "b"
    assert select_priority_debt([_debt("a", 0, 99)], Strategy.SNOWBALL) is None


def test_recommend_avalanche_for_high_interest(household_snapshot):
    """Plata Card at 65% is above the 40% threshold"""
    recommendation = recommend_strategy(household_snapshot.debts)

    assert recommendation.strategy is Strategy.AVALANCHE
    assert recommendation.debt_id == "2"
    assert "Plata Card" in recommendation.reason


def test_recommend_snowball_for_small_balance():
    """Exactly 40% is not above the threshold, and 1200 is a quick win"""
    recommendation = recommend_strategy([_debt("a", 20000, 40), _debt("b", 1200, 12)])

    assert recommendation.strategy is Strategy.SNOWBALL
    assert recommendation.debt_id == "b"


def test_recommend_default_avalanche():
    """No high rates and no small balances: generic avalanche advice"""
    recommendation = recommend_strategy([_debt("a", 20000, 18), _debt("b", 5000, 12)])

    assert recommendation.strategy is Strategy.AVALANCHE
    assert recommendation.debt_id is None
    assert "interest" in recommendation.reason


def test_recommend_without_active_debts():
    recommendation = recommend_strategy([_debt("a", 0, 80)])

    assert recommendation.strategy is Strategy.AVALANCHE
    assert recommendation.debt_id is None


def test_explicit_strategy_overrides_recommendation(household_snapshot):
    strategy, recommendation = resolve_strategy(Strategy.SNOWBALL, household_snapshot.debts)

    assert strategy is Strategy.SNOWBALL
    assert recommendation.strategy is Strategy.AVALANCHE


def test_missing_strategy_uses_recommendation():
    strategy, recommendation = resolve_strategy(None, [_debt("a", 900, 10)])

    assert strategy is Strategy.SNOWBALL
    assert recommendation.strategy is Strategy.SNOWBALL


def test_parse_strategy():
    assert parse_strategy("avalanche") is Strategy.AVALANCHE
    assert parse_strategy(" SNOWBALL ") is Strategy.SNOWBALL
    assert parse_strategy(Strategy.SNOWBALL) is Strategy.SNOWBALL

    with pytest.raises(UnknownStrategyError):
        parse_strategy("proportional")
