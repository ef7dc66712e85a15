"""Unit tests for cash-flow and payment capacity"""

import pytest
from debt_planner.domain.capacity import (
    calculate_cash_flow,
    daily_payment_cost,
    monthly_equivalent,
    total_min_payments,
)
from debt_planner.domain.models import (
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseFrequency,
    FinancialSnapshot,
    Income,
)


def test_monthly_equivalent_by_frequency():
    """Weekly x4, Bi-weekly x2, Monthly and missing frequency x1"""
    assert monthly_equivalent(Expense("1", "Groceries", 1000, ExpenseCategory.FOOD, ExpenseFrequency.WEEKLY)) == 4000
    assert monthly_equivalent(Expense("2", "Nanny", 1500, ExpenseCategory.NANNY, ExpenseFrequency.BIWEEKLY)) == 3000
    assert monthly_equivalent(Expense("3", "Power", 500, ExpenseCategory.SERVICES, ExpenseFrequency.MONTHLY)) == 500
    assert monthly_equivalent(Expense("4", "Internet", 600, ExpenseCategory.SERVICES)) == 600


def test_calculate_cash_flow_household(household_snapshot):
    """Income 38000, expenses 500 + 600 + 4000 + 3000, minimums 8500"""
    cash_flow = calculate_cash_flow(household_snapshot)

    assert cash_flow.total_income == 38000
    assert cash_flow.total_fixed_expenses == 8100
    assert cash_flow.total_min_payments == 8500
    assert cash_flow.free_cash_flow == 38000 - 8100 - 8500
    assert cash_flow.payment_capacity == 38000 - 8100  # minimums are part of capacity


def test_min_payments_skip_paid_debts():
    """Debts at zero balance owe no minimum"""
    snapshot = FinancialSnapshot(
        debts=(
            Debt("a", "Card", initial_amount=1000, current_amount=500, min_payment=100),
            Debt("b", "Loan", initial_amount=2000, current_amount=0, min_payment=300),
        ),
        incomes=(Income("1", "Salary", 1000),),
    )

    cash_flow = calculate_cash_flow(snapshot)

    assert cash_flow.total_min_payments == 100
    assert cash_flow.free_cash_flow == 900
    assert cash_flow.payment_capacity == 1000


def test_negative_free_cash_flow_is_not_floored():
    """Over-committed households report negative figures as-is"""
    snapshot = FinancialSnapshot(
        debts=(Debt("a", "Card", initial_amount=5000, current_amount=5000, min_payment=400),),
        incomes=(Income("1", "Salary", 1000),),
        expenses=(Expense("1", "Rent", 1200, ExpenseCategory.OTHER),),
    )

    cash_flow = calculate_cash_flow(snapshot)

    assert cash_flow.free_cash_flow == -600
    assert cash_flow.payment_capacity == -200


def test_non_finite_amounts_count_as_zero():
    """NaN or infinite inputs must not poison the totals"""
    snapshot = FinancialSnapshot(
        debts=(Debt("a", "Card", initial_amount=1000, current_amount=1000, min_payment=float("nan")),),
        incomes=(Income("1", "Salary", 2000), Income("2", "Bonus", float("inf"))),
        expenses=(Expense("1", "Rent", float("nan")),),
    )

    cash_flow = calculate_cash_flow(snapshot)

    assert cash_flow.total_income == 2000
    assert cash_flow.total_fixed_expenses == 0
    assert cash_flow.total_min_payments == 0
    assert cash_flow.payment_capacity == 2000


def test_empty_snapshot():
    cash_flow = calculate_cash_flow(FinancialSnapshot())
    assert cash_flow.payment_capacity == 0
    assert cash_flow.free_cash_flow == 0


def test_daily_payment_cost():
    """Monthly capacity spread over a 30-day month, never negative"""
    assert daily_payment_cost(3000) == pytest.approx(100.0)
    assert daily_payment_cost(3100, days_per_month=31) == pytest.approx(100.0)
    assert daily_payment_cost(-500) == 0.0


def test_negative_minimum_is_floored():
    """Capacity agrees with the engine, which never pays a negative minimum"""
    debts = [
        Debt("1", "Card", 1000, 1000, min_payment=-200),
        Debt("2", "Loan", 5000, 5000, min_payment=300),
    ]

    assert total_min_payments(debts) == 300
