"""Monthly cash-flow and payment capacity calculations"""

from typing import Dict, Iterable, Optional
from debt_planner.domain.models import CashFlow, Debt, Expense, ExpenseFrequency, FinancialSnapshot
from debt_planner.utils.numbers import non_negative, to_finite

# Occurrences per month used to turn an expense into a monthly figure
FREQUENCY_MULTIPLIERS: Dict[ExpenseFrequency, int] = {
    ExpenseFrequency.MONTHLY: 1,
    ExpenseFrequency.BIWEEKLY: 2,
    ExpenseFrequency.WEEKLY: 4,
}

DAYS_PER_MONTH = 30


def monthly_equivalent(expense: Expense) -> float:
    """Monthly cost of an expense; missing frequency counts as Monthly"""
    frequency = expense.frequency or ExpenseFrequency.MONTHLY
    return to_finite(expense.amount) * FREQUENCY_MULTIPLIERS[frequency]


def total_min_payments(debts: Iterable[Debt]) -> float:
    """Sum of minimum payments owed by debts that still carry a balance"""
    return sum(
        non_negative(d.min_payment) for d in debts if non_negative(d.current_amount) > 0
    )


def calculate_cash_flow(snapshot: FinancialSnapshot) -> CashFlow:
    """
    Derive monthly cash flow from a snapshot.

    - free_cash_flow: income minus fixed expenses minus active minimums (no floor)
    - payment_capacity: everything available for debt, minimums included.
      Equal to income minus fixed expenses; consumers must not subtract
      minimums from it again.
    """
    total_income = sum(to_finite(i.amount) for i in snapshot.incomes)
    total_fixed_expenses = sum(monthly_equivalent(e) for e in snapshot.expenses)
    minimums = total_min_payments(snapshot.debts)

    free_cash_flow = total_income - total_fixed_expenses - minimums

    return CashFlow(
        total_income=total_income,
        total_fixed_expenses=total_fixed_expenses,
        total_min_payments=minimums,
        free_cash_flow=free_cash_flow,
        payment_capacity=free_cash_flow + minimums,
    )


def daily_payment_cost(payment_capacity: float, days_per_month: Optional[int] = None) -> float:
    """What the household must set aside each day to fund its monthly debt budget"""
    days = days_per_month or DAYS_PER_MONTH
    return non_negative(payment_capacity) / days
