"""Paid-off progress relative to the initial debt load"""

from typing import Sequence
from debt_planner.domain.models import Debt, DebtProgress
from debt_planner.utils.numbers import non_negative


def summarize_progress(debts: Sequence[Debt]) -> DebtProgress:
    """
    Totals and percentages for the debt dashboard.

    Balances may legitimately exceed their initial amount after compounding
    or manual edits; in that case total_paid_off and percent_paid go negative
    and balance_exceeds_initial is set. Percentages are None when there was
    no initial debt to measure against.
    """
    total_debt = sum(non_negative(d.current_amount) for d in debts)
    initial_total = sum(non_negative(d.initial_amount) for d in debts)
    paid_off = initial_total - total_debt

    if initial_total > 0:
        percent_remaining = total_debt / initial_total * 100
        percent_paid = paid_off / initial_total * 100
    else:
        percent_remaining = None
        percent_paid = None

    return DebtProgress(
        total_debt=total_debt,
        initial_total_debt=initial_total,
        total_paid_off=paid_off,
        percent_remaining=percent_remaining,
        percent_paid=percent_paid,
        balance_exceeds_initial=any(
            non_negative(d.current_amount) > non_negative(d.initial_amount) for d in debts
        ),
    )
