"""Closed-form per-debt payoff estimates under minimum payments alone"""

import math
from typing import List, Sequence
from debt_planner.domain.models import Debt, PayoffEstimate, PayoffStatus
from debt_planner.utils.numbers import non_negative


def payoff_months(balance: float, min_payment: float, annual_rate: float) -> float:
    """
    Months until a balance reaches zero paying only min_payment each month.

    Returns 0 for a paid debt and math.inf when the payment never outpaces
    the monthly interest (or there is no payment at all). Otherwise uses the
    standard amortization period formula n = -ln(1 - p*r/a) / ln(1 + r).
    """
    if balance <= 0:
        return 0.0
    if min_payment <= 0:
        return math.inf

    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        return balance / min_payment
    if min_payment <= balance * monthly_rate:
        return math.inf

    # log1p keeps both logs nonzero for rates too small to register in 1 + r
    return -math.log1p(-balance * monthly_rate / min_payment) / math.log1p(monthly_rate)


def estimate_payoff(debt: Debt) -> PayoffEstimate:
    balance = non_negative(debt.current_amount)
    min_payment = non_negative(debt.min_payment)
    rate = non_negative(debt.interest_rate)

    months = payoff_months(balance, min_payment, rate)
    if months == 0:
        status = PayoffStatus.PAID
    elif math.isinf(months):
        status = PayoffStatus.NEVER
    else:
        status = PayoffStatus.SCHEDULED

    return PayoffEstimate(
        debt_id=debt.id,
        name=debt.name,
        balance=balance,
        min_payment=min_payment,
        interest_rate=rate,
        months=months,
        status=status,
    )


def rank_payoff_estimates(debts: Sequence[Debt]) -> List[PayoffEstimate]:
    """Estimate every debt independently, quickest payoff first (never-paid last)"""
    return sorted((estimate_payoff(d) for d in debts), key=lambda e: e.months)


def format_duration(months: float) -> str:
    """Human label for a payoff estimate, e.g. '2 years 3 months'"""
    if months == 0:
        return "Paid"
    if math.isinf(months):
        return "Never (interest exceeds payment)"

    years, remainder = divmod(math.ceil(months), 12)
    if remainder == 0:
        return f"{years} year{'s' if years > 1 else ''}"
    month_part = f"{remainder} month{'s' if remainder != 1 else ''}"
    if years > 0:
        return f"{years} year{'s' if years > 1 else ''} {month_part}"
    return month_part
