"""Month-by-month debt amortization with strategy-driven payment waterfall"""

from dataclasses import dataclass
from typing import Dict, List, Optional
from debt_planner.domain.models import (
    FinancialSnapshot,
    ScheduleRow,
    SimulationOutcome,
    SimulationResult,
    Strategy,
)
from debt_planner.domain.exceptions import InvalidHorizonError
from debt_planner.domain.strategy import PRIORITY_KEYS, PriorityKey
from debt_planner.utils.numbers import non_negative, to_finite

DEFAULT_HORIZON_MONTHS = 120  # 10 years
PROJECTION_HORIZON_MONTHS = 60
PROJECTION_MIN_MONTHS = 12  # keep projecting after payoff to show wealth


@dataclass
class _SimulatedDebt:
    """Working copy of a debt, owned by a single run"""

    id: str
    position: int
    balance: float
    min_payment: float
    rate: float

    @property
    def active(self) -> bool:
        return self.balance > 0


def _working_copies(snapshot: FinancialSnapshot) -> List[_SimulatedDebt]:
    return [
        _SimulatedDebt(
            id=debt.id,
            position=position,
            balance=non_negative(debt.current_amount),
            min_payment=non_negative(debt.min_payment),
            rate=to_finite(debt.interest_rate),
        )
        for position, debt in enumerate(snapshot.debts)
    ]


def _total_balance(debts: List[_SimulatedDebt]) -> float:
    return sum(d.balance for d in debts)


def _accrue_interest(debts: List[_SimulatedDebt]) -> float:
    """Compound one month of interest onto every active debt; return the total accrued"""
    accrued = 0.0
    for debt in debts:
        if debt.active and debt.rate > 0:
            interest = debt.balance * (debt.rate / 100) / 12
            debt.balance += interest
            accrued += interest
    return accrued


def _pay_minimums(debts: List[_SimulatedDebt], budget: float) -> float:
    """Pay minimums in snapshot order without exceeding the budget; return what is left"""
    remaining = budget
    for debt in debts:
        if not debt.active:
            continue
        payment = min(debt.balance, debt.min_payment, remaining)
        debt.balance -= payment
        remaining -= payment
    return remaining


def _priority_debt(debts: List[_SimulatedDebt], key: PriorityKey) -> Optional[_SimulatedDebt]:
    active = [d for d in debts if d.active]
    if not active:
        return None
    return min(active, key=lambda d: key(d.balance, d.rate, d.position))


def _allocate_extra(debts: List[_SimulatedDebt], remaining: float, key: PriorityKey) -> float:
    """Pour the remaining budget into the top-priority debt, then the next, until spent"""
    while remaining > 0:
        target = _priority_debt(debts, key)
        if target is None:
            break
        extra = min(target.balance, remaining)
        target.balance -= extra
        remaining -= extra
    return remaining


def simulate_payoff(
    snapshot: FinancialSnapshot,
    payment_capacity: float,
    strategy: Strategy = Strategy.AVALANCHE,
    max_periods: int = DEFAULT_HORIZON_MONTHS,
    min_periods: int = 0,
) -> SimulationResult:
    """
    Simulate paying down every debt in the snapshot with a fixed monthly budget.

    Each month:
    1. Interest accrues on active debts (annual rate / 12, before any payment)
    2. Minimums are paid in snapshot order, never beyond the budget
    3. The rest of the budget goes to the top-priority debt for the strategy,
       spilling over to the next one whenever a debt is cleared
    4. Budget left once every debt is cleared accumulates as wealth

    The run stops once the debt is gone and min_periods have elapsed, or when
    max_periods is reached. Hitting the cap with debt left is reported as an
    INDETERMINATE outcome rather than an error.

    The snapshot is never modified; a negative payment_capacity is treated as
    an empty budget.

    Raises:
        InvalidHorizonError: If max_periods is below 1
    """
    if max_periods < 1:
        raise InvalidHorizonError(f"Horizon cap must be at least 1 period, got {max_periods}")

    debts = _working_copies(snapshot)
    balance = _total_balance(debts)

    if balance <= 0:
        return SimulationResult(
            schedule=[],
            strategy=strategy,
            outcome=SimulationOutcome.DEBT_FREE,
            payoff_months=0,
            periods_run=0,
            total_interest=0.0,
            total_paid=0.0,
            wealth=0.0,
        )

    budget = non_negative(payment_capacity)
    key = PRIORITY_KEYS[strategy]
    tracked = {d.id for d in debts if d.active}

    schedule: List[ScheduleRow] = []
    debt_payoff_periods: Dict[str, int] = {}
    payoff_order: List[str] = []
    payoff_months: Optional[int] = None
    total_interest = 0.0
    total_paid = 0.0
    wealth = 0.0
    period = 0

    while period < max_periods and (balance > 0 or period < min_periods):
        period += 1
        opening_balance = balance

        interest = _accrue_interest(debts)
        remaining = _pay_minimums(debts, budget)
        remaining = _allocate_extra(debts, remaining, key)

        # Anything not spent on debt means every debt is already cleared
        wealth += remaining
        paid = budget - remaining
        balance = _total_balance(debts)

        total_interest += interest
        total_paid += paid

        for debt in debts:
            if debt.id in tracked and not debt.active and debt.id not in debt_payoff_periods:
                debt_payoff_periods[debt.id] = period
                payoff_order.append(debt.id)

        if payoff_months is None and balance <= 0:
            payoff_months = period

        schedule.append(
            ScheduleRow(
                period=period,
                label=f"Month {period}",
                opening_balance=opening_balance,
                interest=interest,
                payment=paid,
                closing_balance=max(0.0, balance),
                wealth=wealth,
                debt_balances={d.id: d.balance for d in debts},
            )
        )

    outcome = SimulationOutcome.DEBT_FREE if balance <= 0 else SimulationOutcome.INDETERMINATE

    return SimulationResult(
        schedule=schedule,
        strategy=strategy,
        outcome=outcome,
        payoff_months=payoff_months,
        periods_run=period,
        total_interest=total_interest,
        total_paid=total_paid,
        wealth=wealth,
        debt_payoff_periods=debt_payoff_periods,
        payoff_order=payoff_order,
    )


def project_debt_and_wealth(
    snapshot: FinancialSnapshot,
    payment_capacity: float,
    strategy: Strategy = Strategy.AVALANCHE,
    max_periods: int = PROJECTION_HORIZON_MONTHS,
    min_periods: int = PROJECTION_MIN_MONTHS,
) -> SimulationResult:
    """Short-range forecast that keeps running past payoff so wealth growth is visible"""
    return simulate_payoff(
        snapshot,
        payment_capacity,
        strategy=strategy,
        max_periods=max_periods,
        min_periods=min_periods,
    )
