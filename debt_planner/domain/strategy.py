"""Payoff strategy selection - avalanche vs snowball prioritization and recommendation"""

from typing import Callable, Dict, Optional, Sequence, Tuple, Union
from debt_planner.domain.models import Debt, Strategy, StrategyRecommendation
from debt_planner.domain.exceptions import UnknownStrategyError
from debt_planner.utils.numbers import non_negative, to_finite

# Recommendation thresholds
HIGH_INTEREST_THRESHOLD = 40.0  # annual %, above this avalanche always wins
SMALL_BALANCE_THRESHOLD = 5000.0  # currency units, below this a quick win is worth it

PriorityKey = Callable[[float, float, int], Tuple[float, float, int]]


def _avalanche_key(balance: float, rate: float, position: int) -> Tuple[float, float, int]:
    # Highest rate, then largest balance, then input order
    return (-rate, -balance, position)


def _snowball_key(balance: float, rate: float, position: int) -> Tuple[float, float, int]:
    # Smallest balance, then highest rate, then input order
    return (balance, -rate, position)


PRIORITY_KEYS: Dict[Strategy, PriorityKey] = {
    Strategy.AVALANCHE: _avalanche_key,
    Strategy.SNOWBALL: _snowball_key,
}


def parse_strategy(value: Union[str, Strategy]) -> Strategy:
    """Map a strategy tag (case-insensitive) to a Strategy"""
    if isinstance(value, Strategy):
        return value
    try:
        return Strategy(str(value).strip().lower())
    except ValueError as e:
        raise UnknownStrategyError(f"Unknown payoff strategy: {value!r}") from e


def select_priority_debt(debts: Sequence[Debt], strategy: Strategy) -> Optional[Debt]:
    """Return the active debt that receives extra payments first, or None"""
    key = PRIORITY_KEYS[strategy]
    ranked = [
        (key(non_negative(d.current_amount), to_finite(d.interest_rate), position), d)
        for position, d in enumerate(debts)
        if non_negative(d.current_amount) > 0
    ]
    if not ranked:
        return None
    return min(ranked, key=lambda pair: pair[0])[1]


def recommend_strategy(debts: Sequence[Debt]) -> StrategyRecommendation:
    """
    Suggest a strategy from debt characteristics.

    Policy:
    - Highest active rate above 40%: avalanche, to stop the expensive debt first
    - Otherwise smallest active balance below 5000: snowball, a fast psychological win
    - Otherwise: avalanche, since it minimizes total interest
    """
    highest_rate = select_priority_debt(debts, Strategy.AVALANCHE)
    smallest_balance = select_priority_debt(debts, Strategy.SNOWBALL)

    max_interest = to_finite(highest_rate.interest_rate) if highest_rate else 0.0

    if highest_rate is not None and max_interest > HIGH_INTEREST_THRESHOLD:
        return StrategyRecommendation(
            strategy=Strategy.AVALANCHE,
            reason=(
                f'Your debt "{highest_rate.name}" carries a very high interest rate '
                f"({max_interest:g}%). Attacking it first will save the most money."
            ),
            debt_id=highest_rate.id,
            debt_name=highest_rate.name,
        )

    if smallest_balance is not None and non_negative(smallest_balance.current_amount) < SMALL_BALANCE_THRESHOLD:
        return StrategyRecommendation(
            strategy=Strategy.SNOWBALL,
            reason=(
                f'You have a small debt "{smallest_balance.name}" '
                f"({non_negative(smallest_balance.current_amount):,.2f}). "
                "Clearing it quickly gives an immediate motivational win."
            ),
            debt_id=smallest_balance.id,
            debt_name=smallest_balance.name,
        )

    return StrategyRecommendation(
        strategy=Strategy.AVALANCHE,
        reason="Paying the highest-interest debt first minimizes total interest over time.",
    )


def resolve_strategy(
    explicit: Optional[Union[str, Strategy]],
    debts: Sequence[Debt],
) -> Tuple[Strategy, StrategyRecommendation]:
    """
    Pick the strategy to simulate.

    An explicit caller choice always wins; the recommendation is still
    returned so it can be shown as advice.
    """
    recommendation = recommend_strategy(debts)
    if explicit is None:
        return recommendation.strategy, recommendation
    return parse_strategy(explicit), recommendation
