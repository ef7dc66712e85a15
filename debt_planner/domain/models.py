"""Domain models - pure Python dataclasses representing household finances"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ExpenseCategory(str, Enum):
    SERVICES = "Services"
    FOOD = "Food"
    NANNY = "Nanny"
    OTHER = "Other"


class ExpenseFrequency(str, Enum):
    """How often a fixed expense is paid"""

    MONTHLY = "Monthly"
    BIWEEKLY = "Bi-weekly"
    WEEKLY = "Weekly"


class Strategy(str, Enum):
    """Prioritization policy for extra payments"""

    AVALANCHE = "avalanche"  # highest interest rate first
    SNOWBALL = "snowball"  # smallest balance first


class SimulationOutcome(str, Enum):
    DEBT_FREE = "debt_free"
    INDETERMINATE = "indeterminate"  # horizon cap reached with debt left


class PayoffStatus(str, Enum):
    PAID = "paid"
    NEVER = "never"
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class Debt:
    """A liability as entered by the household"""

    id: str
    name: str
    initial_amount: float
    current_amount: float
    min_payment: float
    interest_rate: Optional[float] = None  # annual percentage, None = 0%
    due_day: Optional[int] = None  # day of month, informational only


@dataclass(frozen=True)
class Income:
    """Recurring monthly income"""

    id: str
    source: str
    amount: float


@dataclass(frozen=True)
class Expense:
    """Fixed living expense"""

    id: str
    name: str
    amount: float
    category: ExpenseCategory = ExpenseCategory.OTHER
    frequency: Optional[ExpenseFrequency] = None  # None = Monthly
    due_day: Optional[int] = None  # day of month, or 0-6 (Sunday=0) when Weekly


@dataclass(frozen=True)
class FinancialSnapshot:
    """Read-only view of debts, incomes and expenses for a single run"""

    debts: Tuple[Debt, ...] = ()
    incomes: Tuple[Income, ...] = ()
    expenses: Tuple[Expense, ...] = ()


@dataclass
class CashFlow:
    """Monthly cash flow derived from a snapshot"""

    total_income: float
    total_fixed_expenses: float
    total_min_payments: float
    free_cash_flow: float  # may be negative
    payment_capacity: float  # free_cash_flow + total_min_payments


@dataclass
class StrategyRecommendation:
    """Advisory strategy pick with its rationale"""

    strategy: Strategy
    reason: str
    debt_id: Optional[str] = None
    debt_name: Optional[str] = None


@dataclass
class ScheduleRow:
    """One simulated month"""

    period: int
    label: str
    opening_balance: float
    interest: float
    payment: float
    closing_balance: float
    wealth: float
    debt_balances: Dict[str, float] = field(default_factory=dict)


@dataclass
class SimulationResult:
    """Output of an amortization run"""

    schedule: List[ScheduleRow]
    strategy: Strategy
    outcome: SimulationOutcome
    payoff_months: Optional[int]
    periods_run: int
    total_interest: float
    total_paid: float
    wealth: float
    debt_payoff_periods: Dict[str, int] = field(default_factory=dict)
    payoff_order: List[str] = field(default_factory=list)

    @property
    def is_indeterminate(self) -> bool:
        return self.outcome is SimulationOutcome.INDETERMINATE


@dataclass
class PayoffEstimate:
    """Closed-form time to pay off one debt with its own minimum payment"""

    debt_id: str
    name: str
    balance: float
    min_payment: float
    interest_rate: float
    months: float  # math.inf when the balance never shrinks
    status: PayoffStatus


@dataclass
class DebtProgress:
    """How far the household is from its initial debt load"""

    total_debt: float
    initial_total_debt: float
    total_paid_off: float
    percent_remaining: Optional[float]
    percent_paid: Optional[float]
    balance_exceeds_initial: bool


@dataclass
class Reminder:
    """Due-date notice for a debt or fixed expense"""

    id: str
    kind: str  # "warning" or "info"
    title: str
    message: str
    due_date: Optional[date] = None
