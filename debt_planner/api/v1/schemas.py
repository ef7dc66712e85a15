"""Pydantic schemas for API request/response validation"""

import math
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from debt_planner.domain.models import (
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseFrequency,
    FinancialSnapshot,
    Income,
    PayoffEstimate,
    PayoffStatus,
    SimulationOutcome,
    Strategy,
)
from debt_planner.domain.payoff import format_duration


class DebtSchema(BaseModel):
    """Debt as supplied by the CRUD layer"""

    id: str = Field(..., min_length=1)
    name: str
    initial_amount: float = 0.0
    current_amount: float = Field(0.0, ge=0)
    min_payment: float = Field(0.0, ge=0)
    interest_rate: Optional[float] = Field(None, description="Annual percentage; omitted means 0%")
    due_day: Optional[int] = Field(None, ge=1, le=31)

    def to_domain(self) -> Debt:
        return Debt(
            id=self.id,
            name=self.name,
            initial_amount=self.initial_amount,
            current_amount=self.current_amount,
            min_payment=self.min_payment,
            interest_rate=self.interest_rate,
            due_day=self.due_day,
        )


class IncomeSchema(BaseModel):
    id: str = Field(..., min_length=1)
    source: str
    amount: float = 0.0

    def to_domain(self) -> Income:
        return Income(id=self.id, source=self.source, amount=self.amount)


class ExpenseSchema(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    amount: float = 0.0
    category: ExpenseCategory = ExpenseCategory.OTHER
    frequency: Optional[ExpenseFrequency] = None
    due_day: Optional[int] = Field(None, ge=0, le=31)

    def to_domain(self) -> Expense:
        return Expense(
            id=self.id,
            name=self.name,
            amount=self.amount,
            category=self.category,
            frequency=self.frequency,
            due_day=self.due_day,
        )


class SnapshotSchema(BaseModel):
    """Household financial state at a point in time"""

    debts: List[DebtSchema] = Field(default_factory=list)
    incomes: List[IncomeSchema] = Field(default_factory=list)
    expenses: List[ExpenseSchema] = Field(default_factory=list)

    def to_domain(self) -> FinancialSnapshot:
        return FinancialSnapshot(
            debts=tuple(d.to_domain() for d in self.debts),
            incomes=tuple(i.to_domain() for i in self.incomes),
            expenses=tuple(e.to_domain() for e in self.expenses),
        )


class PlanRequest(BaseModel):
    """Request body for POST /v1/plan and POST /v1/projection"""

    snapshot: SnapshotSchema
    strategy: Optional[str] = Field(None, description="avalanche | snowball; omitted uses the recommendation")
    horizon_months: Optional[int] = Field(None, ge=1, description="Maximum months to simulate")
    as_of: Optional[date] = Field(None, description="Start month for calendar labels; defaults to today")


class ReminderRequest(BaseModel):
    """Request body for POST /v1/reminders"""

    snapshot: SnapshotSchema
    as_of: Optional[date] = None


class CashFlowResponse(BaseModel):
    total_income: float
    total_fixed_expenses: float
    total_min_payments: float
    free_cash_flow: float
    payment_capacity: float
    daily_payment_cost: float


class RecommendationResponse(BaseModel):
    strategy: Strategy
    reason: str
    debt_id: Optional[str] = None
    debt_name: Optional[str] = None


class PayoffEstimateSchema(BaseModel):
    """Single-debt payoff estimate; infinite horizons are reported as months=None"""

    debt_id: str
    name: str
    balance: float
    min_payment: float
    interest_rate: float
    months: Optional[float]
    never_pays_off: bool
    status: PayoffStatus
    label: str

    @classmethod
    def from_domain(cls, estimate: PayoffEstimate) -> "PayoffEstimateSchema":
        never = math.isinf(estimate.months)
        return cls(
            debt_id=estimate.debt_id,
            name=estimate.name,
            balance=estimate.balance,
            min_payment=estimate.min_payment,
            interest_rate=estimate.interest_rate,
            months=None if never else estimate.months,
            never_pays_off=never,
            status=estimate.status,
            label=format_duration(estimate.months),
        )


class PayoffEstimatesResponse(BaseModel):
    estimates: List[PayoffEstimateSchema]


class ScheduleRowSchema(BaseModel):
    """Single simulated month"""

    period: int
    label: str
    month: date
    month_label: str = Field(..., description="Calendar month, e.g. 'October 2026'")
    opening_balance: float
    interest: float
    payment: float
    closing_balance: float
    wealth: float
    debt_balances: Dict[str, float]


class SimulationSummary(BaseModel):
    outcome: SimulationOutcome
    indeterminate: bool
    payoff_months: Optional[int]
    payoff_years_months: Optional[List[int]] = Field(None, description="[years, months] until debt-free")
    debt_free_date: Optional[date]
    periods_run: int
    total_interest: float
    total_paid: float
    wealth: float
    debt_payoff_months: Dict[str, int]
    payoff_order: List[str]


class ProgressResponse(BaseModel):
    total_debt: float
    initial_total_debt: float
    total_paid_off: float
    percent_remaining: Optional[float]
    percent_paid: Optional[float]
    balance_exceeds_initial: bool


class PlanResponse(BaseModel):
    """Response for POST /v1/plan"""

    strategy: Strategy
    recommendation: RecommendationResponse
    cash_flow: CashFlowResponse
    summary: SimulationSummary
    schedule: List[ScheduleRowSchema]
    estimates: List[PayoffEstimateSchema]
    progress: ProgressResponse


class ProjectionPoint(BaseModel):
    """Debt and wealth at one month of the forecast; index 0 is today"""

    index: int
    label: str
    debt: float
    wealth: float


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    strategy: Strategy
    summary: SimulationSummary
    points: List[ProjectionPoint]


class ReminderSchema(BaseModel):
    id: str
    kind: str
    title: str
    message: str
    due_date: Optional[date] = None


class RemindersResponse(BaseModel):
    as_of: date
    reminders: List[ReminderSchema]
