"""POST /v1/plan and /v1/projection - debt payoff simulation endpoints"""

import time
import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from debt_planner.api.v1.schemas import (
    CashFlowResponse,
    PayoffEstimateSchema,
    PlanRequest,
    PlanResponse,
    ProgressResponse,
    ProjectionPoint,
    ProjectionResponse,
    RecommendationResponse,
    ScheduleRowSchema,
    SimulationSummary,
)
from debt_planner.api.dependencies import get_request_id, get_settings
from debt_planner.config import Settings
from debt_planner.domain.amortization import project_debt_and_wealth, simulate_payoff
from debt_planner.domain.capacity import calculate_cash_flow, daily_payment_cost
from debt_planner.domain.exceptions import DomainException
from debt_planner.domain.models import ScheduleRow, SimulationResult
from debt_planner.domain.payoff import rank_payoff_estimates
from debt_planner.domain.progress import summarize_progress
from debt_planner.domain.strategy import resolve_strategy
from debt_planner.infrastructure.observability.metrics import record_simulation, record_recommendation
from debt_planner.infrastructure.observability.logging import log_simulation
from debt_planner.utils.date_utils import add_months, month_label, split_months

router = APIRouter()


def _horizon(requested: Optional[int], default: int, config: Settings) -> int:
    horizon = requested or default
    if horizon > config.max_horizon_months:
        raise HTTPException(
            status_code=422,
            detail=f"horizon_months may not exceed {config.max_horizon_months}",
        )
    return horizon


def _summary(result: SimulationResult, as_of: date) -> SimulationSummary:
    payoff = result.payoff_months
    return SimulationSummary(
        outcome=result.outcome,
        indeterminate=result.is_indeterminate,
        payoff_months=payoff,
        payoff_years_months=list(split_months(payoff)) if payoff is not None else None,
        debt_free_date=add_months(as_of, payoff) if payoff is not None else None,
        periods_run=result.periods_run,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        wealth=result.wealth,
        debt_payoff_months=result.debt_payoff_periods,
        payoff_order=result.payoff_order,
    )


def _schedule_rows(schedule: List[ScheduleRow], as_of: date) -> List[ScheduleRowSchema]:
    # Period 1 is paid in the current calendar month
    first_month = as_of.replace(day=1)
    return [
        ScheduleRowSchema(
            period=row.period,
            label=row.label,
            month=add_months(first_month, row.period - 1),
            month_label=month_label(first_month, row.period - 1),
            opening_balance=row.opening_balance,
            interest=row.interest,
            payment=row.payment,
            closing_balance=row.closing_balance,
            wealth=row.wealth,
            debt_balances=row.debt_balances,
        )
        for row in schedule
    ]


@router.post("/plan", response_model=PlanResponse)
def create_plan(
    request_body: PlanRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Build a full payoff plan from a financial snapshot.

    Flow:
    1. Derive monthly cash flow and payment capacity
    2. Resolve the strategy (explicit choice, else the recommendation)
    3. Simulate month by month up to the horizon cap
    4. Add closed-form per-debt estimates and progress figures
    """
    start_time = time.time()
    request_id = get_request_id(request)
    horizon = _horizon(request_body.horizon_months, config.default_horizon_months, config)
    as_of = request_body.as_of or date.today()

    try:
        snapshot = request_body.snapshot.to_domain()
        cash_flow = calculate_cash_flow(snapshot)
        strategy, recommendation = resolve_strategy(request_body.strategy, snapshot.debts)
        result = simulate_payoff(
            snapshot,
            cash_flow.payment_capacity,
            strategy=strategy,
            max_periods=horizon,
        )
        estimates = rank_payoff_estimates(snapshot.debts)
        progress = summarize_progress(snapshot.debts)

    except DomainException as e:
        logging.warning(f"Rejected plan request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simulation("plan", strategy.value, result.outcome.value, result.payoff_months)
    record_recommendation(recommendation.strategy.value)
    log_simulation(
        request_id,
        "plan",
        strategy.value,
        result.outcome.value,
        result.periods_run,
        result.payoff_months,
        duration_ms,
    )

    return PlanResponse(
        strategy=strategy,
        recommendation=RecommendationResponse(
            strategy=recommendation.strategy,
            reason=recommendation.reason,
            debt_id=recommendation.debt_id,
            debt_name=recommendation.debt_name,
        ),
        cash_flow=CashFlowResponse(
            total_income=cash_flow.total_income,
            total_fixed_expenses=cash_flow.total_fixed_expenses,
            total_min_payments=cash_flow.total_min_payments,
            free_cash_flow=cash_flow.free_cash_flow,
            payment_capacity=cash_flow.payment_capacity,
            daily_payment_cost=daily_payment_cost(cash_flow.payment_capacity),
        ),
        summary=_summary(result, as_of),
        schedule=_schedule_rows(result.schedule, as_of),
        estimates=[PayoffEstimateSchema.from_domain(e) for e in estimates],
        progress=ProgressResponse(
            total_debt=progress.total_debt,
            initial_total_debt=progress.initial_total_debt,
            total_paid_off=progress.total_paid_off,
            percent_remaining=progress.percent_remaining,
            percent_paid=progress.percent_paid,
            balance_exceeds_initial=progress.balance_exceeds_initial,
        ),
    )


@router.post("/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: PlanRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Forecast total debt and accumulated wealth month by month.

    Keeps running for at least projection_min_months even after the debt is
    gone so the growth of freed-up cash is visible. Point 0 is today.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    horizon = _horizon(request_body.horizon_months, config.projection_horizon_months, config)
    as_of = request_body.as_of or date.today()

    try:
        snapshot = request_body.snapshot.to_domain()
        cash_flow = calculate_cash_flow(snapshot)
        strategy, _ = resolve_strategy(request_body.strategy, snapshot.debts)
        result = project_debt_and_wealth(
            snapshot,
            cash_flow.payment_capacity,
            strategy=strategy,
            max_periods=horizon,
            min_periods=min(config.projection_min_months, horizon),
        )
        progress = summarize_progress(snapshot.debts)

    except DomainException as e:
        logging.warning(f"Rejected projection request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_simulation("projection", strategy.value, result.outcome.value, result.payoff_months)
    log_simulation(
        request_id,
        "projection",
        strategy.value,
        result.outcome.value,
        result.periods_run,
        result.payoff_months,
        duration_ms,
    )

    points = [ProjectionPoint(index=0, label="Today", debt=progress.total_debt, wealth=0.0)]
    points.extend(
        ProjectionPoint(index=row.period, label=row.label, debt=row.closing_balance, wealth=row.wealth)
        for row in result.schedule
    )

    return ProjectionResponse(
        strategy=strategy,
        summary=_summary(result, as_of),
        points=points,
    )
