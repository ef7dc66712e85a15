"""POST /v1/cash-flow, /v1/strategy/recommendation, /v1/payoff-estimates - snapshot analysis"""

from fastapi import APIRouter

from debt_planner.api.v1.schemas import (
    CashFlowResponse,
    PayoffEstimateSchema,
    PayoffEstimatesResponse,
    RecommendationResponse,
    SnapshotSchema,
)
from debt_planner.domain.capacity import calculate_cash_flow, daily_payment_cost
from debt_planner.domain.payoff import rank_payoff_estimates
from debt_planner.domain.strategy import recommend_strategy
from debt_planner.infrastructure.observability.metrics import record_recommendation

router = APIRouter()


@router.post("/cash-flow", response_model=CashFlowResponse)
def get_cash_flow(snapshot: SnapshotSchema):
    """
    Monthly income, fixed expenses, and what is left to fight debt.

    payment_capacity already includes minimum payments; free_cash_flow is
    what remains after them and may be negative.
    """
    cash_flow = calculate_cash_flow(snapshot.to_domain())

    return CashFlowResponse(
        total_income=cash_flow.total_income,
        total_fixed_expenses=cash_flow.total_fixed_expenses,
        total_min_payments=cash_flow.total_min_payments,
        free_cash_flow=cash_flow.free_cash_flow,
        payment_capacity=cash_flow.payment_capacity,
        daily_payment_cost=daily_payment_cost(cash_flow.payment_capacity),
    )


@router.post("/strategy/recommendation", response_model=RecommendationResponse)
def get_recommendation(snapshot: SnapshotSchema):
    """Advisory avalanche/snowball pick with the reason behind it"""
    recommendation = recommend_strategy(snapshot.to_domain().debts)
    record_recommendation(recommendation.strategy.value)

    return RecommendationResponse(
        strategy=recommendation.strategy,
        reason=recommendation.reason,
        debt_id=recommendation.debt_id,
        debt_name=recommendation.debt_name,
    )


@router.post("/payoff-estimates", response_model=PayoffEstimatesResponse)
def get_payoff_estimates(snapshot: SnapshotSchema):
    """
    Per-debt time to zero paying only each debt's own minimum.

    Returns:
        Estimates sorted quickest first; debts whose interest outpaces the
        payment come last with months=null
    """
    estimates = rank_payoff_estimates(snapshot.to_domain().debts)
    return PayoffEstimatesResponse(
        estimates=[PayoffEstimateSchema.from_domain(e) for e in estimates]
    )
