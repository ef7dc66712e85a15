"""Prometheus metrics for monitoring simulation outcomes, horizons, and strategy advice"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "debt_planner_simulation_total",
    "Total payoff simulations run",
    ["mode", "strategy", "outcome"],  # outcome: debt_free | indeterminate
)

payoff_horizon_histogram = Histogram(
    "debt_planner_payoff_horizon_months",
    "Months until debt-free for determinate simulations",
    buckets=[0, 6, 12, 24, 36, 60, 120, 240, 600],
)

# Advice metrics
recommendation_counter = Counter(
    "debt_planner_recommendation_total",
    "Strategy recommendations issued",
    ["strategy"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(mode: str, strategy: str, outcome: str, payoff_months: Optional[int]) -> None:
    """Record simulation outcome; only determinate runs contribute a horizon"""
    simulation_counter.labels(mode=mode, strategy=strategy, outcome=outcome).inc()

    if payoff_months is not None:
        payoff_horizon_histogram.observe(payoff_months)


def record_recommendation(strategy: str) -> None:
    recommendation_counter.labels(strategy=strategy).inc()
