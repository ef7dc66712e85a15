"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict
from fastapi.testclient import TestClient
from debt_planner.api.main import create_app
from debt_planner.domain.models import (
    Debt,
    Expense,
    ExpenseCategory,
    ExpenseFrequency,
    FinancialSnapshot,
    Income,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def household_snapshot() -> FinancialSnapshot:
    """Two-income household with a credit card, a store card and a mortgage"""
    return FinancialSnapshot(
        debts=(
            Debt("1", "BBVA", initial_amount=50000, current_amount=45000, min_payment=2500, interest_rate=45, due_day=15),
            Debt("2", "Plata Card", initial_amount=15000, current_amount=12000, min_payment=1000, interest_rate=65, due_day=5),
            Debt("3", "Fovissste", initial_amount=800000, current_amount=750000, min_payment=5000, interest_rate=11, due_day=28),
        ),
        incomes=(
            Income("1", "Edna", 18000),
            Income("2", "Ronaldo", 20000),
        ),
        expenses=(
            Expense("1", "Electricity", 500, ExpenseCategory.SERVICES, ExpenseFrequency.MONTHLY, due_day=10),
            Expense("2", "Internet", 600, ExpenseCategory.SERVICES, ExpenseFrequency.MONTHLY, due_day=5),
            Expense("3", "Weekly groceries", 1000, ExpenseCategory.FOOD, ExpenseFrequency.WEEKLY, due_day=1),
            Expense("4", "Nanny", 1500, ExpenseCategory.NANNY, ExpenseFrequency.BIWEEKLY, due_day=15),
        ),
    )


@pytest.fixture
def household_payload() -> Dict[str, Any]:
    """JSON form of household_snapshot as the CRUD layer would send it"""
    return {
        "debts": [
            {"id": "1", "name": "BBVA", "initial_amount": 50000, "current_amount": 45000,
             "min_payment": 2500, "interest_rate": 45, "due_day": 15},
            {"id": "2", "name": "Plata Card", "initial_amount": 15000, "current_amount": 12000,
             "min_payment": 1000, "interest_rate": 65, "due_day": 5},
            {"id": "3", "name": "Fovissste", "initial_amount": 800000, "current_amount": 750000,
             "min_payment": 5000, "interest_rate": 11, "due_day": 28},
        ],
        "incomes": [
            {"id": "1", "source": "Edna", "amount": 18000},
            {"id": "2", "source": "Ronaldo", "amount": 20000},
        ],
        "expenses": [
            {"id": "1", "name": "Electricity", "amount": 500, "category": "Services",
             "frequency": "Monthly", "due_day": 10},
            {"id": "2", "name": "Internet", "amount": 600, "category": "Services",
             "frequency": "Monthly", "due_day": 5},
            {"id": "3", "name": "Weekly groceries", "amount": 1000, "category": "Food",
             "frequency": "Weekly", "due_day": 1},
            {"id": "4", "name": "Nanny", "amount": 1500, "category": "Nanny",
             "frequency": "Bi-weekly", "due_day": 15},
        ],
    }
