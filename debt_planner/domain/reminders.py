"""Due-date reminders for debts and fixed expenses"""

from calendar import monthrange
from datetime import date
from typing import List, Optional
from debt_planner.domain.models import Debt, Expense, ExpenseFrequency, FinancialSnapshot, Reminder
from debt_planner.utils.numbers import non_negative

CHECK_IN_LAST_DAY = 3  # first days of the month prompt an income update
DEFAULT_LOOKAHEAD_DAYS = 3
BIWEEKLY_OFFSET_DAYS = 15


def _day_in_month(day: int, today: date) -> int:
    """Clamp a due day to the length of today's month"""
    return min(day, monthrange(today.year, today.month)[1])


def _debt_reminder(debt: Debt, today: date, lookahead_days: int) -> Optional[Reminder]:
    if non_negative(debt.current_amount) <= 0 or not debt.due_day:
        return None

    due_day = _day_in_month(debt.due_day, today)
    due_date = today.replace(day=due_day)

    if due_day == today.day:
        return Reminder(
            id=f"debt-due-{debt.id}",
            kind="warning",
            title="Due today",
            message=f"The minimum payment for {debt.name} is due today. Avoid late fees.",
            due_date=due_date,
        )

    days_left = due_day - today.day
    if 0 < days_left <= lookahead_days:
        return Reminder(
            id=f"debt-upcoming-{debt.id}",
            kind="info",
            title="Payment coming up",
            message=f"The payment for {debt.name} is due in {days_left} day{'s' if days_left != 1 else ''}.",
            due_date=due_date,
        )
    return None


def _expense_reminder(expense: Expense, today: date) -> Optional[Reminder]:
    frequency = expense.frequency or ExpenseFrequency.MONTHLY
    message = None

    if frequency is ExpenseFrequency.MONTHLY:
        if expense.due_day and today.day == _day_in_month(expense.due_day, today):
            message = f"Today is the day to pay or set aside: {expense.name}."

    elif frequency is ExpenseFrequency.WEEKLY:
        # due_day counts from Sunday=0; date.weekday() counts from Monday=0
        if expense.due_day is not None and (today.weekday() + 1) % 7 == expense.due_day:
            message = f"Weekly: {expense.name} is due today."

    elif frequency is ExpenseFrequency.BIWEEKLY:
        if expense.due_day and today.day in (expense.due_day, expense.due_day + BIWEEKLY_OFFSET_DAYS):
            message = f"Bi-weekly: {expense.name} is due today."

    if message is None:
        return None

    return Reminder(
        id=f"expense-{expense.id}-{today.isoformat()}",
        kind="info",
        title="Fixed expense",
        message=message,
        due_date=today,
    )


def build_reminders(
    snapshot: FinancialSnapshot,
    today: date,
    lookahead_days: int = DEFAULT_LOOKAHEAD_DAYS,
) -> List[Reminder]:
    """
    Collect the reminders that apply on a given day.

    - Days 1-3 of the month: check-in to record the month's income
    - Active debts due today (warning) or within lookahead_days (info)
    - Fixed expenses due today, by frequency: Monthly on due_day,
      Weekly on the matching weekday, Bi-weekly on due_day and due_day + 15
    """
    reminders: List[Reminder] = []

    if today.day <= CHECK_IN_LAST_DAY:
        reminders.append(
            Reminder(
                id="monthly-checkin",
                kind="info",
                title="Start of the month",
                message="Time to record this month's income so the budget stays current.",
            )
        )

    for debt in snapshot.debts:
        reminder = _debt_reminder(debt, today, lookahead_days)
        if reminder:
            reminders.append(reminder)

    for expense in snapshot.expenses:
        reminder = _expense_reminder(expense, today)
        if reminder:
            reminders.append(reminder)

    return reminders
