"""POST /v1/reminders - due-date reminders for a given day"""

from datetime import date
from fastapi import APIRouter, Depends

from debt_planner.api.v1.schemas import ReminderRequest, ReminderSchema, RemindersResponse
from debt_planner.api.dependencies import get_settings
from debt_planner.config import Settings
from debt_planner.domain.reminders import build_reminders

router = APIRouter()


@router.post("/reminders", response_model=RemindersResponse)
def get_reminders(request_body: ReminderRequest, config: Settings = Depends(get_settings)):
    """
    Reminders for debts and fixed expenses due on as_of (default: today).

    Returns:
        Monthly check-in, debts due today or within the lookahead window,
        and fixed expenses due today
    """
    as_of = request_body.as_of or date.today()
    reminders = build_reminders(
        request_body.snapshot.to_domain(),
        as_of,
        lookahead_days=config.reminder_lookahead_days,
    )

    return RemindersResponse(
        as_of=as_of,
        reminders=[
            ReminderSchema(
                id=r.id,
                kind=r.kind,
                title=r.title,
                message=r.message,
                due_date=r.due_date,
            )
            for r in reminders
        ],
    )
