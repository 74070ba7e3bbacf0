"""Lead and goal service, plus the daily follow-up reminder run."""

from datetime import date
from typing import Dict, List, Optional

import structlog

from blu_networking.application.services.email_service import send_lead_reminder_email
from blu_networking.core.timeutils import get_current_date
from blu_networking.domain.models.lead import Lead
from blu_networking.domain.models.user import User
from blu_networking.domain.models.user_goal import UserGoal
from blu_networking.domain.repositories.lead_repository import GoalRepository, LeadRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.lead import GoalCreate, LeadCreate

logger = structlog.get_logger(__name__)


def list_leads(repo: LeadRepository, user: User) -> List[Lead]:
    return repo.list_by_user(user.id)


def create_lead(repo: LeadRepository, user: User, body: LeadCreate) -> Lead:
    data = body.model_dump()
    data["user_id"] = user.id
    return repo.create(data)


def get_current_goal(repo: GoalRepository, user: User) -> Optional[UserGoal]:
    return repo.current_for_user(user.id, get_current_date())


def create_goal(repo: GoalRepository, user: User, body: GoalCreate) -> UserGoal:
    data = body.model_dump()
    data["user_id"] = user.id
    return repo.create(data)


async def send_follow_up_reminders(
    lead_repo: LeadRepository, user_repo: UserRepository, day: Optional[date] = None
) -> Dict[str, int]:
    """Email the owner of every lead whose follow-up date is `day` (today by default)."""
    day = day or get_current_date()
    leads = lead_repo.due_for_follow_up(day)
    sent = failed = 0
    owners: Dict[int, Optional[User]] = {}

    for lead in leads:
        if lead.user_id not in owners:
            owners[lead.user_id] = user_repo.get_by_id(lead.user_id)
        owner = owners[lead.user_id]
        if owner is None:
            continue
        ok = await send_lead_reminder_email(
            owner.email, owner.full_name, lead.name, lead.company, day.isoformat()
        )
        if ok:
            sent += 1
        else:
            failed += 1

    logger.info("Lead follow-up reminders processed", day=day.isoformat(), due=len(leads), sent=sent, failed=failed)
    return {"due": len(leads), "sent": sent, "failed": failed}
