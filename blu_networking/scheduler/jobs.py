"""APScheduler jobs - daily lead follow-up reminders."""

from datetime import datetime

import pytz
import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from blu_networking.config import get_settings
from blu_networking.infrastructure.database import SessionLocal

settings = get_settings()
logger = structlog.get_logger(__name__)
tz = pytz.timezone(settings.TIMEZONE)

scheduler = AsyncIOScheduler(timezone=tz)


async def lead_reminder_job():
    """Daily job: remind members about leads whose follow-up date is today."""
    from blu_networking.application.services.lead_service import send_follow_up_reminders
    from blu_networking.domain.models.lead import Lead
    from blu_networking.domain.models.user import User
    from blu_networking.infrastructure.repositories.lead_repository import SQLAlchemyLeadRepository
    from blu_networking.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    logger.info("Running lead reminder job", at=datetime.now(tz).strftime("%Y-%m-%d %H:%M"))

    db = SessionLocal()
    try:
        lead_repo = SQLAlchemyLeadRepository(db, Lead)
        user_repo = SQLAlchemyUserRepository(db, User)
        result = await send_follow_up_reminders(lead_repo, user_repo)
        logger.info("Lead reminder job finished", **result)
    except Exception:
        logger.exception("Lead reminder job failed")
    finally:
        db.close()


def start_scheduler():
    """Start the APScheduler with the daily lead reminder job."""
    scheduler.add_job(
        lead_reminder_job,
        trigger=CronTrigger(hour=settings.LEAD_REMINDER_HOUR, minute=0, timezone=tz),
        id="lead_follow_up_reminders",
        name="Lead follow-up reminders (daily)",
        replace_existing=True,
    )

    scheduler.start()
    logger.info("Scheduler started", lead_reminder_hour=settings.LEAD_REMINDER_HOUR, timezone=settings.TIMEZONE)


def stop_scheduler():
    """Stop the scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
