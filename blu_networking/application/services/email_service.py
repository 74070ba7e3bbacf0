"""Email service - renders a template and hands it to the Resend client.

Senders never raise. They return True when the provider accepted the
message and False otherwise (including when no API key is configured).
"""

from typing import List, Optional, Union

import structlog

from blu_networking.application.services import email_templates
from blu_networking.infrastructure.resend_client import ResendClient

logger = structlog.get_logger(__name__)


async def send_email(
    to: Union[str, List[str]],
    subject: str,
    html: str,
    text: Optional[str] = None,
    client: Optional[ResendClient] = None,
) -> bool:
    client = client or ResendClient()
    if not client.configured:
        logger.warning("RESEND_API_KEY not configured. Email not sent.", subject=subject)
        return False

    recipients = [to] if isinstance(to, str) else [address for address in to if address]
    if not recipients:
        logger.info("Email skipped, no recipients", subject=subject)
        return False
    return await client.send(recipients, subject, html, text)


async def send_welcome_email(to: str, username: str, organization_name: str) -> bool:
    subject, html, text = email_templates.welcome_email(username, organization_name)
    return await send_email(to, subject, html, text)


async def send_event_registration_email(
    to: str, username: str, event_title: str, event_date: str, event_location: str
) -> bool:
    subject, html, text = email_templates.event_registration_email(
        username, event_title, event_date, event_location
    )
    return await send_email(to, subject, html, text)


async def send_lead_reminder_email(
    to: str, username: str, lead_name: str, lead_company: str, follow_up_date: str
) -> bool:
    subject, html, text = email_templates.lead_reminder_email(username, lead_name, lead_company, follow_up_date)
    return await send_email(to, subject, html, text)


async def send_spotlight_notification_email(to: List[str], member_name: str, achievement: str) -> bool:
    subject, html, text = email_templates.spotlight_notification_email(member_name, achievement)
    return await send_email(to, subject, html, text)


async def send_board_minutes_email(to: List[str], meeting_date: str, meeting_summary: str) -> bool:
    subject, html, text = email_templates.board_minutes_email(meeting_date, meeting_summary)
    return await send_email(to, subject, html, text)
