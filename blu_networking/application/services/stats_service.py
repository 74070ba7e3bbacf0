"""Dashboard, admin and analytics aggregates."""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from blu_networking.core.timeutils import get_current_date, to_local, tz, utc_now
from blu_networking.domain.models.lead import CONVERTED_STATUS
from blu_networking.domain.models.user import User
from blu_networking.domain.repositories.event_repository import EventRepository
from blu_networking.domain.repositories.lead_repository import LeadRepository
from blu_networking.domain.repositories.message_repository import MessageRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.stats import (
    AdminStats,
    AnalyticsStats,
    MemberStats,
    NamedCount,
    TopMember,
    TrendPoint,
)

PERIOD_DAYS = {
    "monthly": 30,
    "quarterly": 90,
    "yearly": 365,
}
TREND_MONTHS = 6
TOP_MEMBERS_LIMIT = 5


def get_member_stats(
    lead_repo: LeadRepository,
    event_repo: EventRepository,
    message_repo: MessageRepository,
    user: User,
) -> MemberStats:
    return MemberStats(
        connections=message_repo.count_distinct_contacts(user.id),
        leads_exchanged=lead_repo.count_by_user(user.id),
        events_attended=event_repo.count_attended_by_user(user.id),
        lead_value=lead_repo.total_value_by_user(user.id),
    )


def get_admin_stats(
    user_repo: UserRepository,
    event_repo: EventRepository,
    lead_repo: LeadRepository,
) -> AdminStats:
    return AdminStats(
        total_members=user_repo.count(),
        active_events=event_repo.count_active(get_current_date()),
        total_leads=lead_repo.count_all(),
        avg_lead_value=lead_repo.average_value(),
    )


# --- Analytics -------------------------------------------------------------

def _windows(period: str):
    """(previous_start, current_start) for a trailing window of the period's length."""
    length = timedelta(days=PERIOD_DAYS[period])
    current_start = utc_now() - length
    return current_start - length, current_start


def _percent_change(current: int, previous: int) -> int:
    if previous == 0:
        return 100 if current > 0 else 0
    return round((current - previous) * 100 / previous)


def _conversion_rate(converted: int, total: int) -> int:
    return round(converted * 100 / total) if total else 0


def get_analytics_stats(
    lead_repo: LeadRepository,
    event_repo: EventRepository,
    message_repo: MessageRepository,
    user: User,
    period: str = "monthly",
) -> AnalyticsStats:
    previous_start, current_start = _windows(period)

    leads_now = lead_repo.count_by_user(user.id, since=current_start)
    leads_before = lead_repo.count_by_user(user.id, since=previous_start, until=current_start)

    converted_now = lead_repo.count_by_user(user.id, since=current_start, status=CONVERTED_STATUS)
    converted_before = lead_repo.count_by_user(
        user.id, since=previous_start, until=current_start, status=CONVERTED_STATUS
    )
    rate_now = _conversion_rate(converted_now, leads_now)
    rate_before = _conversion_rate(converted_before, leads_before)

    current_day = to_local(current_start).date()
    previous_day = to_local(previous_start).date()
    events_now = event_repo.count_attended_by_user(user.id, since=current_day)
    events_before = event_repo.count_attended_by_user(user.id, since=previous_day, until=current_day)

    contacts_now = message_repo.count_distinct_contacts(user.id, since=current_start)
    contacts_before = message_repo.count_distinct_contacts(user.id, since=previous_start, until=current_start)

    return AnalyticsStats(
        total_leads=leads_now,
        lead_change=_percent_change(leads_now, leads_before),
        conversion_rate=rate_now,
        conversion_rate_change=rate_now - rate_before,
        events_attended=events_now,
        events_change=_percent_change(events_now, events_before),
        connections=contacts_now,
        connections_change=_percent_change(contacts_now, contacts_before),
    )


def get_lead_types(lead_repo: LeadRepository, user: User, period: str = "monthly") -> List[NamedCount]:
    _, current_start = _windows(period)
    counts = lead_repo.counts_by_type(user.id, since=current_start)
    return [NamedCount(name=name, value=value) for name, value in counts.items()]


def get_lead_statuses(lead_repo: LeadRepository, user: User, period: str = "monthly") -> List[NamedCount]:
    _, current_start = _windows(period)
    counts = lead_repo.counts_by_status(user.id, since=current_start)
    return [NamedCount(name=name, value=value) for name, value in counts.items()]


def _trailing_months(now_local: datetime, months: int) -> List[tuple]:
    year, month = now_local.year, now_local.month
    keys = []
    for _ in range(months):
        keys.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(keys))


def get_trends(
    lead_repo: LeadRepository,
    event_repo: EventRepository,
    message_repo: MessageRepository,
    user: User,
    months: int = TREND_MONTHS,
) -> List[TrendPoint]:
    """Per calendar month (organisation timezone) for the last `months` months."""
    keys = _trailing_months(datetime.now(tz), months)
    first_year, first_month = keys[0]
    start_local = tz.localize(datetime(first_year, first_month, 1))
    since = start_local.astimezone(timezone.utc)

    leads: Dict[tuple, int] = {key: 0 for key in keys}
    contacts: Dict[tuple, set] = {key: set() for key in keys}
    events: Dict[tuple, int] = {key: 0 for key in keys}

    for lead in lead_repo.created_since(user.id, since):
        if lead.created_at is None:
            continue
        local = to_local(lead.created_at)
        if (local.year, local.month) in leads:
            leads[(local.year, local.month)] += 1

    for message in message_repo.list_for_user(user.id, since=since):
        if message.sent_at is None:
            continue
        local = to_local(message.sent_at)
        key = (local.year, local.month)
        if key in contacts:
            other = message.to_user_id if message.from_user_id == user.id else message.from_user_id
            contacts[key].add(other)

    for event in event_repo.attended_events_for_user(user.id, start_local.date()):
        key = (event.date.year, event.date.month)
        if key in events:
            events[key] += 1

    return [
        TrendPoint(
            month=calendar.month_abbr[month],
            leads=leads[(year, month)],
            connections=len(contacts[(year, month)]),
            events=events[(year, month)],
        )
        for year, month in keys
    ]


def get_top_members(lead_repo: LeadRepository, period: str = "monthly") -> List[TopMember]:
    _, current_start = _windows(period)
    rows = lead_repo.top_members(limit=TOP_MEMBERS_LIMIT, since=current_start)
    return [TopMember(**row) for row in rows]
