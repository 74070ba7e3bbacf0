"""
Transactional email templates.

Each template function returns (subject, html_body, text_body). Every
user-supplied value is HTML-escaped before it lands in the HTML body.
"""

from html import escape
from typing import Tuple

from blu_networking.config import get_settings

settings = get_settings()

PRIMARY = "#2563eb"
SUCCESS = "#16a34a"
WARNING = "#f59e0b"
ACCENT = "#7c3aed"
TEXT = "#333333"
MUTED = "#666666"
SURFACE = "#f8f9fa"

Email = Tuple[str, str, str]


def _base_layout(content: str) -> str:
    """Wrap content in the base email layout."""
    return f"""\
<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
  </head>
  <body style="font-family: Arial, sans-serif; line-height: 1.6; color: {TEXT}; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background-color: {SURFACE}; padding: 30px; border-radius: 10px;">
      {content}
    </div>
  </body>
</html>
"""


def _button(path: str, label: str, color: str = PRIMARY) -> str:
    return f"""\
<div style="text-align: center; margin-top: 30px;">
  <a href="{escape(settings.APP_URL.rstrip('/') + path)}"
     style="background-color: {color}; color: white; padding: 12px 30px; text-decoration: none; border-radius: 5px; display: inline-block;">
    {label}
  </a>
</div>"""


def _details(color: str, rows: list) -> str:
    lines = "".join(
        f'<p style="margin: 5px 0;"><strong>{label}:</strong> {escape(str(value))}</p>'
        for label, value in rows
    )
    return (
        f'<div style="background-color: white; padding: 20px; border-radius: 5px; '
        f'border-left: 4px solid {color}; margin: 20px 0;">{lines}</div>'
    )


def welcome_email(username: str, organization_name: str) -> Email:
    subject = f"Welcome to {organization_name}!"
    content = f"""\
<h1 style="color: {PRIMARY}; margin-bottom: 20px;">Welcome to {escape(organization_name)}!</h1>
<p>Hi {escape(username)},</p>
<p>Welcome to the BLU Networking Platform! We're excited to have you join our community.</p>
<p>Here's what you can do with your account:</p>
<ul style="background-color: white; padding: 20px; border-radius: 5px;">
  <li>Browse and connect with other members</li>
  <li>Register for networking events</li>
  <li>Track and manage your business leads</li>
  <li>Access AI-powered networking tips</li>
  <li>Participate in board meetings and discussions</li>
</ul>
<p>To get started, log in to your account and complete your profile.</p>
{_button("/auth", "Log In Now")}
<p style="margin-top: 30px; font-size: 14px; color: {MUTED};">
  If you have any questions, feel free to reach out to your organization administrator.
</p>"""
    text = f"""\
Welcome to {organization_name}!

Hi {username},

Welcome to the BLU Networking Platform! We're excited to have you join our community.

Here's what you can do with your account:
- Browse and connect with other members
- Register for networking events
- Track and manage your business leads
- Access AI-powered networking tips
- Participate in board meetings and discussions

To get started, log in to your account and complete your profile.

If you have any questions, feel free to reach out to your organization administrator."""
    return subject, _base_layout(content), text


def event_registration_email(username: str, event_title: str, event_date: str, event_location: str) -> Email:
    subject = f"Event Registration Confirmed: {event_title}"
    content = f"""\
<h1 style="color: {SUCCESS}; margin-bottom: 20px;">Registration Confirmed!</h1>
<p>Hi {escape(username)},</p>
<p>You're successfully registered for the following event:</p>
{_details(SUCCESS, [("Event", event_title), ("Date", event_date), ("Location", event_location)])}
<p>We look forward to seeing you there! Don't forget to bring business cards for networking.</p>
<p style="margin-top: 30px; font-size: 14px; color: {MUTED};">
  Need to cancel? Contact your organization administrator.
</p>"""
    text = f"""\
Registration Confirmed!

Hi {username},

You're successfully registered for the following event:

Event: {event_title}
Date: {event_date}
Location: {event_location}

We look forward to seeing you there! Don't forget to bring business cards for networking.

Need to cancel? Contact your organization administrator."""
    return subject, _base_layout(content), text


def lead_reminder_email(username: str, lead_name: str, lead_company: str, follow_up_date: str) -> Email:
    subject = f"Reminder: Follow up with {lead_name}"
    content = f"""\
<h1 style="color: {WARNING}; margin-bottom: 20px;">Follow-up Reminder</h1>
<p>Hi {escape(username)},</p>
<p>This is a friendly reminder to follow up with:</p>
{_details(WARNING, [("Name", lead_name), ("Company", lead_company), ("Follow-up Date", follow_up_date)])}
<p>Don't let this opportunity slip away! Reach out today to keep the conversation going.</p>
{_button("/leads", "View Lead Details", WARNING)}"""
    text = f"""\
Follow-up Reminder

Hi {username},

This is a friendly reminder to follow up with:

Name: {lead_name}
Company: {lead_company}
Follow-up Date: {follow_up_date}

Don't let this opportunity slip away! Reach out today to keep the conversation going."""
    return subject, _base_layout(content), text


def spotlight_notification_email(member_name: str, achievement: str) -> Email:
    subject = f"Member Spotlight: {member_name}"
    content = f"""\
<h1 style="color: {ACCENT}; margin-bottom: 20px;">Member Spotlight</h1>
<p>We're excited to spotlight one of our outstanding members!</p>
{_details(ACCENT, [("Member", member_name), ("Achievement", achievement)])}
<p>Congratulations to {escape(member_name)} on this remarkable accomplishment!</p>
{_button("/members", "View Member Directory", ACCENT)}"""
    text = f"""\
Member Spotlight: {member_name}

We're excited to spotlight one of our outstanding members!

Member: {member_name}
Achievement: {achievement}

Congratulations to {member_name} on this remarkable accomplishment!"""
    return subject, _base_layout(content), text


def board_minutes_email(meeting_date: str, meeting_summary: str) -> Email:
    subject = f"Board Meeting Minutes - {meeting_date}"
    content = f"""\
<h1 style="color: {PRIMARY}; margin-bottom: 20px;">Board Meeting Minutes</h1>
<p>The minutes from our board meeting have been published.</p>
{_details(PRIMARY, [("Meeting Date", meeting_date), ("Summary", meeting_summary)])}
{_button("/board-minutes", "View Full Minutes")}"""
    text = f"""\
Board Meeting Minutes - {meeting_date}

The minutes from our board meeting have been published.

Meeting Date: {meeting_date}
Summary: {meeting_summary}

View the full minutes on the BLU Networking Platform."""
    return subject, _base_layout(content), text
