"""Resend HTTP API client - transactional email delivery."""

from typing import List, Optional

import httpx
import structlog

from blu_networking.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


class ResendClient:
    """Thin async client for the Resend `POST /emails` endpoint.

    One attempt per call. Failures are logged and reported as False.
    """

    def __init__(self, api_key: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.url = settings.RESEND_API_URL
        self.sender = f"{settings.FROM_NAME} <{settings.FROM_EMAIL}>"
        self.timeout = settings.EMAIL_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def send(self, to: List[str], subject: str, html: str, text: Optional[str] = None) -> bool:
        payload = {
            "from": self.sender,
            "to": to,
            "subject": subject,
            "html": html,
        }
        if text:
            payload["text"] = text

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
                response.raise_for_status()
                email_id = response.json().get("id")
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Email provider rejected message",
                status_code=exc.response.status_code,
                body=exc.response.text[:500],
                subject=subject,
            )
            return False
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Email send failed", error=str(exc), subject=subject)
            return False

        logger.info("Email sent", email_id=email_id, recipients=len(to), subject=subject)
        return True
