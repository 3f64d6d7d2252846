"""
Client for the Resend transactional email API.

A single POST per notification. HTTP-level rejections come back as a
DeliveryResult; transport errors and timeouts are raised to the caller.
There is deliberately no retry.
"""

import httpx
import logging
from typing import Optional

from issyx_site.core.config import Settings
from issyx_site.models.notification import DeliveryResult, NotificationMessage

logger = logging.getLogger(__name__)


class ResendClient:
    def __init__(
        self,
        api_key: str,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResendClient":
        return cls(
            api_key=settings.resend_api_key,
            api_url=settings.resend_api_url,
            timeout=settings.resend_timeout_seconds,
        )

    async def send(self, message: NotificationMessage) -> DeliveryResult:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.api_url, headers=headers, json=message.to_payload())

        if response.is_success:
            logger.info(f"Resend accepted notification to {message.to} (status {response.status_code})")
            return DeliveryResult(ok=True, status_code=response.status_code, body=response.text)

        return DeliveryResult(ok=False, status_code=response.status_code, body=response.text)
