import logging
from typing import Optional

import httpx

from cashin_mailer.domain.models import DispatchResult
from cashin_mailer.domain.protocols import HttpClient

logger = logging.getLogger(__name__)


class HttpMailRelay:
    """Transactional-email HTTP API relay (Brevo-style JSON payload)."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender_name: str,
        sender_address: str,
        http_client: Optional[HttpClient] = None,
        timeout: float = 10.0,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender_name = sender_name
        self.sender_address = sender_address
        # Create persistent client with connection pooling
        self.client = http_client or httpx.AsyncClient(
            timeout=timeout,
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        )

    def build_payload(self, recipient: str, subject: str, html_body: str) -> dict:
        return {
            "sender": {"name": self.sender_name, "email": self.sender_address},
            "to": [{"email": recipient}],
            "subject": subject,
            "htmlContent": html_body,
        }

    async def send(self, recipient: str, subject: str, html_body: str) -> DispatchResult:
        """Post the email to the relay API."""
        headers = {"api-key": self.api_key, "accept": "application/json"}
        payload = self.build_payload(recipient, subject, html_body)

        try:
            logger.debug(f"Posting email for {recipient} to {self.api_url}")
            response = await self.client.post(self.api_url, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Mail API timeout for {recipient}: {e}")
            return DispatchResult.failed(f"Mail API timeout: {e}")
        except httpx.RequestError as e:
            logger.error(f"Mail API request error for {recipient}: {e}")
            return DispatchResult.failed(f"Mail API request error: {e}")

        if response.status_code >= 400:
            logger.error(f"Mail API rejected email for {recipient}: {response.status_code} - {response.text}")
            return DispatchResult.failed(f"Mail API error: {response.status_code}")

        message_id = ""
        try:
            data = response.json()
            if isinstance(data, dict):
                message_id = data.get("messageId", "")
        except ValueError:
            logger.debug("Mail API returned a non-JSON body")
        return DispatchResult.sent(f"messageId={message_id}" if message_id else "accepted")

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
