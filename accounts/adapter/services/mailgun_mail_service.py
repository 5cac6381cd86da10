"""
Mailgun Mail Service

Sends transactional mail through the Mailgun HTTP API.
"""

import logging
from typing import Optional

import httpx

from accounts.app.errors import ErrorCode
from accounts.app.services.mail_service import IMailService
from accounts.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Instructions for resetting your password"

RESET_TEXT_TEMPLATE = """Hello,

We received a request to reset the password for your account. To choose a new password, open the link below:

{reset_url}

If you are asked for a token, use this value:

{token}

The link expires in 12 hours. If you did not ask for a password reset you can ignore this email; your password will not change.
"""

RESET_HTML_TEMPLATE = """<p>Hello,</p>
<p>We received a request to reset the password for your account. To choose a new password, open the link below:</p>
<p><a href="{reset_url}">{reset_url}</a></p>
<p>If you are asked for a token, use this value:</p>
<p><code>{token}</code></p>
<p>The link expires in 12 hours. If you did not ask for a password reset you can ignore this email; your password will not change.</p>
"""


class MailgunMailService(IMailService):
    """IMailService implementation over the Mailgun messages endpoint"""

    def __init__(
        self,
        domain: str,
        api_key: str,
        sender: str,
        reset_url: str,
        api_base: str = "https://api.eu.mailgun.net/v3",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.domain = domain
        self.api_key = api_key
        self.sender = sender
        self.reset_url = reset_url
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def send_password_reset(self, to_email: str, token: str) -> Result[None]:
        reset_url = str(httpx.URL(self.reset_url, params={"token": token}))
        data = {
            "from": self.sender,
            "to": to_email,
            "subject": RESET_SUBJECT,
            "text": RESET_TEXT_TEMPLATE.format(reset_url=reset_url, token=token),
            "html": RESET_HTML_TEMPLATE.format(reset_url=reset_url, token=token),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    f"{self.api_base}/{self.domain}/messages",
                    auth=("api", self.api_key),
                    data=data,
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(f"Mailgun error, could not send password reset: {exc!r}")
            return Return.err(
                Error(ErrorCode.MAIL_DELIVERY_FAILED, "Could not send password reset email")
            )

        logger.info("Password reset email queued by Mailgun")
        return Return.ok(None)
