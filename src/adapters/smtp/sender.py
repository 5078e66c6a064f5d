"""
SMTP email sender adapter - Implements EmailSender protocol.

Delivers the verification code through an SMTP relay. smtplib is blocking,
so delivery runs in a worker thread to keep the event loop free.
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)

SUBJECT = "Your verification code"
BODY_TEMPLATE = "Your verification code is {code}"


class SmtpEmailSender:
    """
    Implements EmailSender protocol via smtplib.

    Delivery errors (smtplib.SMTPException, OSError) propagate to the caller.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        user: str | None = None,
        password: str | None = None,
        starttls: bool = True,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._user = user
        self._password = password
        self._starttls = starttls

    async def send_verification_code(self, email: str, code: str) -> None:
        """Send the code to `email` and wait for the relay to accept it."""
        message = self._build_message(email, code)
        await asyncio.to_thread(self._deliver, message)
        logger.info("Verification email sent to %s", email)

    def _build_message(self, email: str, code: str) -> MIMEText:
        message = MIMEText(BODY_TEMPLATE.format(code=code))
        message["Subject"] = SUBJECT
        message["From"] = self._sender
        message["To"] = email
        return message

    def _deliver(self, message: MIMEText) -> None:
        with smtplib.SMTP(self._host, self._port) as server:
            if self._starttls:
                server.starttls()
            if self._user and self._password:
                server.login(self._user, self._password)
            server.send_message(message)
