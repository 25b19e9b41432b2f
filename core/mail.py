import logging
from functools import cached_property

from fastapi import Request
from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType

from core.config import Settings

logger = logging.getLogger(__name__)


def build_mail_config(settings: Settings) -> ConnectionConfig:
    return ConnectionConfig(
        MAIL_USERNAME=settings.MAIL_USERNAME,
        MAIL_PASSWORD=settings.MAIL_PASSWORD,
        MAIL_FROM=settings.mailbox,
        MAIL_FROM_NAME=settings.MAIL_FROM_NAME,
        MAIL_PORT=settings.MAIL_PORT,
        MAIL_SERVER=settings.MAIL_SERVER,
        MAIL_STARTTLS=settings.MAIL_STARTTLS,
        MAIL_SSL_TLS=settings.MAIL_SSL_TLS,
        USE_CREDENTIALS=settings.USE_CREDENTIALS,
        SUPPRESS_SEND=int(settings.MAIL_SUPPRESS_SEND),
    )


class Mailer:
    """
    Sends notification mails to the configured mailbox through the SMTP relay.

    The relay connection is configured on first use, so a bad relay setup
    surfaces as a failed send instead of a failed startup.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def mailbox(self) -> str:
        return self.settings.mailbox

    @cached_property
    def client(self) -> FastMail:
        return FastMail(build_mail_config(self.settings))

    async def send_notification(self, subject: str, body: str):
        message = MessageSchema(
            subject=subject,
            recipients=[self.mailbox],
            body=body,
            subtype=MessageType.plain,
        )
        await self.client.send_message(message)
        logger.info("Notification '%s' sent to %s", subject, self.mailbox)


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
