# src/cityhall/services/notifier.py

"""Best-effort email notification when a new player registers."""

from __future__ import annotations

import html
import logging
import smtplib
from email.message import EmailMessage

from fastapi import Depends

from cityhall.config import Settings, get_settings
from cityhall.exceptions import NotificationError
from cityhall.services.game_state import Player

logger = logging.getLogger(__name__)

SUBJECT = "New City Hall Selfie Player!"

# Seconds to wait on the SMTP server before giving up.
SMTP_TIMEOUT = 10


class EmailNotifier:
    """Sends registration summaries over SMTP (SSL).

    Notifications are disabled when no sender account is configured.
    Delivery is attempted once; failures are logged and never raised
    to the caller of `notify_registration`.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def enabled(self) -> bool:
        return self.settings.email_enabled

    def build_message(self, player: Player) -> EmailMessage:
        joined = player.joined_at.astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")

        message = EmailMessage()
        message["Subject"] = SUBJECT
        message["From"] = self.settings.email_user
        message["To"] = self.settings.notify_email_to
        message.set_content(
            f"New Player Registered!\n\n"
            f"Name: {player.name}\n"
            f"Email: {player.email}\n"
            f"Time: {joined}\n"
        )
        message.add_alternative(
            "<h2>New Player Registered!</h2>\n"
            f"<p><strong>Name:</strong> {html.escape(str(player.name))}</p>\n"
            f"<p><strong>Email:</strong> {html.escape(str(player.email))}</p>\n"
            f"<p><strong>Time:</strong> {html.escape(joined)}</p>\n",
            subtype="html",
        )
        return message

    def send(self, message: EmailMessage) -> None:
        """Deliver one message, wrapping transport failures in NotificationError."""
        recipient = self.settings.notify_email_to
        try:
            with smtplib.SMTP_SSL(
                self.settings.smtp_host, self.settings.smtp_port, timeout=SMTP_TIMEOUT
            ) as smtp:
                smtp.login(
                    self.settings.email_user or "", self.settings.email_pass or ""
                )
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(recipient=recipient, reason=str(e)) from e

    def notify_registration(self, player: Player) -> bool:
        """Try to email a summary of `player`. Returns True when it was sent."""
        if not self.enabled:
            return False

        try:
            self.send(self.build_message(player))
        except NotificationError as e:
            logger.warning("Email not sent: %s", e.message, extra=e.details)
            return False
        except Exception as e:
            # Runs as a background task; nothing may escape to the server
            logger.warning("Email not sent: %s", e, exc_info=True)
            return False

        logger.info("Registration email sent for player %s", player.id)
        return True


def get_notifier(settings: Settings = Depends(get_settings)) -> EmailNotifier:
    """FastAPI dependency providing a notifier bound to the current settings."""
    return EmailNotifier(settings)
