"""
Notification collaborators for the ledger.
Centralized SMTP handling plus the notifier used after successful operations.
"""

import smtplib
import logging
from datetime import datetime
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from config import Settings, get_settings
from repositories import UserPreferencesRepository

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything that can deliver a message to a user."""

    def notify(self, user_id: str, message: str) -> object:
        ...


class LoggingNotifier:
    """Notifier that writes the message to the application log."""

    def notify(self, user_id: str, message: str) -> bool:
        logger.info(f"Notification for user {user_id}: {message}")
        return True


class EmailService:
    """
    Service for sending emails via SMTP.
    Configuration loaded from centralized config module.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize email service with configuration from centralized config."""
        self.settings = settings or get_settings()
        self.smtp_server = self.settings.smtp_server
        self.smtp_port = self.settings.smtp_port
        self.smtp_username = self.settings.smtp_username
        self.smtp_password = self.settings.smtp_password
        self.from_email = self.settings.email_from

    def is_configured(self) -> bool:
        """Check if email service is properly configured."""
        return self.settings.is_email_configured

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        plain_text: Optional[str] = None
    ) -> bool:
        """
        Send an HTML email.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            html_content: HTML body content
            plain_text: Optional plain text fallback

        Returns:
            True if email sent successfully, False otherwise
        """
        if not self.is_configured():
            logger.error("Email service not configured. Missing credentials.")
            return False

        if not to_email:
            logger.error("Recipient email address is required.")
            return False

        try:
            msg = MIMEMultipart('alternative')
            msg['Subject'] = subject
            msg['From'] = self.from_email
            msg['To'] = to_email

            if plain_text:
                msg.attach(MIMEText(plain_text, 'plain'))
            msg.attach(MIMEText(html_content, 'html'))

            logger.info(f"Sending email to {to_email}")
            with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

            logger.info(f"Email sent successfully to {to_email}")
            return True

        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email: {e}")
            return False

    def send_transaction_notice(self, to_email: str, user_id: str, message: str) -> bool:
        """Send a ledger transaction notice email."""
        html_content = f"""
        <html>
        <body>
            <h2>Fund Ledger Activity</h2>
            <p>Hello <strong>{user_id}</strong>,</p>
            <p>{message}.</p>
            <p><strong>Time:</strong> {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}</p>
            <p><em>This is an automated message from FundLedger.</em></p>
        </body>
        </html>
        """

        subject = "FundLedger: transaction processed"
        return self.send_email(to_email, subject, html_content, plain_text=message)


class EmailNotifier:
    """Notifier that emails the user at the address stored in their preferences."""

    def __init__(self, email_service: Optional[EmailService] = None):
        self.email_service = email_service or EmailService()

    def notify(self, user_id: str, message: str) -> bool:
        try:
            prefs = UserPreferencesRepository.get_by_user(user_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up email for user {user_id}: {e}")
            return False
        if not prefs or not prefs.email_address:
            logger.warning(f"No email address stored for user {user_id}; notification dropped")
            return False
        return self.email_service.send_transaction_notice(prefs.email_address, user_id, message)


def build_notifier(settings: Optional[Settings] = None) -> Notifier:
    """Create the notifier selected by the notification_channel setting."""
    settings = settings or get_settings()
    if settings.notification_channel == "email":
        return EmailNotifier(EmailService(settings))
    return LoggingNotifier()
