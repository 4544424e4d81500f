"""Email service for sending transactional emails via SendGrid."""

import logging
from html import escape

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from app.config import Settings, get_settings

logger = logging.getLogger("mealgenie")

RESET_SUBJECT = "MealGenie Password Reset"
LOGO_URL = "https://i.postimg.cc/28d2Jw9p/mealgenie-logo-dark.png"


class EmailDeliveryError(Exception):
    """Raised when an email could not be handed to the provider."""


def build_reset_url(base_url: str, token: str) -> str:
    """Link to the frontend reset page carrying the plaintext token."""
    return f"{base_url.rstrip('/')}/resetpassword.html?token={token}"


def build_reset_email_html(name: str, reset_url: str, expire_minutes: int = 15) -> str:
    """Build HTML content for the password reset email."""
    return f"""
    <div style="font-family: Arial, sans-serif; color:#333; padding:20px;">
      <div style="text-align:center;">
        <img src="{LOGO_URL}" alt="MealGenie" style="height:60px; margin-bottom:20px;" />
      </div>
      <h2 style="color:#16A34A;">Hello {escape(name)},</h2>
      <p>You requested to reset your MealGenie password.</p>
      <p>Click the button below. The link expires in {expire_minutes} minutes.</p>
      <a href="{escape(reset_url, quote=True)}"
         style="display:inline-block; background:#16A34A; color:white; padding:12px 22px;
                border-radius:10px; text-decoration:none; font-weight:bold;">
        Reset Password
      </a>
      <p style="margin-top:20px; font-size:14px;">If you didn't request this, you can safely ignore it.</p>
      <p style="font-size:12px; opacity:0.8;">MealGenie Team</p>
    </div>
    """


class EmailService:
    """Handles sending emails via SendGrid."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.api_key = settings.SENDGRID_API_KEY
        self.from_email = settings.EMAIL_FROM_ADDRESS
        self.from_name = settings.EMAIL_FROM_NAME
        self.base_url = settings.FRONTEND_BASE_URL
        self.reset_expire_minutes = settings.RESET_TOKEN_EXPIRE_MINUTES

    def send_password_reset(self, to_email: str, name: str, token: str) -> None:
        """Send the reset link email. Raises EmailDeliveryError on failure."""
        reset_url = build_reset_url(self.base_url, token)
        html = build_reset_email_html(name or "Friend", reset_url, self.reset_expire_minutes)
        self.send(to_email, RESET_SUBJECT, html)

    def send(self, to_email: str, subject: str, html: str) -> None:
        if not self.api_key or not self.from_email:
            raise EmailDeliveryError("Email credentials missing")

        message = Mail(
            from_email=From(self.from_email, self.from_name),
            to_emails=to_email,
            subject=subject,
            html_content=html,
        )
        try:
            SendGridAPIClient(self.api_key).send(message)
        except Exception as e:
            logger.exception("Email send failed: %s", e)
            raise EmailDeliveryError("Email failed") from e


_email_service: EmailService | None = None


def get_email_service() -> EmailService:
    """Get singleton email service instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
