import html
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from pydantic import BaseModel

from ewallet.core.config import Settings, settings as app_settings
from ewallet.core.errors import MailDeliveryError
from ewallet.models.reset_password_token import ResetPasswordToken
from ewallet.models.user import User

logger = logging.getLogger(__name__)


class EmailAddress(BaseModel):
    email: str
    name: Optional[str] = None

    def header(self) -> str:
        return formataddr((self.name, self.email)) if self.name else self.email


class EmailEnvelope(BaseModel):
    subject: str
    sender: EmailAddress
    to: EmailAddress
    html_content: str
    text_content: Optional[str] = None


class SMTPMailProvider:
    """
    Envío de emails según `email_backend`:

    - ``smtp``: envía por SMTP (SSL o STARTTLS)
    - ``console``: solo registra el envío en el log
    - ``disabled``: descarta el email
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or app_settings

    def send_email(self, envelope: EmailEnvelope) -> None:
        backend = self.config.email_backend
        if backend == "disabled":
            logger.debug("Email deshabilitado, descartando '%s'", envelope.subject)
            return
        if backend == "console":
            logger.info("Email a %s: %s", envelope.to.email, envelope.subject)
            return
        if backend != "smtp":
            raise MailDeliveryError(f"Unknown email backend [{backend}]")
        if not self.config.smtp_host:
            logger.error("SMTP mal configurado (host). Email no enviado a %s", envelope.to.email)
            raise MailDeliveryError()

        msg = EmailMessage()
        msg["From"] = envelope.sender.header()
        msg["To"] = envelope.to.header()
        msg["Subject"] = envelope.subject
        msg.set_content(envelope.text_content or "Open this email in an HTML capable client.")
        msg.add_alternative(envelope.html_content, subtype="html")

        try:
            self._deliver(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.exception("No se pudo enviar email a %s", envelope.to.email)
            raise MailDeliveryError() from exc

    def _deliver(self, msg: EmailMessage) -> None:
        config = self.config
        if config.smtp_use_ssl:
            context = ssl.create_default_context()
            with smtplib.SMTP_SSL(config.smtp_host, config.smtp_port, context=context, timeout=10) as server:
                if config.smtp_username and config.smtp_password:
                    server.login(config.smtp_username, config.smtp_password)
                server.send_message(msg)
            return

        with smtplib.SMTP(config.smtp_host, config.smtp_port, timeout=10) as server:
            server.ehlo()
            if config.smtp_use_tls:
                server.starttls(context=ssl.create_default_context())
                server.ehlo()
            if config.smtp_username and config.smtp_password:
                server.login(config.smtp_username, config.smtp_password)
            server.send_message(msg)


mail_provider = SMTPMailProvider()


def get_mail_provider() -> SMTPMailProvider:
    return mail_provider


def build_reset_password_link(token: ResetPasswordToken, config: Optional[Settings] = None) -> str:
    base_url = (config or app_settings).frontend_url.rstrip("/")
    return f"{base_url}/reset-password?token={token.id}"


def render_forgot_password_email(user: User, token: ResetPasswordToken, reset_link: str) -> str:
    name_esc = html.escape(user.name)
    link_esc = html.escape(reset_link, quote=True)
    token_esc = html.escape(token.id)
    expires_esc = html.escape(token.expires_in.strftime("%Y-%m-%d %H:%M UTC"))

    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width,initial-scale=1" />
    <title>eWallet</title>
  </head>
  <body style="margin:0; padding:0; background-color:#f4f4f7;">
    <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="100%" style="background-color:#f4f4f7; padding:24px 0;">
      <tr>
        <td align="center" style="padding:0 16px;">
          <table role="presentation" cellspacing="0" cellpadding="0" border="0" width="600" style="width:600px; max-width:600px; background-color:#ffffff; border-radius:12px; padding:24px;">
            <tr>
              <td style="font-family:Arial, Helvetica, sans-serif; font-size:20px; font-weight:700; color:#1f2937;">
                eWallet
              </td>
            </tr>
            <tr>
              <td style="padding-top:16px; font-family:Arial, Helvetica, sans-serif; font-size:14px; line-height:20px; color:#374151;">
                <p style="margin:0 0 10px 0;">Hi {name_esc},</p>
                <p style="margin:0 0 10px 0;">We received a request to reset your eWallet password.</p>
                <p style="margin:0;">Use the button below to choose a new one.</p>
              </td>
            </tr>
            <tr>
              <td style="padding-top:18px;">
                <a href="{link_esc}" style="display:inline-block; padding:12px 18px; background-color:#4f46e5; border-radius:8px; font-family:Arial, Helvetica, sans-serif; font-size:14px; font-weight:700; color:#ffffff; text-decoration:none;">
                  Reset password
                </a>
              </td>
            </tr>
            <tr>
              <td style="padding-top:14px; font-family:Arial, Helvetica, sans-serif; font-size:12px; line-height:18px; color:#6b7280;">
                Your recovery code is <strong>{token_esc}</strong>. It expires at {expires_esc}.<br />
                If you did not ask for this change you can ignore this email.
              </td>
            </tr>
          </table>
        </td>
      </tr>
    </table>
  </body>
</html>"""
