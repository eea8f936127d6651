# app/services/mailer.py
"""
Booking inquiry email: compose from the contact form and send over SMTP.
"""
from __future__ import annotations

import html
import logging
import smtplib
import ssl
from dataclasses import dataclass
from datetime import date
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any, Mapping

from ..errors import MailerConfigError

logger = logging.getLogger(__name__)

PLACEHOLDER_MARKERS = ("your_zoho_smtp_password_here", "your password")

BUDGET_RANGES: dict[str, str] = {
    "under-1000": "Under $1,000",
    "1000-2500": "$1,000 - $2,500",
    "2500-5000": "$2,500 - $5,000",
    "5000-10000": "$5,000 - $10,000",
    "10000-plus": "$10,000+",
}

NOT_SPECIFIED = "Not specified"


@dataclass(frozen=True)
class MailSettings:
    host: str
    port: int
    user: str
    password: str
    from_email: str
    from_name: str
    recipients: tuple[str, ...]
    timeout: float = 15.0

    @classmethod
    def from_config(cls, config: Mapping[str, Any], from_name: str) -> "MailSettings":
        user = (config.get("SMTP_USER") or "").strip()
        recipients = config.get("CONTACT_RECIPIENTS") or ()
        if isinstance(recipients, str):
            recipients = [r.strip() for r in recipients.split(",")]
        return cls(
            host=config.get("SMTP_HOST") or "smtppro.zoho.com",
            port=int(config.get("SMTP_PORT") or 587),
            user=user,
            password=(config.get("SMTP_PASSWORD") or "").strip(),
            from_email=(config.get("SMTP_FROM") or user).strip(),
            from_name=from_name,
            recipients=tuple(r for r in recipients if r),
            timeout=float(config.get("SMTP_TIMEOUT") or 15.0),
        )


@dataclass(frozen=True)
class ContactInquiry:
    name: str
    email: str
    message: str
    phone: str = ""
    event_type: str = ""
    event_date: str = ""
    event_location: str = ""
    guest_count: str = ""
    budget_range: str = ""


def format_event_type(value: str) -> str:
    """
    "corporate-gala" -> "Corporate Gala"
    """
    if not value:
        return NOT_SPECIFIED
    return " ".join(word[:1].upper() + word[1:] for word in value.split("-"))


def format_budget_range(value: str) -> str:
    if not value:
        return NOT_SPECIFIED
    return BUDGET_RANGES.get(value, value)


def format_event_date(value: str) -> str:
    """
    ISO dates become "June 14, 2026"; anything else is shown as typed.
    """
    try:
        d = date.fromisoformat(value)
    except ValueError:
        return value
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _detail_rows(inquiry: ContactInquiry) -> list[tuple[str, str]]:
    rows = []
    if inquiry.event_type:
        rows.append(("Event Type", format_event_type(inquiry.event_type)))
    if inquiry.event_date:
        rows.append(("Event Date", format_event_date(inquiry.event_date)))
    if inquiry.event_location:
        rows.append(("Event Location", inquiry.event_location))
    if inquiry.guest_count:
        rows.append(("Estimated Guest Count", inquiry.guest_count))
    if inquiry.budget_range:
        rows.append(("Budget Range", format_budget_range(inquiry.budget_range)))
    return rows


def _text_body(inquiry: ContactInquiry) -> str:
    lines = [
        f"New Booking Inquiry from {inquiry.name}",
        "",
        "Contact Information:",
        f"- Name: {inquiry.name}",
        f"- Email: {inquiry.email}",
    ]
    if inquiry.phone:
        lines.append(f"- Phone: {inquiry.phone}")
    lines += ["", "Event Details:"]
    lines += [f"- {label}: {value}" for label, value in _detail_rows(inquiry)]
    lines += ["", "Message:", inquiry.message]
    return "\n".join(lines)


def _html_body(inquiry: ContactInquiry) -> str:
    esc = html.escape
    contact = [
        f"<li><strong>Name:</strong> {esc(inquiry.name)}</li>",
        f'<li><strong>Email:</strong> <a href="mailto:{esc(inquiry.email)}">{esc(inquiry.email)}</a></li>',
    ]
    if inquiry.phone:
        contact.append(f'<li><strong>Phone:</strong> <a href="tel:{esc(inquiry.phone)}">{esc(inquiry.phone)}</a></li>')
    details = [
        f"<li><strong>{esc(label)}:</strong> {esc(value)}</li>"
        for label, value in _detail_rows(inquiry)
    ]
    return f"""
<div style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <h2 style="color: #FF2436;">New Booking Inquiry from {esc(inquiry.name)}</h2>
  <h3 style="color: #555; margin-top: 20px;">Contact Information</h3>
  <ul style="list-style: none; padding: 0;">
    {"".join(contact)}
  </ul>
  <h3 style="color: #555; margin-top: 20px;">Event Details</h3>
  <ul style="list-style: none; padding: 0;">
    {"".join(details)}
  </ul>
  <h3 style="color: #555; margin-top: 20px;">Message</h3>
  <p style="white-space: pre-wrap; background: #f5f5f5; padding: 15px; border-radius: 5px;">{esc(inquiry.message)}</p>
</div>
""".strip()


def build_inquiry_message(inquiry: ContactInquiry, settings: MailSettings) -> EmailMessage:
    msg = EmailMessage()
    msg["Subject"] = f"New Booking Inquiry from {inquiry.name}"
    msg["From"] = formataddr((settings.from_name, settings.from_email))
    msg["To"] = ", ".join(settings.recipients)
    msg["Reply-To"] = inquiry.email
    msg.set_content(_text_body(inquiry))
    msg.add_alternative(_html_body(inquiry), subtype="html")
    return msg


def check_settings(settings: MailSettings) -> None:
    if not settings.password:
        raise MailerConfigError("Missing SMTP_PASSWORD environment variable")
    if any(marker in settings.password for marker in PLACEHOLDER_MARKERS):
        raise MailerConfigError("SMTP_PASSWORD appears to be a placeholder")
    if not settings.user:
        raise MailerConfigError("Missing SMTP_USER environment variable")
    if not settings.recipients:
        raise MailerConfigError("Missing CONTACT_RECIPIENTS environment variable")


def send_inquiry(inquiry: ContactInquiry, settings: MailSettings) -> None:
    check_settings(settings)

    logger.info(
        "SMTP configuration host=%s port=%s user=%s has_password=%s",
        settings.host,
        settings.port,
        settings.user,
        bool(settings.password),
    )

    msg = build_inquiry_message(inquiry, settings)
    context = ssl.create_default_context()

    if settings.port == 465:
        smtp = smtplib.SMTP_SSL(settings.host, settings.port, timeout=settings.timeout, context=context)
    else:
        smtp = smtplib.SMTP(settings.host, settings.port, timeout=settings.timeout)

    with smtp:
        if settings.port != 465:
            smtp.starttls(context=context)
        smtp.login(settings.user, settings.password)
        smtp.send_message(msg)

    logger.info("Booking inquiry from %s sent to %d recipients", inquiry.name, len(settings.recipients))
