# app/routes/contact.py
from __future__ import annotations

import smtplib

from flask import Blueprint, current_app, jsonify, request

from ..errors import MailerConfigError
from ..services.mailer import ContactInquiry, MailSettings, send_inquiry

bp = Blueprint("contact", __name__)

# JSON key -> ContactInquiry field
OPTIONAL_FIELDS = {
    "phone": "phone",
    "eventType": "event_type",
    "eventDate": "event_date",
    "eventLocation": "event_location",
    "guestCount": "guest_count",
    "budgetRange": "budget_range",
}

###########
# HELPERS
###########

def _bad_request(msg: str, status: int = 400):
    return jsonify({"error": msg}), status


def _server_error(msg: str, exc: Exception, **extra):
    body = {"error": msg}
    if current_app.debug:
        body["details"] = str(exc)
        body.update(extra)
    return jsonify(body), 500


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_inquiry(body) -> ContactInquiry | None:
    if not isinstance(body, dict):
        return None

    name = _clean(body.get("name"))[:200]
    email = _clean(body.get("email"))[:320]
    message = _clean(body.get("message"))[:5000]
    if not name or not email or not message:
        return None

    optional = {
        field: _clean(body.get(key))[:500]
        for key, field in OPTIONAL_FIELDS.items()
    }
    return ContactInquiry(name=name, email=email, message=message, **optional)


def _has_line_break(inquiry: ContactInquiry) -> bool:
    # name goes into Subject/From, email into Reply-To
    return any(ch in value for value in (inquiry.name, inquiry.email) for ch in "\r\n")


###############################
# POST CONTACT (BOOKING INQUIRY)
###############################
@bp.post("")
def submit_contact():
    # the /contact page posts a plain HTML form
    body = request.get_json(silent=True)
    if body is None:
        body = request.form.to_dict()

    inquiry = parse_inquiry(body)
    if inquiry is None:
        return _bad_request("Missing required fields")
    if _has_line_break(inquiry):
        return _bad_request("Name and email must be a single line")

    site = current_app.extensions["site"]
    settings = MailSettings.from_config(current_app.config, from_name=site.name)

    try:
        send_inquiry(inquiry, settings)
    except MailerConfigError as e:
        current_app.logger.error("Contact mail configuration error: %s", e)
        return _server_error("Email service configuration error. Please check server environment variables.", e)
    except smtplib.SMTPAuthenticationError as e:
        current_app.logger.error("SMTP authentication failed: %s", e)
        return _server_error(
            "Email authentication failed. Please check your SMTP credentials. If 2FA is enabled you may need "
            "an app-specific password.",
            e,
            help="Zoho requires app-specific passwords for SMTP when 2FA is enabled.",
        )
    except (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected) as e:
        current_app.logger.error("Could not reach SMTP server %s:%s: %s", settings.host, settings.port, e)
        return _server_error("Could not connect to email server. Please check SMTP settings.", e)
    except smtplib.SMTPException as e:
        current_app.logger.exception("Error sending email")
        return _server_error("Failed to send email", e, errorType=type(e).__name__)
    except OSError as e:
        # refused connections and socket timeouts
        current_app.logger.error("Could not reach SMTP server %s:%s: %s", settings.host, settings.port, e)
        return _server_error("Could not connect to email server. Please check SMTP settings.", e)

    return jsonify({"message": "Email sent successfully"}), 200
