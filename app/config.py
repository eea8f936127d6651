import os


class Config:
    SITE_URL = os.environ.get("SITE_URL", "https://djmilesmorales.com")

    # Contact form mail (Zoho SMTP by default)
    SMTP_HOST = os.environ.get("SMTP_HOST", "smtppro.zoho.com")
    SMTP_PORT = int(os.environ.get("SMTP_PORT", "587"))
    SMTP_USER = os.environ.get("SMTP_USER", "no-reply@djmilesmorales.com")
    SMTP_PASSWORD = os.environ.get("SMTP_PASSWORD", "")
    SMTP_FROM = os.environ.get("SMTP_FROM", "")
    SMTP_TIMEOUT = float(os.environ.get("SMTP_TIMEOUT", "15"))
    CONTACT_RECIPIENTS = os.environ.get("CONTACT_RECIPIENTS", "booking@djmilesmorales.com")

    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,https://djmilesmorales.com",
        ).split(",")
        if o.strip()
    ]

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # flask build-site
    BUILD_OUTPUT_DIR = os.environ.get("BUILD_OUTPUT_DIR", "public")

    # contact form JSON only
    MAX_CONTENT_LENGTH = 64 * 1024
