# app/errors.py


class ConfigurationError(Exception):
    """
    Static data or settings are unusable. The base class is raised while the
    app is being built and stops startup.
    """


class MailerConfigError(ConfigurationError):
    """
    SMTP settings are missing or still hold placeholder values.

    Checked when an inquiry is sent, so it surfaces per request as a 500
    from the contact endpoint instead of stopping startup.
    """
