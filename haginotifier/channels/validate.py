"""Input validation for Feishu notifications."""

from typing import Optional

from haginotifier.schemas.notification import NotificationInput

REQUIRED_FIELDS = ("webhook_url", "message")


def validate_notification_input(notification: NotificationInput) -> Optional[str]:
    """
    Validate a notification before anything is sent.
    Returns None if valid, or an error message string if invalid.
    """
    return _require_fields(notification, REQUIRED_FIELDS)


# --- Internal validators ---


def _require_fields(notification: NotificationInput, fields: tuple[str, ...]) -> Optional[str]:
    for field in fields:
        if not getattr(notification, field):
            return f"Missing required parameter: {field}"
    return None
