from haginotifier.channels.validate import validate_notification_input
from haginotifier.schemas.notification import NotificationInput


def test_valid_input_returns_none():
    notification = NotificationInput(webhook_url="https://x", message="hi")
    assert validate_notification_input(notification) is None


def test_missing_webhook_url():
    notification = NotificationInput(webhook_url="", message="hi")
    assert validate_notification_input(notification) == "Missing required parameter: webhook_url"


def test_missing_message():
    notification = NotificationInput(webhook_url="https://x", message="")
    assert validate_notification_input(notification) == "Missing required parameter: message"


def test_webhook_url_checked_first():
    notification = NotificationInput()
    assert "webhook_url" in validate_notification_input(notification)


def test_whitespace_message_counts_as_present():
    notification = NotificationInput(webhook_url="https://x", message=" ")
    assert validate_notification_input(notification) is None
