"""
haginotifier - Feishu (Lark) webhook notifications for CI pipelines.

Exports the notification entry points and the payload/result types.
"""

from haginotifier.channels.feishu import build_payload
from haginotifier.cli import run_cli
from haginotifier.schemas.notification import (
    FeishuCardElement,
    FeishuInteractivePayload,
    FeishuPostContentElement,
    FeishuPostPayload,
    FeishuTextPayload,
    FeishuWebhookResponse,
    NotificationInput,
    NotificationOutput,
    WebhookPayload,
)
from haginotifier.sender import send_notification

__all__ = [
    "send_notification",
    "run_cli",
    "build_payload",
    "NotificationInput",
    "NotificationOutput",
    "FeishuTextPayload",
    "FeishuPostPayload",
    "FeishuInteractivePayload",
    "FeishuWebhookResponse",
    "FeishuPostContentElement",
    "FeishuCardElement",
    "WebhookPayload",
]
