"""Feishu (Lark) custom bot channel adapter."""

import json
import logging

from haginotifier.channels import ChannelPayload
from haginotifier.schemas.notification import (
    FeishuCard,
    FeishuCardElement,
    FeishuCardHeader,
    FeishuCardText,
    FeishuInteractivePayload,
    FeishuPostBody,
    FeishuPostContent,
    FeishuPostContentElement,
    FeishuPostLocales,
    FeishuPostPayload,
    FeishuTextContent,
    FeishuTextPayload,
    MSG_TYPES,
    NotificationInput,
    WebhookPayload,
)

logger = logging.getLogger(__name__)


def build_payload(notification: NotificationInput) -> WebhookPayload:
    """
    Build the webhook payload for the requested message type.

    - ``text``: plain text message.
    - ``post``: rich text with a single paragraph holding the message.
    - ``interactive``: card with one ``div`` element, plus a header when a title is set.

    Unknown message types fall back to ``text``.
    """
    message = notification.message
    title = notification.title or None
    msg_type = notification.msg_type or "text"

    if msg_type == "post":
        return FeishuPostPayload(
            content=FeishuPostContent(
                post=FeishuPostLocales(
                    zh_cn=FeishuPostBody(
                        title=title,
                        content=[[FeishuPostContentElement(tag="text", text=message)]],
                    )
                )
            )
        )

    if msg_type == "interactive":
        header = None
        if title:
            header = FeishuCardHeader(title=FeishuCardText(content=title))
        return FeishuInteractivePayload(
            card=FeishuCard(
                header=header,
                elements=[
                    FeishuCardElement(tag="div", text=FeishuCardText(content=message)),
                ],
            )
        )

    if msg_type not in MSG_TYPES:
        logger.debug(f"Unknown msg_type {msg_type!r}, sending as text")

    return FeishuTextPayload(content=FeishuTextContent(text=message))


def format_feishu(notification: NotificationInput) -> ChannelPayload:
    """Format a notification as a JSON POST to the Feishu webhook URL."""
    payload = build_payload(notification)

    return ChannelPayload(
        method="POST",
        url=notification.webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps(payload.model_dump(exclude_none=True), ensure_ascii=False),
    )
