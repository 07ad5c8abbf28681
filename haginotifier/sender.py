"""Delivery of notifications to a Feishu webhook."""

import datetime
import logging
from typing import Optional
from urllib.parse import urlsplit

import httpx
from pydantic import ValidationError

from haginotifier.channels.feishu import format_feishu
from haginotifier.channels.validate import validate_notification_input
from haginotifier.schemas.notification import (
    FeishuWebhookResponse,
    NotificationInput,
    NotificationOutput,
)

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_RESPONSE = "Notification sent successfully"


def http_client(
    timeout: Optional[float] = None,
    follow_redirects: bool = True,
    **kwargs,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=follow_redirects,
        **kwargs,
    )


async def send_notification(
    notification: NotificationInput,
    *,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> NotificationOutput:
    """
    Send a single notification to a Feishu webhook.

    Never raises: validation errors, transport errors and rejections by Feishu
    are all reported through the returned ``NotificationOutput``.

    Args:
        notification: NotificationInput instance
        timeout: Optional deadline in seconds for the request (default: none)
        client: Optional httpx.AsyncClient to send with; left open after use
    """
    timestamp = _now_iso()

    error = validate_notification_input(notification)
    if error:
        logger.warning(error)
        return NotificationOutput(status="failure", timestamp=timestamp, response=error)

    host = _host(notification.webhook_url)

    try:
        payload = format_feishu(notification)

        if client is not None:
            response = await client.request(
                method=payload.method,
                url=payload.url,
                headers=payload.headers,
                content=payload.body,
            )
        else:
            async with http_client(timeout=timeout) as owned_client:
                response = await owned_client.request(
                    method=payload.method,
                    url=payload.url,
                    headers=payload.headers,
                    content=payload.body,
                )

        response_text = response.text
        try:
            response_data = FeishuWebhookResponse.model_validate_json(response_text)
        except ValidationError:
            # Not a JSON object: keep the raw text
            response_data = FeishuWebhookResponse()
            response_text = response_text or response.reason_phrase

        if response.is_success and not response_data.code:
            logger.debug(f"Sent {notification.msg_type} notification to {host}")
            return NotificationOutput(
                status="success",
                timestamp=timestamp,
                response=response_text or DEFAULT_SUCCESS_RESPONSE,
            )

        logger.warning(
            f"Feishu webhook {host} returned status {response.status_code}: {response_text[:200]}"
        )
        return NotificationOutput(
            status="failure",
            timestamp=timestamp,
            response=f"HTTP {response.status_code}: {response_text}",
        )

    except Exception as e:
        logger.error(f"Failed to send notification to {host}: {e}", exc_info=True)
        return NotificationOutput(
            status="failure",
            timestamp=timestamp,
            response=f"Request failed: {str(e) or type(e).__name__}",
        )


def _now_iso() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _host(url: str) -> str:
    """Host part of a webhook URL; the path carries the bot token and is not logged."""
    try:
        return urlsplit(url).hostname or "<unknown host>"
    except ValueError:
        return "<invalid url>"
