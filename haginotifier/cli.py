"""
Standalone entry point for CI pipelines.

Configuration is read from environment variables only:
    FEISHU_WEBHOOK_URL  webhook URL (required)
    FEISHU_MESSAGE      message content (required)
    FEISHU_MSG_TYPE     text, post or interactive (default: text)
    FEISHU_TITLE        title for post/interactive messages (optional)
    FEISHU_TIMEOUT      request deadline in seconds (optional)
    FEISHU_LOG_LEVEL    log level for stderr output (default: WARNING)

The result is printed to stdout as JSON; the exit code is 1 on failure.
"""

import asyncio
import logging
import sys

from haginotifier.config import Settings
from haginotifier.schemas.notification import NotificationInput, NotificationOutput
from haginotifier.sender import send_notification


async def run_cli() -> NotificationOutput:
    settings = Settings()

    logging.basicConfig(
        level=(settings.log_level or "WARNING").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = await send_notification(
        NotificationInput(
            webhook_url=settings.webhook_url,
            message=settings.message,
            msg_type=settings.msg_type or "text",
            title=settings.title,
        ),
        timeout=settings.timeout,
    )

    print(result.model_dump_json(indent=2))

    if result.status == "failure":
        sys.exit(1)
    return result


def main() -> None:
    try:
        asyncio.run(run_cli())
    except Exception as e:
        print(f"CLI error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
