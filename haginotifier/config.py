from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    webhook_url: str = ""
    message: str = ""
    msg_type: str = "text"
    title: Optional[str] = None

    # Request deadline in seconds (unset = wait for the transport)
    timeout: Optional[float] = None

    log_level: str = "WARNING"

    model_config = {"env_prefix": "FEISHU_", "env_ignore_empty": True, "extra": "ignore"}
