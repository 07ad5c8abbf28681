"""Base types for the Feishu channel adapter."""

from dataclasses import dataclass


@dataclass
class ChannelPayload:
    """Represents the HTTP request sent to a Feishu webhook."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string
