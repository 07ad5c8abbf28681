"""Pydantic schemas for Feishu notifications and webhook payloads."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

MSG_TYPES = ("text", "post", "interactive")


# ---------------------------------------------------------------------------
# Caller-facing input / output
# ---------------------------------------------------------------------------

class NotificationInput(BaseModel):
    webhook_url: str = Field("", description="Feishu custom bot webhook URL")
    message: str = Field("", description="Notification message content")
    msg_type: str = Field("text", description="Message type: text, post, interactive")
    title: Optional[str] = Field(None, description="Title for post/interactive messages")

    model_config = {"frozen": True}


class NotificationOutput(BaseModel):
    status: Literal["success", "failure"]
    timestamp: str = Field(..., description="ISO 8601 time of the send attempt")
    response: str = Field(..., description="Webhook response body or error message")


class FeishuWebhookResponse(BaseModel):
    """Body returned by the Feishu webhook. ``code == 0`` (or no code) means accepted."""

    code: Any = None
    msg: Any = None
    data: Any = Field(None, alias="Data")

    model_config = {"extra": "ignore", "populate_by_name": True}


# ---------------------------------------------------------------------------
# Outbound payloads
# ---------------------------------------------------------------------------

class FeishuTextContent(BaseModel):
    text: str


class FeishuTextPayload(BaseModel):
    msg_type: Literal["text"] = "text"
    content: FeishuTextContent


class FeishuPostContentElement(BaseModel):
    tag: Literal["text", "a", "at", "img", "media"]
    text: Optional[str] = None
    href: Optional[str] = None
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    image_key: Optional[str] = None


class FeishuPostBody(BaseModel):
    title: Optional[str] = None
    content: list[list[FeishuPostContentElement]]


class FeishuPostLocales(BaseModel):
    zh_cn: FeishuPostBody


class FeishuPostContent(BaseModel):
    post: FeishuPostLocales


class FeishuPostPayload(BaseModel):
    msg_type: Literal["post"] = "post"
    content: FeishuPostContent


class FeishuCardText(BaseModel):
    content: str
    tag: Literal["plain_text", "lark_md"] = "plain_text"


class FeishuCardHeader(BaseModel):
    title: FeishuCardText
    template: Optional[str] = None


class FeishuCardElement(BaseModel):
    tag: str
    text: Optional[FeishuCardText] = None

    model_config = {"extra": "allow"}


class FeishuCard(BaseModel):
    header: Optional[FeishuCardHeader] = None
    elements: list[FeishuCardElement]


class FeishuInteractivePayload(BaseModel):
    msg_type: Literal["interactive"] = "interactive"
    card: FeishuCard


WebhookPayload = Annotated[
    Union[FeishuTextPayload, FeishuPostPayload, FeishuInteractivePayload],
    Field(discriminator="msg_type"),
]
