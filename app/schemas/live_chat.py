"""Schemas for live-chat widget configuration."""

from typing import Literal

from app.schemas.base import CamelModel, RecordOut

DisplayOn = Literal["all", "homepage", "dashboard", "exclude-dashboard"]


class LiveChatActiveUpdate(CamelModel):
    enabled: bool | None = None
    widget_script: str | None = None
    display_on: DisplayOn | None = None
    auto_reply_message: str | None = None
    support_email: str | None = None


class LiveChatUpdate(LiveChatActiveUpdate):
    is_active: bool | None = None


class LiveChatCreate(CamelModel):
    enabled: bool = True
    widget_script: str = ""
    display_on: DisplayOn = "all"
    auto_reply_message: str = ""
    support_email: str = ""
    is_active: bool = False


class LiveChatOut(RecordOut):
    enabled: bool
    widget_script: str
    display_on: DisplayOn
    auto_reply_message: str
    support_email: str
    is_active: bool
