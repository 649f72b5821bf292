"""
Outbound WeCom group-robot message.

MarkdownMessage → {"msgtype": "markdown", "markdown": {"content": "..."}}
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class MarkdownContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str


class MarkdownMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    msgtype: Literal["markdown"] = "markdown"
    markdown: MarkdownContent

    @classmethod
    def from_text(cls, content: str) -> "MarkdownMessage":
        return cls(markdown=MarkdownContent(content=content))
