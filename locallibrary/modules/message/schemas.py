"""Pydantic schemas for message board entries."""

from datetime import datetime

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One entry on the message board."""

    text: str
    user: str
    added: datetime


class MessageForm(BaseModel):
    """Message form body as submitted."""

    message: str = Field(default="", max_length=1000)
    name: str = Field(default="", max_length=100)
