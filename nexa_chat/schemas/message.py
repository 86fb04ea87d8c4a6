from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class Message(BaseModel):
    id: int
    chat_name: str
    sender: str
    text: str
    timestamp: datetime

    class Config:
        from_attributes = True


class MessageCreateRequest(BaseModel):
    chat_name: Optional[str] = None
    text: Optional[str] = None


class HealthStatus(BaseModel):
    ok: bool
    error: Optional[str] = None
