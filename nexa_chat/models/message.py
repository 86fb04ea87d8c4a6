from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
from nexa_chat.db.session import Base


class ChatMessage(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    chat_name = Column(Text, nullable=False, index=True)
    sender = Column(Text, nullable=False)
    text = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())
