from nexa_chat.models.message import ChatMessage

__all__ = ["ChatMessage"]
