from fastapi import APIRouter, Depends, Request
from loguru import logger
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from nexa_chat.api.deps import get_current_user, get_store, read_payload
from nexa_chat.core.errors import MissingFieldsError
from nexa_chat.schemas.message import MessageCreateRequest
from nexa_chat.storage.base import MessageStore

router = APIRouter(prefix="/api", tags=["Messages"])


@router.get("/messages/{chat_name}")
def list_messages(
    chat_name: str,
    user: str = Depends(get_current_user),
    store: MessageStore = Depends(get_store),
):
    logger.info(f"GET /api/messages for {chat_name!r} by {user}")
    messages = store.list_messages(chat_name)
    return {"messages": [m.model_dump(mode="json") for m in messages]}


@router.post("/messages")
async def create_message(
    request: Request,
    user: str = Depends(get_current_user),
    store: MessageStore = Depends(get_store),
):
    try:
        data = MessageCreateRequest.model_validate(await read_payload(request))
    except ValidationError:
        raise MissingFieldsError()
    if not data.chat_name or not data.text:
        raise MissingFieldsError()
    # sender always comes from the session, never from the body
    row = await run_in_threadpool(store.append_message, data.chat_name, user, data.text)
    return {"ok": True, "message": "Message saved", "messageRow": row.model_dump(mode="json")}
