from fastapi import Depends, Request

from nexa_chat.core.config import Settings
from nexa_chat.core.errors import Unauthenticated
from nexa_chat.core.security import AuthGate
from nexa_chat.storage.base import MessageStore


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> MessageStore:
    return request.app.state.store


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth


def get_current_user(request: Request, auth: AuthGate = Depends(get_auth_gate)) -> str:
    user = auth.current_user(request.session)
    if not user:
        raise Unauthenticated()
    return user


async def read_payload(request: Request) -> dict:
    """JSON or urlencoded/multipart form body as a dict. Anything else -> {}."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}
