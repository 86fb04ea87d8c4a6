from fastapi import APIRouter, Depends, Request

from nexa_chat.api.deps import get_auth_gate, get_store
from nexa_chat.core.security import AuthGate
from nexa_chat.storage.base import MessageStore

router = APIRouter(prefix="/api", tags=["Debug"])


@router.get("/debug")
def debug(
    request: Request,
    store: MessageStore = Depends(get_store),
    auth: AuthGate = Depends(get_auth_gate),
):
    """Session + storage diagnostics. Public on purpose, never gates anything."""
    health = store.health_check()
    return {
        "sessionUser": auth.current_user(request.session),
        "dbOk": health.ok,
        "dbError": health.error,
        "mode": store.mode,
    }
