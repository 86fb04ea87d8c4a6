from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from loguru import logger
from pydantic import ValidationError

from nexa_chat.api.deps import get_auth_gate, get_current_user, read_payload
from nexa_chat.core.errors import InvalidCredentials
from nexa_chat.core.security import AuthGate
from nexa_chat.schemas.auth import CurrentUserResponse, LoginRequest

router = APIRouter(tags=["Auth"])


@router.post("/login")
async def login(request: Request, auth: AuthGate = Depends(get_auth_gate)):
    payload = await read_payload(request)
    logger.info(f"POST /login received username={payload.get('username')!r}")
    try:
        data = LoginRequest.model_validate(payload)
    except ValidationError:
        raise InvalidCredentials()
    try:
        auth.login(request.session, data.username, data.password)
    except InvalidCredentials:
        logger.info(f"Login failed for: {data.username!r}")
        raise
    logger.info(f"Login successful for: {data.username}")
    # JSON for AJAX clients; the page handles the redirect to /chat
    return {"ok": True, "message": "Login successful"}


@router.get("/logout")
def logout(request: Request, auth: AuthGate = Depends(get_auth_gate)):
    auth.logout(request.session)
    return RedirectResponse("/", status_code=302)


@router.get("/api/current-user", response_model=CurrentUserResponse)
def current_user(user: str = Depends(get_current_user)):
    return {"username": user}
