from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, RedirectResponse

from nexa_chat.api.deps import get_auth_gate, get_settings_dep
from nexa_chat.core.config import Settings
from nexa_chat.core.security import AuthGate

router = APIRouter(tags=["Pages"])

LOGIN_PAGE = "index.html"
CHAT_PAGE = "nexa_chat_app.html"


@router.get("/", include_in_schema=False)
def login_page(settings: Settings = Depends(get_settings_dep)):
    return FileResponse(settings.static_dir / LOGIN_PAGE, media_type="text/html")


@router.get("/chat", include_in_schema=False)
def chat_page(
    request: Request,
    settings: Settings = Depends(get_settings_dep),
    auth: AuthGate = Depends(get_auth_gate),
):
    if not auth.is_authenticated(request.session):
        return RedirectResponse("/", status_code=302)
    return FileResponse(settings.static_dir / CHAT_PAGE, media_type="text/html")
