from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.middleware.sessions import SessionMiddleware

from nexa_chat.api.auth import router as auth_router
from nexa_chat.api.debug import router as debug_router
from nexa_chat.api.messages import router as messages_router
from nexa_chat.api.pages import router as pages_router
from nexa_chat.core.config import DEFAULT_SESSION_SECRET, Settings, get_settings
from nexa_chat.core.errors import register_exception_handlers
from nexa_chat.core.security import AuthGate
from nexa_chat.core.sessions import SessionStore
from nexa_chat.storage.base import MessageStore
from nexa_chat.storage.factory import create_store


def create_app(settings: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    settings = settings or get_settings()
    if settings.session_secret == DEFAULT_SESSION_SECRET:
        logger.warning("SESSION_SECRET not set, using the insecure default")

    app = FastAPI(title="Nexa Chat API")
    app.state.settings = settings
    app.state.store = store or create_store(settings)
    app.state.sessions = SessionStore()
    app.state.auth = AuthGate(settings.users, app.state.sessions)

    # Storage is ready before the first request is served
    app.state.store.initialize()

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.add_middleware(SessionMiddleware, secret_key=settings.session_secret, session_cookie="nexa_session")
    register_exception_handlers(app)

    # Routes first, static files after so routes take priority
    app.include_router(pages_router)
    app.include_router(auth_router)
    app.include_router(messages_router)
    app.include_router(debug_router)

    if settings.static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    return app
