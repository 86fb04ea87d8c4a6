from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class ChatError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCredentials(ChatError):
    status_code = 401
    message = "Invalid credentials"


class Unauthenticated(ChatError):
    status_code = 401
    message = "Not logged in"


class MissingFieldsError(ChatError):
    status_code = 400
    message = "Missing chat_name or text"


class StoreError(ChatError):
    """Backend unreachable or I/O failure. Clients only ever see the generic message."""
    status_code = 500
    message = "Database error"


async def _invalid_credentials_handler(request: Request, exc: InvalidCredentials):
    return JSONResponse(status_code=exc.status_code, content={"ok": False, "error": exc.message})


async def _chat_error_handler(request: Request, exc: ChatError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidCredentials, _invalid_credentials_handler)
    app.add_exception_handler(ChatError, _chat_error_handler)
