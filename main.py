from loguru import logger

from nexa_chat.app import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = app.state.settings
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run("main:app", host=settings.host, port=settings.port)
