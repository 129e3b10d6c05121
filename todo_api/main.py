import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from todo_api.config import Settings
from todo_api.database import POOL_SIZE, Database
from todo_api.middleware import configure_logging, install_middleware
from todo_api.routers import auth_router, todo_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # any failure here aborts startup
        database = Database(settings.database_url)
        await database.ping()
        if settings.create_tables:
            await database.create_all()
        logger.info("Connection pool ready (max %d connections)", POOL_SIZE)
        app.state.database = database
        yield
        await database.dispose()
        logger.info("Connection pool closed")

    app = FastAPI(title="Todo API", lifespan=lifespan)
    app.state.settings = settings
    install_middleware(app)

    app.include_router(auth_router.router)
    app.include_router(todo_router.router)

    # Root health
    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings: Settings = app.state.settings
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
