from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from bookclub.api.routers import auth, books, clubs, health, memberships, users
from bookclub.infrastructure.db.engine import create_schema, get_engine
from bookclub.shared.config import get_settings


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.database_url:
        create_schema(get_engine(settings.database_url))
        logger.info("main: schema_ready")
    else:
        logger.warning("main: database_url_missing")
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Book Club API", lifespan=lifespan)
    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(users.router)
    app.include_router(clubs.router)
    app.include_router(memberships.router)
    app.include_router(auth.router)

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.error("main: database_error path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error."})

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
