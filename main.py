import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from starlette.concurrency import run_in_threadpool

from core.config import Settings, settings as default_settings
from core.errors import register_error_handlers
from core.logging import configure_logging
from core.mail import Mailer
from core.middleware import log_visitor
from database import build_engine, connect

from api import contact, visitors

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("App starting up...")
    # The listener comes up even when the store is unreachable
    await run_in_threadpool(connect, app.state.engine)
    yield
    app.state.engine.dispose()
    logger.info("App shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    mailer: Optional[Mailer] = None,
) -> FastAPI:
    settings = settings or default_settings
    if engine is None:
        engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

    app = FastAPI(lifespan=lifespan, title="Contact Relay Backend")
    app.state.settings = settings
    app.state.engine = engine
    app.state.mailer = mailer or Mailer(settings)

    register_error_handlers(app)

    # Registered first so it runs inside CORS, ahead of every route
    app.middleware("http")(log_visitor)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.FRONTEND_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(contact.router)
    app.include_router(visitors.router)

    @app.get("/")
    def read_root():
        return {"message": "Backend running."}

    return app


def run():
    configure_logging(default_settings.LOG_LEVEL)

    if not default_settings.DATABASE_URL:
        logger.critical("DATABASE_URL is not defined in environment variables")
        sys.exit(1)

    app = create_app(default_settings)
    logger.info("Server running on port %s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
