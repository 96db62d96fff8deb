# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from querypage.api.http.health import router as health_router
from querypage.api.http.member import router as member_router
from querypage.logging import logger
from querypage.middlewares.logging_context import LoggingContextMiddleware
from querypage.storage.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Creates missing tables on startup. Schema changes beyond that are out
    of scope for this service.
    """
    logger.info("Application startup initiated")
    await init_db()
    yield
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Includes the member search and health routers and scopes the log
    context to each request.
    """
    app = FastAPI(
        title="Member search",
        description="Conditional member search with count-elided pagination",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(member_router)

    app.add_middleware(LoggingContextMiddleware)

    return app


app = application()  # Need for fastapi cli
