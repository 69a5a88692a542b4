import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.api.router import api_router
from helpdesk.core.config import get_settings
from helpdesk.core.errors import register_exception_handlers
from helpdesk.core.logging import configure_logging, log_requests
from helpdesk.models.schemas.health import RootResponse
from helpdesk.repositories.ticket_store import JsonTicketStore

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    ticket_store = JsonTicketStore(get_settings().data_file)
    store = ticket_store.load()
    logger.info("Using ticket store %s (%d tickets)", ticket_store.path, len(store.tickets))
    yield
    logger.info("Shutting down helpdesk API")


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.app_debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/", response_model=RootResponse)
def root() -> RootResponse:
    return RootResponse()


def run() -> None:
    uvicorn.run("helpdesk.main:app", host=settings.host, port=settings.port)
