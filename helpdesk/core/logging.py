import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("helpdesk.http")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    started = time.perf_counter()
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"

    logger.info("%s %s", request.method, target)
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s - %d %.0fms", request.method, target, response.status_code, elapsed_ms)
    return response
