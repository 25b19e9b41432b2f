import logging

from fastapi import Request
from starlette.concurrency import run_in_threadpool

from services.visitor_service import client_ip, try_record_visit

logger = logging.getLogger(__name__)


async def log_visitor(request: Request, call_next):
    """Record one visitor row per request, then hand the request on.

    A failed write never changes the response.
    """
    ip = client_ip(request.headers, request.client)
    error = await run_in_threadpool(try_record_visit, request.app.state.engine, ip)
    if error is not None:
        logger.error("Error logging visitor %s", ip, exc_info=error)
    return await call_next(request)
