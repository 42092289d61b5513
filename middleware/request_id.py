"""
Request ID middleware.

Every request gets an id, either the client's ``X-Request-ID`` header or a
fresh UUID. It is echoed back on the response and attached to every log
record emitted while the request is being handled.
"""

import uuid
import logging
from contextvars import ContextVar
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


REQUEST_ID_HEADER = "X-Request-ID"

_current_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def _install_record_factory():
    # Installed once; the context variable keeps concurrent requests apart
    base_factory = logging.getLogRecordFactory()
    if getattr(base_factory, "_adds_request_id", False):
        return

    def record_factory(*args, **kwargs):
        record = base_factory(*args, **kwargs)
        record.request_id = _current_request_id.get()
        return record

    record_factory._adds_request_id = True
    logging.setLogRecordFactory(record_factory)


_install_record_factory()


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        request.state.request_id = request_id
        token = _current_request_id.set(request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            _current_request_id.reset(token)
