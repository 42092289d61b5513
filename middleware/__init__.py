"""
Middleware package exports.
"""

from middleware.request_id import RequestIDMiddleware, REQUEST_ID_HEADER

__all__ = ["RequestIDMiddleware", "REQUEST_ID_HEADER"]
