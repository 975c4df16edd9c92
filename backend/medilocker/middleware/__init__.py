"""
Middleware package.
"""
from medilocker.middleware.error_handler import ErrorHandlerMiddleware
from medilocker.middleware.request_context import RequestContextMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestContextMiddleware",
]
