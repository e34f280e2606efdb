"""HTTP middleware applied in create_app (first added = innermost)."""

from inventory_service.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
