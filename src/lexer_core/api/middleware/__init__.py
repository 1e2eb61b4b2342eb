"""
API middleware.
"""

from lexer_core.api.middleware.logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
