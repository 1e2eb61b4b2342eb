"""
API route handlers.

This package contains all route definitions for the Lexer Core API.
"""

from lexer_core.api.routes import health, profiles, resource_types

__all__ = [
    "health",
    "profiles",
    "resource_types",
]
