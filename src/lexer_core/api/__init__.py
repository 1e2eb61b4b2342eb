"""
Lexer Core API Module.

REST surface for the participant and resource-type registry.
"""

from lexer_core.api.app import create_app

__all__ = ["create_app"]
