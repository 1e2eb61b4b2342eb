"""
Lexer Core - participant and resource-type registry.

A small ledger-hosted registry with two independent record stores:
participant profiles keyed by caller identity, and resource-type
definitions keyed by a short identifier.
"""

__version__ = "0.1.0"

# API module is available but not exported by default
# Import explicitly: from lexer_core.api import create_app

__all__ = ["LexerCore"]

from lexer_core.contract import LexerCore
