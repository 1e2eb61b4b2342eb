"""
Lexer Core Ledger Module.

Models the host ledger's sequence position used for registration timestamps.
"""

__all__ = ["LedgerSequence"]

from lexer_core.ledger.sequence import LedgerSequence
