"""
Ledger Sequence - the host ledger's block height.

Registration timestamps are ledger positions, not wall-clock time.
"""

import logging
import threading

from lexer_core.core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class LedgerSequence:
    """
    Monotonic block-height counter.

    Starts at genesis (height 0) unless restored from a snapshot. Writes
    issued before the first advance observe height 0.
    """

    def __init__(self, height: int = 0):
        if height < 0:
            raise InvalidInputError(
                "Ledger height cannot be negative", field="height", value=height
            )
        self._height = height
        self._lock = threading.Lock()

    @property
    def height(self) -> int:
        """Current ledger position."""
        with self._lock:
            return self._height

    def advance(self, blocks: int = 1) -> int:
        """Mine ``blocks`` empty blocks and return the new height."""
        if blocks < 1:
            raise InvalidInputError(
                "Ledger can only advance by a positive number of blocks",
                field="blocks",
                value=blocks,
            )
        with self._lock:
            self._height += blocks
            height = self._height
        logger.debug(f"Ledger advanced by {blocks} block(s) to height {height}")
        return height

    def __repr__(self) -> str:
        return f"LedgerSequence(height={self.height})"
