"""
Registry Storage - persistent snapshot of the two record maps with audit.

Implements the var/registry/ storage layer for the profile and
resource-type maps.
"""

import hashlib
import json
import logging
import os
import uuid
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from lexer_core.core.exceptions import ChecksumMismatchError, StorageError
from lexer_core.core.models import CallResult

logger = logging.getLogger(__name__)


class RegistrySnapshot(BaseModel):
    """Persisted registry state."""

    version: str = "1.0"
    administrator: str
    block_height: int = Field(default=0, ge=0)
    last_updated: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    profiles: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="owner -> profile record"
    )
    resource_types: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="type id -> resource type record"
    )
    checksum: str = ""

    def compute_checksum(self) -> str:
        """Compute SHA256 checksum of the deployment and the two maps."""
        data_str = json.dumps(
            {
                "administrator": self.administrator,
                "block_height": self.block_height,
                "profiles": self.profiles,
                "resource_types": self.resource_types,
            },
            sort_keys=True,
        )
        return hashlib.sha256(data_str.encode()).hexdigest()


class RegistryStorage:
    """
    Snapshot storage backend.

    Manages:
    - {state_dir}/_STATE.json (registry snapshot)
    - {audit_dir}/registry_log.jsonl (one entry per write call)
    """

    STATE_FILE = "_STATE.json"
    AUDIT_FILE = "registry_log.jsonl"

    def __init__(self, state_dir: Path | None = None, audit_dir: Path | None = None):
        """Initialize storage with its directories."""
        self._state_dir = state_dir or Path("var/registry")
        self._audit_dir = audit_dir or Path("var/audit")
        self._state_dir.mkdir(parents=True, exist_ok=True)
        self._audit_dir.mkdir(parents=True, exist_ok=True)

    @property
    def state_path(self) -> Path:
        return self._state_dir / self.STATE_FILE

    @property
    def audit_path(self) -> Path:
        return self._audit_dir / self.AUDIT_FILE

    def exists(self) -> bool:
        """Return True if a snapshot has been written."""
        return self.state_path.exists()

    def load(self) -> RegistrySnapshot | None:
        """
        Load the snapshot from disk.

        Returns None when nothing has been persisted yet.

        Raises:
            StorageError: If the snapshot is unreadable or malformed
            ChecksumMismatchError: If the maps do not match the stored checksum
        """
        path = self.state_path
        if not path.exists():
            return None

        try:
            snapshot = RegistrySnapshot.model_validate_json(path.read_text())
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read registry snapshot: {e}", path=str(path)) from e

        computed = snapshot.compute_checksum()
        if snapshot.checksum != computed:
            raise ChecksumMismatchError(
                "Registry snapshot checksum mismatch",
                path=str(path),
                expected=snapshot.checksum,
                actual=computed,
            )
        return snapshot

    def save(self, snapshot: RegistrySnapshot) -> None:
        """Persist the snapshot atomically using write-replace pattern."""
        snapshot.last_updated = datetime.now(timezone.utc).isoformat()
        snapshot.checksum = snapshot.compute_checksum()

        path = self.state_path
        temp_path = self._state_dir / f"{self.STATE_FILE}.tmp"
        try:
            temp_path.write_text(snapshot.model_dump_json(indent=2))
            os.replace(temp_path, path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise StorageError(f"Cannot write registry snapshot: {e}", path=str(path)) from e

    def write_audit_log(self, result: CallResult) -> str:
        """Write audit log entry and return reference."""
        audit_ref = str(uuid.uuid4())[:8]

        entry = {
            "audit_ref": audit_ref,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "operation": result.operation,
            "caller": result.caller,
            "key": result.key,
            "status": result.status,
            "error_code": int(result.error_code) if result.error_code is not None else None,
            "error": result.error,
            "block_height": result.block_height,
        }

        try:
            with open(self.audit_path, "a") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit entry {audit_ref}: {e}")
            return ""

        return audit_ref

    def read_audit_log(self, limit: int = 20) -> list[dict[str, Any]]:
        """Return the most recent audit entries, oldest first."""
        if not self.audit_path.exists():
            return []

        entries: deque[dict[str, Any]] = deque(maxlen=limit)
        with open(self.audit_path) as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    entries.append(json.loads(line))
                except json.JSONDecodeError:
                    logger.warning("Skipping malformed audit log line")
        return list(entries)
