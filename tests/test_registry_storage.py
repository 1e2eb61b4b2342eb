"""Tests for registry snapshot storage."""

import json
from pathlib import Path

import pytest

from lexer_core.core.exceptions import ChecksumMismatchError, StorageError
from lexer_core.core.models import CallResult, ErrorCode
from lexer_core.registry.storage import RegistrySnapshot, RegistryStorage


def _snapshot() -> RegistrySnapshot:
    return RegistrySnapshot(
        administrator="admin",
        block_height=3,
        profiles={
            "p1": {
                "active": True,
                "alias": "TestUser",
                "metadata-url": None,
                "registration-timestamp": 0,
            }
        },
        resource_types={
            "analytics": {"name": "A", "description": "B", "confidentiality-level": 2}
        },
    )


class TestRegistrySnapshot:
    """Tests for RegistrySnapshot model."""

    def test_snapshot_defaults(self) -> None:
        """A fresh snapshot is empty at genesis."""
        snapshot = RegistrySnapshot(administrator="admin")
        assert snapshot.version == "1.0"
        assert snapshot.block_height == 0
        assert snapshot.profiles == {}
        assert snapshot.resource_types == {}

    def test_checksum_tracks_maps(self) -> None:
        """The checksum changes with the stored maps."""
        snapshot = _snapshot()
        before = snapshot.compute_checksum()
        assert len(before) == 64

        snapshot.profiles["p1"]["alias"] = "Changed"
        assert snapshot.compute_checksum() != before

    def test_checksum_tracks_deployment(self) -> None:
        """The checksum covers the administrator and the block height."""
        base = _snapshot().compute_checksum()

        assert _snapshot().model_copy(update={"administrator": "other"}).compute_checksum() != base
        assert _snapshot().model_copy(update={"block_height": 4}).compute_checksum() != base


class TestRegistryStorage:
    """Tests for RegistryStorage class."""

    def test_initialization(self, temp_dir: Path) -> None:
        """Storage creates its directories."""
        state_dir = temp_dir / "registry"
        audit_dir = temp_dir / "audit"
        RegistryStorage(state_dir=state_dir, audit_dir=audit_dir)

        assert state_dir.exists()
        assert audit_dir.exists()

    def test_load_missing(self, storage: RegistryStorage) -> None:
        """Nothing persisted means no snapshot."""
        assert storage.exists() is False
        assert storage.load() is None

    def test_save_and_load(self, storage: RegistryStorage) -> None:
        """Saved snapshots reload with their maps intact."""
        storage.save(_snapshot())

        loaded = storage.load()
        assert loaded is not None
        assert loaded.administrator == "admin"
        assert loaded.block_height == 3
        assert loaded.profiles["p1"]["alias"] == "TestUser"
        assert loaded.resource_types["analytics"]["confidentiality-level"] == 2
        assert loaded.checksum == loaded.compute_checksum()

    def test_save_leaves_no_temp_file(self, storage: RegistryStorage) -> None:
        """Write-replace removes the temporary file."""
        storage.save(_snapshot())
        leftovers = list(storage.state_path.parent.glob("*.tmp"))
        assert leftovers == []

    def test_tampered_snapshot(self, storage: RegistryStorage) -> None:
        """Edited maps are detected on load."""
        storage.save(_snapshot())
        data = json.loads(storage.state_path.read_text())
        data["resource_types"]["analytics"]["confidentiality-level"] = 0
        storage.state_path.write_text(json.dumps(data))

        with pytest.raises(ChecksumMismatchError, match="checksum mismatch"):
            storage.load()

    def test_tampered_block_height(self, storage: RegistryStorage) -> None:
        """Rewinding the stored height is detected on load."""
        storage.save(_snapshot())
        data = json.loads(storage.state_path.read_text())
        data["block_height"] = 0
        storage.state_path.write_text(json.dumps(data))

        with pytest.raises(ChecksumMismatchError):
            storage.load()

    def test_malformed_snapshot(self, storage: RegistryStorage) -> None:
        """Unreadable snapshots raise StorageError."""
        storage.state_path.write_text("{not json")

        with pytest.raises(StorageError, match="Cannot read"):
            storage.load()

    def test_audit_log(self, storage: RegistryStorage) -> None:
        """Write calls are appended to the audit log."""
        ok = CallResult(
            status="success",
            operation="update-participant-profile",
            caller="p1",
            key="p1",
        )
        rejected = CallResult(
            status="failure",
            operation="register-resource-type",
            caller="p1",
            key="analytics",
            block_height=1,
            error_code=ErrorCode.UNAUTHORIZED,
            error="denied",
        )

        ref = storage.write_audit_log(ok)
        storage.write_audit_log(rejected)

        entries = storage.read_audit_log()
        assert len(ref) == 8
        assert [e["status"] for e in entries] == ["success", "failure"]
        assert entries[0]["audit_ref"] == ref
        assert entries[1]["error_code"] == 100
        assert entries[1]["block_height"] == 1

    def test_audit_log_limit(self, storage: RegistryStorage) -> None:
        """Only the most recent entries are returned."""
        for i in range(5):
            storage.write_audit_log(
                CallResult(status="success", operation="op", caller="c", key=str(i))
            )

        entries = storage.read_audit_log(limit=2)
        assert [e["key"] for e in entries] == ["3", "4"]

    def test_audit_log_empty(self, storage: RegistryStorage) -> None:
        """No writes means no entries."""
        assert storage.read_audit_log() == []
