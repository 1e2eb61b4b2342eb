"""
Lexer Core contract - the registry's public call surface.

Four operations over two independent stores:
- update-participant-profile / get-participant-profile
- register-resource-type / get-resource-type-details

Every write is applied under a single lock and either commits fully or
leaves state untouched. Rejections are returned as tagged CallResults.
"""

import logging
import threading
from typing import Any, Callable

from lexer_core.config import LexerSettings
from lexer_core.core.exceptions import RegistryError, StorageError, UnauthorizedError
from lexer_core.core.models import (
    CallResult,
    Operation,
    ParticipantProfile,
    ResourceType,
)
from lexer_core.ledger.sequence import LedgerSequence
from lexer_core.registry.profiles import ProfileStore
from lexer_core.registry.resource_types import ResourceTypeStore
from lexer_core.registry.storage import RegistrySnapshot, RegistryStorage

logger = logging.getLogger(__name__)


class LexerCore:
    """
    Registry with a profile store and a resource-type store.

    The administrator is fixed at construction (deployment) and is the
    only identity allowed to register resource types. When a storage
    backend is attached, each committed write is persisted and every
    write call is audited.
    """

    def __init__(
        self,
        administrator: str,
        *,
        ledger: LedgerSequence | None = None,
        storage: RegistryStorage | None = None,
    ):
        self._administrator = administrator
        self.ledger = ledger or LedgerSequence()
        self._storage = storage
        self._profiles = ProfileStore()
        self._resource_types = ResourceTypeStore()
        self._lock = threading.RLock()

    @classmethod
    def load(cls, settings: LexerSettings | None = None) -> "LexerCore":
        """
        Build a registry from settings, restoring any persisted snapshot.

        Raises:
            StorageError: If the snapshot exists but cannot be trusted
        """
        settings = settings or LexerSettings.from_env()
        if not settings.persist:
            return cls(settings.administrator)

        storage = RegistryStorage(state_dir=settings.state_dir, audit_dir=settings.audit_dir)
        snapshot = storage.load()
        if snapshot is None:
            logger.info(f"Deploying new registry with administrator {settings.administrator}")
            core = cls(settings.administrator, storage=storage)
            core._persist()
            return core

        if snapshot.administrator != settings.administrator:
            logger.warning(
                f"Configured administrator {settings.administrator} differs from "
                f"deployed administrator {snapshot.administrator}; keeping the deployed one"
            )

        core = cls(
            snapshot.administrator,
            ledger=LedgerSequence(snapshot.block_height),
            storage=storage,
        )
        try:
            core._profiles.restore(snapshot.profiles)
            core._resource_types.restore(snapshot.resource_types)
        except ValueError as e:
            raise StorageError(
                f"Registry snapshot holds invalid records: {e}",
                path=str(storage.state_path),
            ) from e
        logger.info(
            f"Restored registry at height {snapshot.block_height}: "
            f"{len(core._profiles)} profile(s), {len(core._resource_types)} resource type(s)"
        )
        return core

    @property
    def administrator(self) -> str:
        return self._administrator

    @property
    def storage(self) -> RegistryStorage | None:
        return self._storage

    # Profile store

    def update_participant_profile(
        self,
        caller: str,
        alias: str | None = None,
        metadata_url: str | None = None,
    ) -> CallResult:
        """
        Create or replace the caller's own profile.

        Absent alias or metadata_url clears that field. The registration
        timestamp is set on first write only.
        """
        operation = Operation.UPDATE_PARTICIPANT_PROFILE.value

        def apply(height: int) -> Callable[[], None]:
            previous = self._profiles.get(caller)
            self._profiles.upsert(caller, alias, metadata_url, height)
            return lambda: self._profiles.rollback(caller, previous)

        return self._execute(operation, caller, caller, apply)

    def get_participant_profile(self, identity: str) -> ParticipantProfile | None:
        """Return the profile for ``identity``, or None if it never wrote one."""
        with self._lock:
            return self._profiles.get(identity)

    # Resource-type store

    def register_resource_type(
        self,
        caller: str,
        type_id: str,
        name: str,
        description: str,
        confidentiality_level: int,
    ) -> CallResult:
        """Create or overwrite a resource type. Administrator only."""
        operation = Operation.REGISTER_RESOURCE_TYPE.value

        def apply(height: int) -> Callable[[], None]:
            if caller != self._administrator:
                raise UnauthorizedError(
                    "Only the administrator may register resource types",
                    caller=caller,
                    operation=operation,
                    key=type_id,
                )
            previous = self._resource_types.get(type_id)
            self._resource_types.upsert(type_id, name, description, confidentiality_level)
            return lambda: self._resource_types.rollback(type_id, previous)

        return self._execute(operation, caller, type_id, apply)

    def get_resource_type_details(self, type_id: str) -> ResourceType | None:
        """Return the definition for ``type_id``, or None if unregistered."""
        with self._lock:
            return self._resource_types.get(type_id)

    # Hosting helpers

    def status(self) -> dict[str, Any]:
        """Summary of registry state."""
        with self._lock:
            return {
                "administrator": self._administrator,
                "block_height": self.ledger.height,
                "profiles": len(self._profiles),
                "resource_types": len(self._resource_types),
                "persistent": self._storage is not None,
            }

    def snapshot(self) -> RegistrySnapshot:
        """Capture the current state."""
        with self._lock:
            return RegistrySnapshot(
                administrator=self._administrator,
                block_height=self.ledger.height,
                profiles=self._profiles.snapshot(),
                resource_types=self._resource_types.snapshot(),
            )

    def mine_block(self) -> int:
        """Advance the ledger by one block and persist the new height."""
        with self._lock:
            height = self.ledger.advance()
            self._persist()
            return height

    def _persist(self) -> None:
        if self._storage is not None:
            self._storage.save(self.snapshot())

    def _execute(
        self,
        operation: str,
        caller: str,
        key: str,
        apply: Callable[[int], Callable[[], None]],
    ) -> CallResult:
        """
        Run one write call atomically.

        ``apply`` validates and mutates, returning an undo callable. Registry
        rejections become failure results; a persistence failure undoes the
        mutation, is audited as a failure and propagates.
        """
        with self._lock:
            height = self.ledger.height
            result = CallResult(
                status="success",
                operation=operation,
                caller=caller,
                key=key,
                block_height=height,
            )
            try:
                undo = apply(height)
            except RegistryError as e:
                if e.error_code is None:
                    raise
                result.status = "failure"
                result.error_code = e.error_code
                result.error = e.message
                logger.warning(f"{operation} rejected for {caller}: {e}")
            else:
                try:
                    self._persist()
                except Exception as e:
                    undo()
                    logger.error(f"{operation} by {caller} rolled back: snapshot not persisted")
                    result.status = "failure"
                    result.error = str(e)
                    if self._storage is not None:
                        self._storage.write_audit_log(result)
                    raise
                logger.info(f"{operation} committed by {caller} for '{key}' at height {height}")

            if self._storage is not None:
                result.audit_ref = self._storage.write_audit_log(result)
            return result
