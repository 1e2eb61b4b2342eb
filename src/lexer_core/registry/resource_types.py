"""
Resource-Type Store - type definitions keyed by a short identifier.

Validation happens before any mutation, so a rejected write leaves the
store untouched.
"""

import logging
from typing import Any

from lexer_core.core.exceptions import InvalidInputError
from lexer_core.core.models import ConfidentialityLevel, ErrorCode, Operation, ResourceType

logger = logging.getLogger(__name__)

# Typed-argument bounds of the call surface (string-utf8 N)
MAX_ID_LENGTH = 32
MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 256


def validate_confidentiality_level(value: Any) -> ConfidentialityLevel:
    """
    Coerce ``value`` into a ConfidentialityLevel.

    Raises:
        InvalidInputError: If value is not an integer in the tier set
    """
    lowest, highest = ConfidentialityLevel.bounds()
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"Confidentiality level must be an unsigned integer in {lowest}..{highest}",
            field="confidentiality-level",
            value=value,
            error_code=ErrorCode.INVALID_CONFIDENTIALITY_LEVEL,
            operation=Operation.REGISTER_RESOURCE_TYPE.value,
        )
    try:
        return ConfidentialityLevel(value)
    except ValueError:
        raise InvalidInputError(
            f"Confidentiality level {value} outside {lowest}..{highest}",
            field="confidentiality-level",
            value=value,
            error_code=ErrorCode.INVALID_CONFIDENTIALITY_LEVEL,
            operation=Operation.REGISTER_RESOURCE_TYPE.value,
        ) from None


def _check_text(field: str, value: Any, max_length: int, *, allow_empty: bool = True) -> str:
    """Validate a text argument against its declared bound."""
    if not isinstance(value, str):
        raise InvalidInputError(
            f"'{field}' must be text",
            field=field,
            value=value,
            error_code=ErrorCode.INVALID_RESOURCE_TYPE,
            operation=Operation.REGISTER_RESOURCE_TYPE.value,
        )
    if not allow_empty and not value:
        raise InvalidInputError(
            f"'{field}' cannot be empty",
            field=field,
            error_code=ErrorCode.INVALID_RESOURCE_TYPE,
            operation=Operation.REGISTER_RESOURCE_TYPE.value,
        )
    if len(value) > max_length:
        raise InvalidInputError(
            f"'{field}' exceeds {max_length} characters",
            field=field,
            value=len(value),
            error_code=ErrorCode.INVALID_RESOURCE_TYPE,
            operation=Operation.REGISTER_RESOURCE_TYPE.value,
        )
    return value


class ResourceTypeStore:
    """
    Owns the mapping from type identifier to type definition.

    Registration under an existing id overwrites the definition.
    Entries are never deleted.
    """

    def __init__(self) -> None:
        self._types: dict[str, ResourceType] = {}

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    def get(self, type_id: str) -> ResourceType | None:
        """Return the definition for ``type_id`` or None."""
        return self._types.get(type_id)

    def validate(
        self,
        type_id: Any,
        name: Any,
        description: Any,
        confidentiality_level: Any,
    ) -> ResourceType:
        """
        Build a validated record without touching the store.

        Raises:
            InvalidInputError: If any argument is outside its domain
        """
        _check_text("id", type_id, MAX_ID_LENGTH, allow_empty=False)
        level = validate_confidentiality_level(confidentiality_level)
        return ResourceType(
            name=_check_text("name", name, MAX_NAME_LENGTH),
            description=_check_text("description", description, MAX_DESCRIPTION_LENGTH),
            confidentiality_level=level,
        )

    def upsert(
        self,
        type_id: str,
        name: str,
        description: str,
        confidentiality_level: int,
    ) -> ResourceType:
        """Create or overwrite the definition for ``type_id``."""
        record = self.validate(type_id, name, description, confidentiality_level)
        if type_id in self._types:
            logger.debug(f"Overwriting resource type '{type_id}'")
        self._types[type_id] = record
        return record

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return the map in its ledger layout."""
        return {type_id: t.to_record() for type_id, t in sorted(self._types.items())}

    def restore(self, records: dict[str, dict[str, Any]]) -> None:
        """Replace the map with previously snapshotted records."""
        self._types = {
            type_id: ResourceType.model_validate(record)
            for type_id, record in records.items()
        }

    def rollback(self, type_id: str, previous: ResourceType | None) -> None:
        """Restore the entry for ``type_id`` as it was before an uncommitted write."""
        if previous is None:
            self._types.pop(type_id, None)
        else:
            self._types[type_id] = previous
