"""
Profile Store - participant profiles keyed by caller identity.
"""

import logging
from typing import Any

from lexer_core.core.models import ParticipantProfile

logger = logging.getLogger(__name__)


class ProfileStore:
    """
    Owns the mapping from caller identity to profile record.

    A profile exists for an identity iff that identity has upserted at
    least once. Profiles are never deleted and never deactivated.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, ParticipantProfile] = {}

    def __contains__(self, owner: object) -> bool:
        return owner in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def get(self, owner: str) -> ParticipantProfile | None:
        """Return the profile for ``owner`` or None."""
        return self._profiles.get(owner)

    def upsert(
        self,
        owner: str,
        alias: str | None,
        metadata_url: str | None,
        height: int,
    ) -> ParticipantProfile:
        """
        Create or replace the caller's profile.

        On first write the profile is created active with
        ``registration_timestamp = height``. Later writes replace alias and
        metadata_url wholesale (an absent value clears the field) and keep
        the original timestamp.
        """
        existing = self._profiles.get(owner)
        if existing is None:
            profile = ParticipantProfile(
                active=True,
                alias=alias,
                metadata_url=metadata_url,
                registration_timestamp=height,
            )
            logger.debug(f"Creating profile for {owner} at height {height}")
        else:
            profile = ParticipantProfile(
                active=True,
                alias=alias,
                metadata_url=metadata_url,
                registration_timestamp=existing.registration_timestamp,
            )
        self._profiles[owner] = profile
        return profile

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Return the map in its ledger layout."""
        return {owner: p.to_record() for owner, p in sorted(self._profiles.items())}

    def restore(self, records: dict[str, dict[str, Any]]) -> None:
        """Replace the map with previously snapshotted records."""
        self._profiles = {
            owner: ParticipantProfile.model_validate(record)
            for owner, record in records.items()
        }

    def rollback(self, owner: str, previous: ParticipantProfile | None) -> None:
        """Restore the entry for ``owner`` as it was before an uncommitted write."""
        if previous is None:
            self._profiles.pop(owner, None)
        else:
            self._profiles[owner] = previous
