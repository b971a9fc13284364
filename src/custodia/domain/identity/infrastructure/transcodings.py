"""Transcodings so User events and snapshots survive the event store.

The eventsourcing JSON transcoder only knows primitives out of the box. The
identity variants are stored as plain dicts tagged by the transcoding name,
which keeps the variant explicit in the stored record.
"""

from __future__ import annotations

from typing import Any

from eventsourcing.persistence import Transcoding

from custodia.domain.identity.identity import FederatedIdentity, LocalIdentity
from custodia.domain.identity.profile import IdentityProfile


class LocalIdentityAsDict(Transcoding):
    type = LocalIdentity
    name = "custodia_local_identity"

    def encode(self, obj: LocalIdentity) -> dict[str, str]:
        return {"username": obj.username, "credential_hash": obj.credential_hash}

    def decode(self, data: dict[str, str]) -> LocalIdentity:
        return LocalIdentity(username=data["username"], credential_hash=data["credential_hash"])


class FederatedIdentityAsDict(Transcoding):
    type = FederatedIdentity
    name = "custodia_federated_identity"

    def encode(self, obj: FederatedIdentity) -> dict[str, Any]:
        return {"subject_id": obj.subject_id, "profile": obj.profile.to_dict()}

    def decode(self, data: dict[str, Any]) -> FederatedIdentity:
        return FederatedIdentity(
            subject_id=data["subject_id"],
            profile=IdentityProfile.from_dict(data["profile"]),
        )


class RoleSetAsList(Transcoding):
    """Role sets appear in snapshots of User state."""

    type = set
    name = "custodia_role_set"

    def encode(self, obj: set[str]) -> list[str]:
        return sorted(obj)

    def decode(self, data: list[str]) -> set[str]:
        return set(data)


USER_TRANSCODINGS: tuple[Transcoding, ...] = (
    LocalIdentityAsDict(),
    FederatedIdentityAsDict(),
    RoleSetAsList(),
)
