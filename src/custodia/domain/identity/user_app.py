"""Application service for User aggregate persistence.

Storage is configured through the eventsourcing library's environment
variables (``PERSISTENCE_MODULE`` and friends); with none set it keeps
events in memory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar
from uuid import UUID

from eventsourcing.application import Application

from custodia.domain.identity.infrastructure.transcodings import USER_TRANSCODINGS
from custodia.domain.identity.user import User

if TYPE_CHECKING:
    from eventsourcing.persistence import Transcoder


class UserApplication(Application[UUID]):
    """Application service for User aggregate persistence.

    Attributes:
        snapshotting_intervals: Snapshot every 50 events for User.
    """

    snapshotting_intervals: ClassVar[dict[type, int]] = {User: 50}

    def register_transcodings(self, transcoder: Transcoder) -> None:
        super().register_transcodings(transcoder)
        for transcoding in USER_TRANSCODINGS:
            transcoder.register(transcoding)
