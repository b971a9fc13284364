"""Value objects for local account credentials."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_SECRET_LENGTH = 16


@dataclass(frozen=True, slots=True)
class SecretAndHash:
    """Freshly generated secret paired with its one-way hash.

    Exists only at account creation or credential rotation time. The
    plaintext ``secret`` is handed to the caller once (e.g. shown to an
    administrator) and must never be persisted; only ``hash`` is stored.
    ``secret`` is excluded from ``repr`` so it cannot leak into logs.

    Attributes:
        secret: Plaintext secret (display-once).
        hash: PHC-formatted hash of ``secret``.
    """

    secret: str = field(repr=False)
    hash: str
