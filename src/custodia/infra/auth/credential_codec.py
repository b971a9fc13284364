"""Credential hashing and verification with Argon2id.

Hashes are stored as PHC strings:

    $argon2id$v=19$m=19456,t=2,p=1$<salt>$<hash>

ref https://github.com/P-H-C/phc-string-format/blob/master/phc-sf-spec.md

Every stored hash is checked against the PHC grammar before it reaches the
argon2 backend, so a corrupted or foreign value surfaces as
MalformedHashError instead of being reported as a wrong password.

Implements the CredentialHasherPort protocol from
custodia.foundation.domain.ports.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from argon2 import PasswordHasher, Type
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from custodia.foundation.domain.exceptions import CredentialHashingError, MalformedHashError
from custodia.infra.auth.settings import get_auth_settings

if TYPE_CHECKING:
    from custodia.infra.auth.settings import AuthSettings

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"^[a-z0-9-]{1,32}$")
_PARAM_NAME_PATTERN = re.compile(r"^[a-z0-9-]{1,32}$")
_PARAM_VALUE_PATTERN = re.compile(r"^[a-zA-Z0-9/+.-]+$")
_SALT_PATTERN = re.compile(r"^[a-zA-Z0-9/+.-]+$")
_B64_PATTERN = re.compile(r"^[A-Za-z0-9+/]+$")

ARGON2_ALGORITHMS: frozenset[str] = frozenset({"argon2id", "argon2i", "argon2d"})
_REQUIRED_ARGON2_PARAMS = ("m", "t", "p")

_HASH_LENGTH = 32
_SALT_LENGTH = 16


@dataclass(frozen=True, slots=True)
class PhcHash:
    """Parsed PHC string.

    Attributes:
        algorithm: Function identifier (e.g. ``argon2id``).
        version: Value of the optional ``v=`` segment.
        params: Parameter name to value, in encoded order.
        salt: B64 salt, if present.
        digest: B64 hash output, if present (requires a salt).
    """

    algorithm: str
    version: int | None = None
    params: dict[str, str] = field(default_factory=dict)
    salt: str | None = None
    digest: str | None = None

    @classmethod
    def parse(cls, encoded: str) -> PhcHash:
        """Parse ``encoded`` per the PHC string grammar.

        Raises:
            MalformedHashError: On any deviation from the grammar.
        """
        if not encoded.startswith("$"):
            raise MalformedHashError("hash must start with '$'")
        segments = encoded[1:].split("$")
        if any(not segment for segment in segments):
            raise MalformedHashError("empty segment")

        algorithm = segments[0]
        if not _ID_PATTERN.match(algorithm):
            raise MalformedHashError("invalid algorithm identifier")
        rest = segments[1:]

        version: int | None = None
        if rest and rest[0].startswith("v="):
            digits = rest[0][2:]
            if not digits.isascii() or not digits.isdigit():
                raise MalformedHashError("version must be a decimal integer")
            if len(digits) > 1 and digits.startswith("0"):
                raise MalformedHashError("version must not have leading zeros")
            version = int(digits)
            rest = rest[1:]

        params: dict[str, str] = {}
        if rest and "=" in rest[0]:
            for pair in rest[0].split(","):
                name, sep, value = pair.partition("=")
                if not sep or not _PARAM_NAME_PATTERN.match(name):
                    raise MalformedHashError("invalid parameter name")
                if not _PARAM_VALUE_PATTERN.match(value):
                    raise MalformedHashError("invalid parameter value", param=name)
                if name in params:
                    raise MalformedHashError("duplicate parameter", param=name)
                params[name] = value
            rest = rest[1:]

        if len(rest) > 2:
            raise MalformedHashError("unexpected trailing segments")
        salt = rest[0] if rest else None
        digest = rest[1] if len(rest) == 2 else None
        if salt is not None and not _SALT_PATTERN.match(salt):
            raise MalformedHashError("invalid salt encoding")
        if digest is not None and not _B64_PATTERN.match(digest):
            raise MalformedHashError("invalid hash encoding")

        return cls(algorithm=algorithm, version=version, params=params, salt=salt, digest=digest)

    def __str__(self) -> str:
        segments = [self.algorithm]
        if self.version is not None:
            segments.append(f"v={self.version}")
        if self.params:
            segments.append(",".join(f"{k}={v}" for k, v in self.params.items()))
        if self.salt is not None:
            segments.append(self.salt)
            if self.digest is not None:
                segments.append(self.digest)
        return "$" + "$".join(segments)

    def require_argon2(self) -> None:
        """Check this hash carries everything Argon2 verification needs.

        Raises:
            MalformedHashError: If the algorithm is not Argon2, or the
                cost parameters, salt or hash are missing.
        """
        if self.algorithm not in ARGON2_ALGORITHMS:
            raise MalformedHashError("unsupported algorithm", algorithm=self.algorithm)
        missing = [name for name in _REQUIRED_ARGON2_PARAMS if name not in self.params]
        if missing:
            raise MalformedHashError("missing cost parameters", missing=",".join(missing))
        if self.salt is None or self.digest is None:
            raise MalformedHashError("salt and hash segments are required")


class Argon2CredentialHasher:
    """Credential hasher implementing CredentialHasherPort.

    Hashes with Argon2id using a fresh random salt from the OS CSPRNG per
    call and verifies against any Argon2 variant found in the stored hash.

    Args:
        time_cost: Number of iterations.
        memory_cost: Memory in KiB.
        parallelism: Number of lanes.
        hash_len: Length of the derived hash in bytes.
        salt_len: Length of the random salt in bytes.

    Example:
        >>> hasher = Argon2CredentialHasher()
        >>> stored = hasher.hash_secret("s3cret")
        >>> stored.startswith("$argon2id$v=19$")
        True
        >>> hasher.verify_secret(stored, "s3cret")
        True
    """

    def __init__(
        self,
        time_cost: int = 2,
        memory_cost: int = 19456,
        parallelism: int = 1,
        hash_len: int = _HASH_LENGTH,
        salt_len: int = _SALT_LENGTH,
    ) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=hash_len,
            salt_len=salt_len,
            type=Type.ID,
        )

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> Argon2CredentialHasher:
        return cls(
            time_cost=settings.hash_time_cost,
            memory_cost=settings.hash_memory_cost,
            parallelism=settings.hash_parallelism,
        )

    def hash_secret(self, secret: str) -> str:
        """Hash a secret into a PHC string.

        Raises:
            CredentialHashingError: If argon2 rejects the input.
        """
        try:
            return self._hasher.hash(secret)
        except HashingError as exc:
            raise CredentialHashingError("Failed to hash credential") from exc

    def verify_secret(self, stored_hash: str, candidate: str) -> bool:
        """Verify ``candidate`` against ``stored_hash``.

        Returns:
            True on match, False on mismatch.

        Raises:
            MalformedHashError: If ``stored_hash`` is not a valid Argon2 PHC
                string, or argon2 cannot decode it.
        """
        self._parse(stored_hash)
        try:
            return self._hasher.verify(stored_hash, candidate)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as exc:
            logger.warning("credential_hash_undecodable", extra={"detail": str(exc)})
            raise MalformedHashError("argon2 could not decode hash") from exc

    def needs_rehash(self, stored_hash: str) -> bool:
        """Check whether ``stored_hash`` was made with other parameters.

        Callers rotate the credential on next successful login when True.

        Raises:
            MalformedHashError: If ``stored_hash`` is not a valid Argon2 PHC string.
        """
        self._parse(stored_hash)
        return self._hasher.check_needs_rehash(stored_hash)

    async def hash_secret_async(self, secret: str) -> str:
        """``hash_secret`` in a worker thread, keeping the event loop free."""
        return await asyncio.to_thread(self.hash_secret, secret)

    async def verify_secret_async(self, stored_hash: str, candidate: str) -> bool:
        """``verify_secret`` in a worker thread, keeping the event loop free."""
        return await asyncio.to_thread(self.verify_secret, stored_hash, candidate)

    @staticmethod
    def _parse(stored_hash: str) -> PhcHash:
        try:
            parsed = PhcHash.parse(stored_hash)
            parsed.require_argon2()
        except MalformedHashError as exc:
            logger.warning("credential_hash_malformed", extra={"reason": exc.reason})
            raise
        return parsed


@lru_cache(maxsize=1)
def get_credential_hasher() -> Argon2CredentialHasher:
    """Get the process-wide hasher configured from AuthSettings.

    Clear cache with ``get_credential_hasher.cache_clear()`` for testing.
    """
    return Argon2CredentialHasher.from_settings(get_auth_settings())


def hash_secret(secret: str) -> str:
    """Hash ``secret`` with the process-wide hasher."""
    return get_credential_hasher().hash_secret(secret)


def verify_secret(stored_hash: str, candidate: str) -> bool:
    """Verify ``candidate`` against ``stored_hash`` with the process-wide hasher."""
    return get_credential_hasher().verify_secret(stored_hash, candidate)
