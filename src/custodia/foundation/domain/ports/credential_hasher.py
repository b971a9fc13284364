"""Port interface for credential hashing.

This module defines the CredentialHasherPort protocol so that domain logic
can hash and check local-account secrets without coupling to a specific
password hashing algorithm.

Example:
    >>> from custodia.foundation.domain.ports import CredentialHasherPort
    >>> def store_secret(hasher: CredentialHasherPort, secret: str) -> str:
    ...     return hasher.hash_secret(secret)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialHasherPort(Protocol):
    """Port for one-way credential hashing and verification.

    Implementations own the hash format, salt generation and cost
    parameters. The protocol is runtime_checkable to enable isinstance()
    verification in tests and dependency injection validation.

    Example:
        >>> class PlainHasher:
        ...     def hash_secret(self, secret: str) -> str:
        ...         ...
        ...
        ...     def verify_secret(self, stored_hash: str, candidate: str) -> bool:
        ...         ...
        >>> isinstance(PlainHasher(), CredentialHasherPort)
        True
    """

    def hash_secret(self, secret: str) -> str:
        """Hash a plaintext secret for storage.

        Args:
            secret: The plaintext secret.

        Returns:
            Self-describing hash string suitable for persistent storage.

        Raises:
            CredentialHashingError: If the backend rejects the input.
        """
        ...

    def verify_secret(self, stored_hash: str, candidate: str) -> bool:
        """Check a plaintext candidate against a stored hash.

        Args:
            stored_hash: Hash previously produced by ``hash_secret``.
            candidate: Plaintext to check.

        Returns:
            True if the candidate matches, False otherwise.

        Raises:
            MalformedHashError: If ``stored_hash`` cannot be parsed.
        """
        ...
