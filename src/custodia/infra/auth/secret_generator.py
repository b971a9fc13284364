"""Random secret generation for newly provisioned local accounts.

Uses the ``secrets`` module (OS CSPRNG). There is no shared generator
state, so concurrent calls from several threads are safe.
"""

from __future__ import annotations

import secrets
import string
from typing import TYPE_CHECKING

from custodia.foundation.domain.credential_value_objects import (
    DEFAULT_SECRET_LENGTH,
    SecretAndHash,
)
from custodia.foundation.domain.exceptions import ValidationError
from custodia.infra.auth.credential_codec import get_credential_hasher
from custodia.infra.auth.settings import get_auth_settings

if TYPE_CHECKING:
    from custodia.foundation.domain.ports import CredentialHasherPort

ALPHANUMERIC = string.ascii_letters + string.digits


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """Draw ``length`` characters uniformly from ``[A-Za-z0-9]``.

    Args:
        length: Number of characters (default 16, about 95 bits of entropy).

    Returns:
        Random alphanumeric string.

    Raises:
        ValidationError: If length is less than 1.

    Example:
        >>> len(generate_secret())
        16
        >>> generate_secret(8).isalnum()
        True
    """
    if length < 1:
        raise ValidationError("length", "Secret length must be at least 1", length=length)
    return "".join(secrets.choice(ALPHANUMERIC) for _ in range(length))


def generate_credential(
    hasher: CredentialHasherPort | None = None,
    length: int | None = None,
) -> SecretAndHash:
    """Generate a secret and hash it.

    The only sanctioned way to create credentials for new local accounts.

    Args:
        hasher: Hasher to use. Defaults to the process-wide Argon2 hasher.
        length: Secret length. Defaults to ``AUTH_SECRET_LENGTH``.

    Returns:
        SecretAndHash whose ``secret`` must be shown once and discarded.
    """
    hasher = hasher or get_credential_hasher()
    secret = generate_secret(length if length is not None else get_auth_settings().secret_length)
    return SecretAndHash(secret=secret, hash=hasher.hash_secret(secret))
