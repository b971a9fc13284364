"""Domain exception hierarchy for type-safe error handling.

Every error raised by custodia carries a machine-readable error code and a
structured context dict so callers can log and map it consistently.
Credential hashes and plaintext secrets never appear in messages or context.

Example:
    >>> from custodia.foundation.domain.exceptions import MalformedHashError
    >>> raise MalformedHashError("missing salt segment")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AuthenticationError",
    "CredentialHashingError",
    "DomainError",
    "MalformedHashError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (aggregate IDs, field names).

    Example:
        >>> raise DomainError("Operation failed", context={"aggregate_id": "123"})
        DomainError: Operation failed (aggregate_id=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ValidationError(DomainError):
    """Raised when input fails domain validation rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation.
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("identity", "Federated users have no local credential")
        ValidationError: Validation failed for 'identity': Federated users have no ...
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        """Initialize validation error.

        Args:
            field: Field path that failed validation.
            reason: Human-readable validation failure reason.
            **extra_context: Additional debugging context.
        """
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class MalformedHashError(DomainError):
    """Raised when a stored credential hash is not a valid PHC string.

    Recoverable: the caller decides how to surface it. It is never reported
    as a plain verification mismatch.

    Attributes:
        error_code: "MALFORMED_HASH" (class constant).
        reason: Which part of the grammar was violated.

    Example:
        >>> raise MalformedHashError("hash must start with '$'")
        MalformedHashError: Malformed credential hash: hash must start with '$'
    """

    error_code: str = "MALFORMED_HASH"

    def __init__(self, reason: str, **extra_context: Any) -> None:
        """Initialize malformed hash error.

        Args:
            reason: Human-readable description of the grammar violation.
            **extra_context: Additional debugging context (never the hash itself).
        """
        self.reason = reason
        super().__init__(
            f"Malformed credential hash: {reason}",
            {"reason": reason, **extra_context},
        )


class CredentialHashingError(DomainError):
    """Raised when the password hashing backend rejects its input.

    Practically unreachable for well-formed secrets, but surfaced as a typed
    error instead of terminating the process.

    Attributes:
        error_code: "HASH_GENERATION_FAILED" (class constant).
    """

    error_code: str = "HASH_GENERATION_FAILED"


class AuthenticationError(DomainError):
    """Raised when an identity assertion cannot be accepted.

    Used when identity-provider claims lack a usable subject.

    Attributes:
        error_code: Machine-readable error code (e.g., "MISSING_SUBJECT").
        auth_error: RFC 6750 error code for WWW-Authenticate header.

    Example:
        >>> raise AuthenticationError("Claims carry no subject",
        ...     auth_error="invalid_token", error_code="MISSING_SUBJECT")
    """

    error_code: str = "AUTHENTICATION_ERROR"

    def __init__(
        self,
        message: str,
        auth_error: str = "invalid_token",
        error_code: str = "AUTHENTICATION_ERROR",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize authentication error.

        Args:
            message: Human-readable error description.
            auth_error: RFC 6750 error code for WWW-Authenticate header.
            error_code: Machine-readable error code for client handling.
            context: Structured debugging information.
        """
        self.auth_error = auth_error
        self.error_code = error_code
        super().__init__(message, context)
