"""Domain port interfaces for hexagonal architecture.

Ports define abstract interfaces that the domain layer uses to interact
with external services. Implementations (adapters) live in infrastructure.
"""

from custodia.foundation.domain.ports.credential_hasher import CredentialHasherPort

__all__ = ["CredentialHasherPort"]
