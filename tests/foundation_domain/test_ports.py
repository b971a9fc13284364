"""Tests for the CredentialHasherPort protocol."""

from __future__ import annotations

import pytest

from custodia.foundation.domain.ports import CredentialHasherPort


class _ReversingHasher:
    def hash_secret(self, secret: str) -> str:
        return "$rev$" + secret[::-1]

    def verify_secret(self, stored_hash: str, candidate: str) -> bool:
        return stored_hash == self.hash_secret(candidate)


class _Incomplete:
    def hash_secret(self, secret: str) -> str:
        return secret


@pytest.mark.unit
class TestCredentialHasherPort:
    def test_structural_implementation_matches(self) -> None:
        assert isinstance(_ReversingHasher(), CredentialHasherPort)

    def test_missing_method_does_not_match(self) -> None:
        assert not isinstance(_Incomplete(), CredentialHasherPort)

    def test_argon2_hasher_implements_port(self, fast_hasher: CredentialHasherPort) -> None:
        assert isinstance(fast_hasher, CredentialHasherPort)
