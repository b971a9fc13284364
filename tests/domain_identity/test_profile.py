"""Unit tests for IdentityProfile and the claims mapping."""

from __future__ import annotations

import dataclasses
import json

import pytest

from custodia.domain.identity.profile import IdentityProfile


@pytest.mark.unit
class TestFromClaims:
    """Mapping of OIDC claims onto IdentityProfile."""

    def test_maps_all_standard_claims(self) -> None:
        claims = {
            "sub": "248289761001",
            "name": "Jane Doe",
            "preferred_username": "j.doe",
            "picture": "https://example.com/janedoe/me.jpg",
            "email": "janedoe@example.com",
            "gender": "female",
            "updated_at": 1311280970,
        }
        profile = IdentityProfile.from_claims(claims)
        assert profile.name == "Jane Doe"
        assert profile.preferred_username == "j.doe"
        assert profile.picture == "https://example.com/janedoe/me.jpg"
        assert profile.email == "janedoe@example.com"
        assert profile.gender == "female"
        assert profile.updated_at == 1311280970

    def test_absent_claims_are_unset(self) -> None:
        profile = IdentityProfile.from_claims({"sub": "248289761001"})
        assert profile == IdentityProfile()
        assert profile.name is None
        assert profile.updated_at is None

    def test_empty_string_is_distinct_from_unset(self) -> None:
        profile = IdentityProfile.from_claims({"name": "", "email": None})
        assert profile.name == ""
        assert profile.email is None

    def test_groups_never_populated(self) -> None:
        profile = IdentityProfile.from_claims({"groups": ["ops"], "name": "Jane"})
        assert profile.groups is None

    def test_wrongly_typed_claims_are_unset(self) -> None:
        profile = IdentityProfile.from_claims({"name": 42, "updated_at": "yesterday"})
        assert profile.name is None
        assert profile.updated_at is None

    def test_boolean_updated_at_is_unset(self) -> None:
        assert IdentityProfile.from_claims({"updated_at": True}).updated_at is None

    def test_float_updated_at_truncated(self) -> None:
        assert IdentityProfile.from_claims({"updated_at": 1311280970.75}).updated_at == 1311280970

    @pytest.mark.parametrize("raw", ["1e999", "-1e999", "NaN", "Infinity"])
    def test_non_finite_updated_at_is_unset(self, raw: str) -> None:
        claims = json.loads(f'{{"sub": "1", "updated_at": {raw}, "name": "Jane"}}')
        profile = IdentityProfile.from_claims(claims)
        assert profile.updated_at is None
        assert profile.name == "Jane"


@pytest.mark.unit
class TestIdentityProfile:
    def test_defaults_all_unset(self) -> None:
        profile = IdentityProfile()
        assert all(getattr(profile, f.name) is None for f in dataclasses.fields(profile))

    def test_with_groups(self) -> None:
        profile = IdentityProfile(name="Jane").with_groups(["ops", "dev"])
        assert profile.groups == ("ops", "dev")
        assert profile.name == "Jane"

    def test_with_groups_none_stays_unset(self) -> None:
        assert IdentityProfile(name="Jane").with_groups(None).groups is None

    def test_with_empty_groups_is_not_unset(self) -> None:
        assert IdentityProfile().with_groups([]).groups == ()

    def test_dict_roundtrip_preserves_unset(self, profile: IdentityProfile) -> None:
        data = profile.to_dict()
        assert data["groups"] == ["ops", "dev"]
        assert data["picture"] is None
        assert IdentityProfile.from_dict(data) == profile

    def test_immutable(self, profile: IdentityProfile) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.name = "other"  # type: ignore[misc]
