"""
Tests for mapping Stack Exchange profile responses.
"""

import json

import pytest

from stackexchange_oauth.core.exceptions import DecodeError, EmptyProfileError
from stackexchange_oauth.providers.stackexchange.profile import (
    ProfileFields,
    map_profile,
)


class TestMapProfile:
    """Tests for map_profile."""

    def test_sample_body(self, sample_profile_body):
        """Test the sample response maps to canonical fields."""
        fields = map_profile(json.dumps(sample_profile_body).encode())

        assert fields == ProfileFields(
            name="Ada",
            first_name="Ada",
            last_name="L",
            nick_name="Ada",
            email="a@b.com",
            description="bio",
            avatar_url="http://p",
            user_id="42",
            location="NY",
        )

    def test_accepts_str(self, sample_profile_body):
        """Test a decoded string body is accepted."""
        fields = map_profile(json.dumps(sample_profile_body))

        assert fields.user_id == "42"

    def test_only_first_item_used(self, sample_profile_body):
        """Test later items are ignored."""
        sample_profile_body["items"].append({"user_id": 7, "display_name": "Bob"})

        fields = map_profile(json.dumps(sample_profile_body))

        assert fields.user_id == "42"
        assert fields.name == "Ada"

    def test_missing_fields_default_to_empty(self):
        """Test absent and null fields become empty strings."""
        fields = map_profile('{"items": [{"user_id": 9, "email": null}]}')

        assert fields.user_id == "9"
        assert fields.email == ""
        assert fields.name == ""
        assert fields.location == ""

    def test_missing_user_id(self):
        """Test a missing user ID maps to "0"."""
        fields = map_profile('{"items": [{"display_name": "Ada"}]}')

        assert fields.user_id == "0"
        assert fields.nick_name == "Ada"

    def test_empty_items(self):
        """Test an empty items list raises EmptyProfileError."""
        with pytest.raises(EmptyProfileError):
            map_profile('{"items": []}')

    def test_missing_items(self):
        """Test a response without items raises EmptyProfileError."""
        with pytest.raises(EmptyProfileError):
            map_profile('{"quota_remaining": 299}')

    def test_null_items(self):
        """Test a null items list raises EmptyProfileError."""
        with pytest.raises(EmptyProfileError):
            map_profile('{"items": null}')

    def test_null_item_defaults(self):
        """Test a null first item maps to default fields."""
        fields = map_profile('{"items": [null]}')

        assert fields == ProfileFields(user_id="0")

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"",
            b'{"items": {"user_id": 1}}',
            b'{"items": [{"user_id": "abc"}]}',
            b'{"items": [{"user_id": "42"}]}',
            b'{"items": [{"user_id": true}]}',
            b'{"items": [{"user_id": 4.5}]}',
        ],
    )
    def test_malformed(self, data):
        """Test malformed bodies raise DecodeError."""
        with pytest.raises(DecodeError):
            map_profile(data)
