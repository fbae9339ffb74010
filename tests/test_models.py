"""Tests for request models."""

import pytest

from pocket_client.errors import ValidationError
from pocket_client.models import AddInput, AddRequest


class TestAddInput:
    def test_generate_request_keeps_fields(self, add_input):
        req = add_input.generate_request("key")

        assert req == AddRequest(
            url="http://example.link",
            title="example",
            tags="qwe,rty,123",
            access_token="token",
            consumer_key="key",
        )

    def test_url_sent_unescaped(self):
        item = AddInput(url="http://example.link/?a=1&b=2", access_token="token")
        assert item.generate_request("key").url == "http://example.link/?a=1&b=2"

    def test_single_tag(self):
        item = AddInput(url="u", tags=["solo"], access_token="token")
        assert item.generate_request("key").tags == "solo"

    def test_no_tags(self):
        item = AddInput(url="u", access_token="token")
        assert item.generate_request("key").tags == ""

    def test_validate_ok(self, add_input):
        add_input.validate()

    def test_url_checked_before_token(self):
        with pytest.raises(ValidationError) as exc_info:
            AddInput().validate()
        assert exc_info.value.kind == ValidationError.MISSING_URL

    def test_missing_token(self):
        with pytest.raises(ValidationError, match="access token is empty"):
            AddInput(url="http://example.link").validate()

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            AddInput().validate()


class TestAddRequest:
    def test_payload_omits_empty_title_and_tags(self):
        req = AddInput(url="u", access_token="token").generate_request("key")

        assert req.to_payload() == {
            "url": "u",
            "access_token": "token",
            "consumer_key": "key",
        }

    def test_payload_full(self, add_input):
        payload = add_input.generate_request("key").to_payload()

        assert payload == {
            "url": "http://example.link",
            "title": "example",
            "tags": "qwe,rty,123",
            "access_token": "token",
            "consumer_key": "key",
        }
