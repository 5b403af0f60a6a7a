"""Tests for the error taxonomy and API key errors."""

import pytest

from vultr_lb.core.exceptions import (
    NotFoundError,
    RemoteError,
    ServerError,
    UnauthorizedError,
    ValidationError,
    VultrAPIKeyError,
    VultrError,
)


class TestRemoteError:
    @pytest.mark.parametrize(
        "status,error_class",
        [
            (400, ValidationError),
            (401, UnauthorizedError),
            (403, UnauthorizedError),
            (404, NotFoundError),
            (422, ValidationError),
            (429, RemoteError),
            (503, ServerError),
        ],
    )
    def test_from_status(self, status, error_class):
        error = RemoteError.from_status(status, "boom")

        assert type(error) is error_class
        assert isinstance(error, VultrError)

    def test_message_verbatim(self):
        error = RemoteError.from_status(404, "Invalid load balancer ID", {"path": "/x"})

        assert error.message == "Invalid load balancer ID"
        assert str(error) == "HTTP 404: Invalid load balancer ID"
        assert error.details == {"path": "/x"}
        assert error.is_not_found

    def test_not_not_found(self):
        assert not RemoteError.from_status(400, "bad").is_not_found


class TestVultrAPIKeyError:
    def test_default_message(self):
        message = str(VultrAPIKeyError())

        assert "VULTR_API_KEY" in message
        assert "export VULTR_API_KEY" in message
        assert "credentials.toml" in message

    def test_custom_message(self):
        assert str(VultrAPIKeyError("custom")) == "custom"
