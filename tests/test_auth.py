import base64

import pytest

from zendesk_sdk import APITokenAuth, BearerAuth, PasswordAuth
from zendesk_sdk.auth import to_header_value


def _decode_basic(value: str) -> str:
    assert value.startswith("Basic ")
    return base64.b64decode(value[len("Basic "):]).decode("utf-8")


class TestAuthenticators:
    """Test Authorization header rendering."""

    def test_api_token_header(self):
        """API token credentials are basic-encoded as email/token:token."""
        auth = APITokenAuth("agent@acme.com", "abc123")

        assert _decode_basic(auth.to_header_value()) == "agent@acme.com/token:abc123"
        assert auth.auth_type == "api-token"

    def test_password_header(self):
        """Password credentials are basic-encoded as email:password."""
        auth = PasswordAuth("agent@acme.com", "hunter2")

        assert _decode_basic(auth.to_header_value()) == "agent@acme.com:hunter2"
        assert auth.auth_type == "password"

    def test_bearer_header_is_not_encoded(self):
        """Bearer tokens are sent verbatim."""
        auth = BearerAuth("oauth-token")

        assert auth.to_header_value() == "Bearer oauth-token"
        assert auth.get_auth_headers() == {"Authorization": "Bearer oauth-token"}

    def test_header_is_stable_across_calls(self):
        """The same credential always renders the same header."""
        auth = APITokenAuth("agent@acme.com", "abc123")

        assert auth.to_header_value() == auth.to_header_value()
        assert to_header_value(auth) == auth.to_header_value()

    def test_known_encoding(self):
        """Header matches a precomputed value."""
        auth = PasswordAuth("user@example.com", "pass")

        assert auth.to_header_value() == "Basic dXNlckBleGFtcGxlLmNvbTpwYXNz"

    def test_credentials_are_immutable(self):
        """Credentials cannot be changed after construction."""
        auth = BearerAuth("oauth-token")

        with pytest.raises(AttributeError):
            auth.token = "other"

    def test_equality_and_hash(self):
        """Equal credentials compare and hash equal."""
        assert APITokenAuth("a@b.c", "t") == APITokenAuth("a@b.c", "t")
        assert hash(APITokenAuth("a@b.c", "t")) == hash(APITokenAuth("a@b.c", "t"))
        assert APITokenAuth("a@b.c", "t") != PasswordAuth("a@b.c", "t")

    def test_repr_masks_secrets(self):
        """Secrets never appear in repr."""
        assert "abc123" not in repr(APITokenAuth("agent@acme.com", "abc123"))
        assert "hunter2" not in repr(PasswordAuth("agent@acme.com", "hunter2"))
        assert "oauth-token" not in repr(BearerAuth("oauth-token"))
