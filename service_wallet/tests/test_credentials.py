"""
Unit tests for service-account credential loading.
"""

import json

import pytest

from service_wallet.app.credentials import (
    GOOGLE_TOKEN_URI,
    ServiceCredential,
    load_or_exit,
    load_service_credential,
)
from shared.errors import CredentialError

from conftest import CLIENT_EMAIL


class TestLoadServiceCredential:
    """Test cases for load_service_credential."""

    def test_loads_valid_document(self, key_file, private_key_pem):
        """Test a complete key document is parsed."""
        credential = load_service_credential(key_file)

        assert credential.client_email == CLIENT_EMAIL
        assert credential.private_key == private_key_pem
        assert credential.token_uri == GOOGLE_TOKEN_URI

    def test_token_uri_defaults_when_absent(self, tmp_path):
        """Test documents without token_uri fall back to Google's endpoint."""
        path = tmp_path / "key.json"
        path.write_text(json.dumps({"client_email": "a@b.c", "private_key": "pem"}))

        credential = load_service_credential(str(path))

        assert credential.token_uri == GOOGLE_TOKEN_URI

    def test_missing_file(self, tmp_path):
        """Test an absent file is rejected."""
        with pytest.raises(CredentialError) as exc_info:
            load_service_credential(tmp_path / "nope.json")

        assert exc_info.value.code == "CREDENTIAL_ERROR"
        assert "not found" in exc_info.value.message

    def test_invalid_json(self, tmp_path):
        """Test a file that is not JSON is rejected."""
        path = tmp_path / "key.json"
        path.write_text("{not json")

        with pytest.raises(CredentialError, match="unreadable"):
            load_service_credential(path)

    def test_non_object_document(self, tmp_path):
        """Test a JSON array is rejected."""
        path = tmp_path / "key.json"
        path.write_text("[]")

        with pytest.raises(CredentialError, match="JSON object"):
            load_service_credential(path)

    def test_missing_fields(self, tmp_path):
        """Test missing client_email/private_key are reported."""
        path = tmp_path / "key.json"
        path.write_text(json.dumps({"client_email": "", "type": "service_account"}))

        with pytest.raises(CredentialError) as exc_info:
            load_service_credential(path)

        assert exc_info.value.details["missing"] == ["client_email", "private_key"]

    def test_repr_hides_private_key(self, credential):
        """Test the private key never shows up in repr."""
        assert "PRIVATE KEY" not in repr(credential)

    def test_credential_is_immutable(self, credential):
        """Test credentials cannot be mutated after loading."""
        with pytest.raises(Exception):
            credential.client_email = "other@example.com"


class TestLoadOrExit:
    """Test cases for the fail-fast startup loader."""

    def test_returns_credential(self, key_file):
        """Test a valid file is returned unchanged."""
        assert isinstance(load_or_exit(key_file), ServiceCredential)

    def test_exits_when_missing(self, tmp_path, capsys):
        """Test a missing file terminates with status 1 and a console message."""
        with pytest.raises(SystemExit) as exc_info:
            load_or_exit(tmp_path / "missing.json")

        assert exc_info.value.code == 1
        assert "ERROR" in capsys.readouterr().err
