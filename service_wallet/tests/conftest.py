"""
Shared fixtures for Wallet service tests.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from shared.config import WalletConfig
from service_wallet.app.credentials import ServiceCredential

ISSUER_ID = "3388000000022859545"
CLIENT_EMAIL = "wallet-issuer@bonus-cart.iam.gserviceaccount.com"


@pytest.fixture(scope="session")
def rsa_key():
    """Throwaway RSA key pair for signing tests."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key):
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(scope="session")
def public_key_pem(rsa_key):
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


@pytest.fixture
def credential(private_key_pem):
    return ServiceCredential(client_email=CLIENT_EMAIL, private_key=private_key_pem)


@pytest.fixture
def key_file(tmp_path, private_key_pem):
    """Service-account key document on disk."""
    path = tmp_path / "service-account.json"
    path.write_text(json.dumps({
        "type": "service_account",
        "client_email": CLIENT_EMAIL,
        "private_key": private_key_pem,
        "token_uri": "https://oauth2.googleapis.com/token",
    }), encoding="utf-8")
    return path


@pytest.fixture
def wallet_config(key_file):
    return WalletConfig(
        issuer_id=ISSUER_ID,
        class_suffix="weberia_bonus_loyalty",
        service_account_file=str(key_file),
        env="test",
    )


@pytest.fixture
def mock_wallet_client():
    """Wallet client double with every operation succeeding."""
    client = MagicMock()
    client.fetch_class_info = AsyncMock(return_value={
        "id": f"{ISSUER_ID}.weberia_bonus_loyalty",
        "programName": "Weberia Bonus",
        "reviewStatus": "APPROVED",
    })
    client.create_object = AsyncMock(return_value={
        "id": f"{ISSUER_ID}.u1",
        "classId": f"{ISSUER_ID}.weberia_bonus_loyalty",
        "state": "ACTIVE",
    })
    client.update_balance = AsyncMock(return_value={
        "id": f"{ISSUER_ID}.u1",
        "loyaltyPoints": {"balance": {"string": "75 Bonus"}},
    })
    client.delete_object = AsyncMock(return_value={"message": "Kart uğurla silindi!"})
    client.close = AsyncMock()
    return client
