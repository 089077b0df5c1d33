"""
OAuth access tokens for the issuer API via the service-account JWT bearer flow.
"""

import asyncio
from typing import Optional, Sequence

from google.auth import crypt
from google.auth.transport.requests import Request as GoogleAuthRequest
from google.oauth2 import service_account

from shared.logging import get_logger
from ..credentials import ServiceCredential

WALLET_ISSUER_SCOPE = "https://www.googleapis.com/auth/wallet_object.issuer"


class ServiceAccountTokenProvider:
    """Hands out a cached bearer token, refreshing it when expired."""

    def __init__(self, credential: ServiceCredential, scopes: Sequence[str] = (WALLET_ISSUER_SCOPE,)):
        self.credential = credential
        self.scopes = list(scopes)
        self.logger = get_logger("wallet.google_auth")

        self._google_credentials: Optional[service_account.Credentials] = None
        self._lock = asyncio.Lock()

    def _build_credentials(self) -> service_account.Credentials:
        signer = crypt.RSASigner.from_string(self.credential.private_key)
        return service_account.Credentials(
            signer,
            self.credential.client_email,
            self.credential.token_uri,
            scopes=self.scopes,
        )

    async def get_token(self) -> str:
        """Return a valid access token for the configured scopes."""
        async with self._lock:
            if self._google_credentials is None:
                self._google_credentials = self._build_credentials()

            if not self._google_credentials.valid:
                # google-auth refresh is blocking I/O
                await asyncio.to_thread(self._google_credentials.refresh, GoogleAuthRequest())
                self.logger.info(
                    "Access token refreshed",
                    client_email=self.credential.client_email,
                    expiry=str(self._google_credentials.expiry)
                )

            return self._google_credentials.token
