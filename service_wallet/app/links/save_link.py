"""
Signed "save to wallet" links.
"""

import time
from typing import Any, Dict, Optional, Union

import jwt

from shared.logging import get_logger
from ..cards.payloads import object_id
from ..credentials import ServiceCredential

SAVE_URL_PREFIX = "https://pay.google.com/gp/v/save/"
TOKEN_AUDIENCE = "google"
TOKEN_TYPE = "savetowallet"
SIGNING_ALGORITHM = "RS256"


class SaveLinkGenerator:
    """Builds RS256-signed save-to-wallet URLs for loyalty objects."""

    def __init__(
        self,
        credential: ServiceCredential,
        issuer_id: str,
        save_url_prefix: str = SAVE_URL_PREFIX,
    ):
        self.credential = credential
        self.issuer_id = issuer_id
        self.save_url_prefix = save_url_prefix
        self.logger = get_logger("wallet.save_link")

    def build_claims(self, user_id: str, issued_at: Optional[int] = None) -> Dict[str, Any]:
        """Claims for a token referencing the user's loyalty object."""
        if issued_at is None:
            issued_at = int(time.time())

        return {
            "iss": self.credential.client_email,
            "aud": TOKEN_AUDIENCE,
            "typ": TOKEN_TYPE,
            "iat": issued_at,
            "payload": {
                "loyaltyObjects": [{"id": object_id(self.issuer_id, user_id)}]
            },
        }

    def sign(self, user_id: str, issued_at: Optional[int] = None) -> str:
        """Sign the claims with the service-account key."""
        claims = self.build_claims(user_id, issued_at)
        return jwt.encode(claims, self.credential.private_key, algorithm=SIGNING_ALGORITHM)

    def generate(self, user_id: str, issued_at: Optional[int] = None) -> Union[str, Dict[str, str]]:
        """Return the save URL, or ``{"error": message}`` if signing fails."""
        try:
            token = self.sign(user_id, issued_at)
        except Exception as e:
            self.logger.error(
                "Save link signing failed",
                object_id=object_id(self.issuer_id, user_id),
                error=str(e)
            )
            return {"error": str(e)}

        self.logger.info("Save link generated", object_id=object_id(self.issuer_id, user_id))
        return f"{self.save_url_prefix}{token}"
