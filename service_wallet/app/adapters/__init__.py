"""
Adapters package for the Wallet Service.

Contains the HTTP client wrapper for the Google Wallet issuer API and the
service-account token provider it authenticates with. These adapters
encapsulate:

- Base URLs and request shapes
- Bearer token acquisition
- Error handling that maps upstream failures to ``{"error": message}``

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .google_auth import ServiceAccountTokenProvider, WALLET_ISSUER_SCOPE
from .wallet_client import WalletClient

__all__ = [
    "ServiceAccountTokenProvider",
    "WALLET_ISSUER_SCOPE",
    "WalletClient",
]
