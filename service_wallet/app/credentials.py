"""
Service-account credential loading for the Wallet service.

The key document is read exactly once, when the application is built. A
missing or unusable document stops the process: none of the routes can do
anything useful without it.
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from shared.errors import CredentialError
from shared.logging import get_logger

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

logger = get_logger("wallet.credentials")


@dataclass(frozen=True)
class ServiceCredential:
    """Issuer service-account identity and signing key."""

    client_email: str
    private_key: str
    token_uri: str = GOOGLE_TOKEN_URI

    def __repr__(self) -> str:
        return f"ServiceCredential(client_email={self.client_email!r})"


def load_service_credential(path: Union[str, Path]) -> ServiceCredential:
    """Read and validate a service-account JSON key document."""
    path = Path(path)
    if not path.is_file():
        raise CredentialError(
            "Service account key file not found",
            details={"path": str(path)}
        )

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise CredentialError(
            f"Service account key file is unreadable: {e}",
            details={"path": str(path)}
        )

    if not isinstance(document, dict):
        raise CredentialError(
            "Service account key file must contain a JSON object",
            details={"path": str(path)}
        )

    missing = [key for key in ("client_email", "private_key") if not document.get(key)]
    if missing:
        raise CredentialError(
            f"Service account key file is missing: {', '.join(missing)}",
            details={"path": str(path), "missing": missing}
        )

    return ServiceCredential(
        client_email=document["client_email"],
        private_key=document["private_key"],
        token_uri=document.get("token_uri") or GOOGLE_TOKEN_URI,
    )


def load_or_exit(path: Union[str, Path]) -> ServiceCredential:
    """Load the credential or terminate the process with status 1."""
    try:
        credential = load_service_credential(path)
    except CredentialError as e:
        logger.critical("Service account credential unavailable", error=e.message, **e.details)
        print(f"ERROR: {e.message} ({path})", file=sys.stderr)
        raise SystemExit(1)

    logger.info("Service account credential loaded", client_email=credential.client_email)
    return credential
