"""
Optional shared-secret protection for the wallet routes.
"""

import hmac
from typing import Callable, Optional

from fastapi import Header

from shared.errors import AuthenticationError

API_KEY_HEADER = "X-API-Key"


def api_key_guard(expected_key: Optional[str]) -> Callable:
    """Build a dependency that checks the ``X-API-Key`` header.

    With no key configured the routes stay open.
    """

    async def require_api_key(x_api_key: Optional[str] = Header(default=None, alias=API_KEY_HEADER)) -> None:
        if not expected_key:
            return
        if not x_api_key or not hmac.compare_digest(x_api_key.encode("utf-8"), expected_key.encode("utf-8")):
            raise AuthenticationError(
                "Missing or invalid API key",
                details={"header": API_KEY_HEADER}
            )

    return require_api_key
