"""
Google Wallet issuer API client for the Wallet service.
"""

import time
from typing import Any, Dict, Optional

import httpx

from shared.errors import ExternalServiceError
from shared.logging import get_logger
from shared.metrics import MetricsCollector
from ..cards.payloads import CardStyle, object_id, build_loyalty_object, build_balance_patch
from .google_auth import ServiceAccountTokenProvider

DELETED_MESSAGE = "Kart uğurla silindi!"


class WalletClient:
    """Client for the loyalty class/object resources of the issuer API.

    Every public operation returns either the upstream response body or an
    ``{"error": message}`` descriptor. Failures are logged and reported,
    never retried.
    """

    def __init__(
        self,
        wallet_api_url: str,
        issuer_id: str,
        class_id: str,
        style: CardStyle,
        token_provider: ServiceAccountTokenProvider,
        *,
        http_timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[MetricsCollector] = None,
    ) -> None:
        self.wallet_api_url = wallet_api_url.rstrip("/")
        self.issuer_id = issuer_id
        self.class_id = class_id
        self.style = style
        self.token_provider = token_provider
        self.metrics = metrics
        self.logger = get_logger("wallet.wallet_client")

        self._client = http_client or httpx.AsyncClient(timeout=http_timeout)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def fetch_class_info(self) -> Optional[Dict[str, Any]]:
        """Fetch the pre-provisioned loyalty class, or None if unavailable."""
        try:
            data = await self._request("get_class", "GET", f"/loyaltyClass/{self.class_id}")
        except Exception as e:
            self.logger.error("Loyalty class lookup failed", class_id=self.class_id, error=str(e))
            return None

        self.logger.info("Loyalty class fetched", class_id=self.class_id)
        return data

    async def create_object(
        self,
        user_id: str,
        user_name: str,
        card_number: str,
        bonus_balance: Any,
    ) -> Dict[str, Any]:
        """Insert a new loyalty object for the user."""
        body = build_loyalty_object(
            issuer_id=self.issuer_id,
            class_id=self.class_id,
            user_id=user_id,
            user_name=user_name,
            card_number=card_number,
            bonus_balance=bonus_balance,
            style=self.style,
        )

        try:
            data = await self._request("insert_object", "POST", "/loyaltyObject", json=body)
        except Exception as e:
            self.logger.error("Loyalty object creation failed", object_id=body["id"], error=str(e))
            return {"error": str(e)}

        self.logger.info("Loyalty object created", object_id=body["id"])
        return data

    async def update_balance(self, user_id: str, new_balance: Any) -> Dict[str, Any]:
        """Patch the points balance of the user's loyalty object."""
        resource_id = object_id(self.issuer_id, user_id)

        try:
            data = await self._request(
                "patch_object",
                "PATCH",
                f"/loyaltyObject/{resource_id}",
                json=build_balance_patch(new_balance),
            )
        except Exception as e:
            self.logger.error("Loyalty balance update failed", object_id=resource_id, error=str(e))
            return {"error": str(e)}

        self.logger.info("Loyalty balance updated", object_id=resource_id)
        return data

    async def delete_object(self, user_id: str) -> Dict[str, Any]:
        """Delete the user's loyalty object."""
        resource_id = object_id(self.issuer_id, user_id)

        try:
            await self._request("delete_object", "DELETE", f"/loyaltyObject/{resource_id}")
        except Exception as e:
            self.logger.error("Loyalty object deletion failed", object_id=resource_id, error=str(e))
            return {"error": str(e)}

        self.logger.info("Loyalty object deleted", object_id=resource_id)
        return {"message": DELETED_MESSAGE}

    async def _request(self, operation: str, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Send an authenticated request and return the decoded body."""
        start_time = time.time()
        outcome = "error"
        try:
            token = await self.token_provider.get_token()
            response = await self._client.request(
                method,
                f"{self.wallet_api_url}{path}",
                headers={"Authorization": f"Bearer {token}"},
                **kwargs
            )

            if response.is_error:
                raise ExternalServiceError(
                    "wallet_api",
                    _error_message(response),
                    details={"status_code": response.status_code, "operation": operation}
                )

            outcome = "success"
            if not response.content:
                return {}
            return response.json()
        finally:
            if self.metrics:
                self.metrics.increment_counter("wallet_api_calls_total", operation=operation, outcome=outcome)
                self.metrics.observe_histogram(
                    "wallet_api_call_duration_seconds",
                    time.time() - start_time,
                    operation=operation
                )


def _error_message(response: httpx.Response) -> str:
    """Extract the issuer API's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error

    return f"Request failed with status code {response.status_code}"
