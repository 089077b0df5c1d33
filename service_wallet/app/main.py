"""
Wallet service: loyalty cards on the Google Wallet issuer platform.
"""

from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from shared.base_service import BaseService
from shared.config import WalletConfig, get_wallet_config
from shared.logging import set_user_context
from .adapters import ServiceAccountTokenProvider, WalletClient
from .cards import CardStyle
from .credentials import ServiceCredential, load_or_exit
from .links import SaveLinkGenerator
from .security import api_key_guard

CARD_CREATED_MESSAGE = "Kart yaradıldı!"
MISSING_CARD_PARAMS = "Bütün parametrləri daxil et!"
MISSING_BONUS_PARAMS = "userId və newBonusBalance daxil edilməlidir!"
MISSING_USER_ID = "userId daxil edilməlidir!"


class WalletService(BaseService):
    """Wallet service implementation.

    Collaborators are passed in explicitly; anything left out is built from
    the config, loading the service-account key from disk.
    """

    def __init__(
        self,
        config: Optional[WalletConfig] = None,
        credential: Optional[ServiceCredential] = None,
        wallet_client: Optional[WalletClient] = None,
        link_generator: Optional[SaveLinkGenerator] = None,
    ):
        config = config or get_wallet_config()
        super().__init__(config.service_name, config.port, config=config)

        self.credential = credential or load_or_exit(config.service_account_file)
        self.link_generator = link_generator or SaveLinkGenerator(
            self.credential,
            config.issuer_id,
            config.save_url_prefix,
        )
        self.wallet_client = wallet_client or WalletClient(
            config.wallet_api_url,
            config.issuer_id,
            config.class_id,
            CardStyle(
                background_color=config.background_color,
                logo_uri=config.logo_uri,
                background_image_uri=config.background_image_uri,
            ),
            ServiceAccountTokenProvider(self.credential),
            http_timeout=config.http_timeout,
            metrics=self.metrics,
        )

        self._setup_wallet_routes()

    async def _on_shutdown(self):
        await self.wallet_client.close()
        await super()._on_shutdown()

    async def _check_dependencies(self) -> Dict[str, str]:
        return {
            "credential": "loaded",
            "wallet_api": self.config.wallet_api_url,
        }

    def _respond(self, body: Any, failed: bool, status_code: int) -> Any:
        """Plain 200 body, or a status-coded response in strict mode."""
        if failed and self.config.strict_status_codes:
            return JSONResponse(status_code=status_code, content=body)
        return body

    def _missing(self, message: str) -> Any:
        self.metrics.record_error("MISSING_PARAMETER")
        return self._respond({"error": message}, True, 400)

    def _save_link(self, user_id: str) -> Union[str, Dict[str, str]]:
        link = self.link_generator.generate(user_id)
        outcome = "error" if isinstance(link, dict) else "success"
        self.metrics.increment_counter("save_links_total", outcome=outcome)
        return link

    def _setup_wallet_routes(self):
        """Set up wallet-specific routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "wallet",
                "message": "Loyalty Wallet - Wallet Service",
                "version": "1.0.0"
            }

        router = APIRouter(dependencies=[Depends(api_key_guard(self.config.api_key))])

        @router.get("/create-card")
        async def create_card(
            user_id: Optional[str] = Query(None, alias="userId"),
            user_name: Optional[str] = Query(None, alias="userName"),
            card_number: Optional[str] = Query(None, alias="cardNumber"),
            bonus_balance: Optional[str] = Query(None, alias="bonusBalance"),
        ):
            """Create a loyalty card and return its save-to-wallet link."""
            if not (user_id and user_name and card_number and bonus_balance):
                return self._missing(MISSING_CARD_PARAMS)

            set_user_context(user_id)
            card = await self.wallet_client.create_object(user_id, user_name, card_number, bonus_balance)
            if "error" in card:
                self.metrics.record_error("WALLET_API_ERROR")
                return self._respond({"error": card["error"]}, True, 502)

            self.metrics.record_business_event("card_created")
            wallet_link = self._save_link(user_id)
            if isinstance(wallet_link, dict):
                return self._respond(wallet_link, True, 500)

            return {"message": CARD_CREATED_MESSAGE, "walletLink": wallet_link}

        @router.get("/get-class-info")
        async def get_class_info():
            """Return the loyalty class definition, or null."""
            class_info = await self.wallet_client.fetch_class_info()
            return self._respond(class_info, class_info is None, 502)

        @router.get("/update-bonus")
        async def update_bonus(
            user_id: Optional[str] = Query(None, alias="userId"),
            new_bonus_balance: Optional[str] = Query(None, alias="newBonusBalance"),
        ):
            """Set the points balance on a user's card."""
            if not (user_id and new_bonus_balance):
                return self._missing(MISSING_BONUS_PARAMS)

            set_user_context(user_id)
            result = await self.wallet_client.update_balance(user_id, new_bonus_balance)
            if "error" in result:
                self.metrics.record_error("WALLET_API_ERROR")
                return self._respond(result, True, 502)

            self.metrics.record_business_event("balance_updated")
            return result

        @router.get("/get-wallet-token")
        async def get_wallet_token(user_id: Optional[str] = Query(None, alias="userId")):
            """Return a fresh save-to-wallet link for the user."""
            if not user_id:
                return self._missing(MISSING_USER_ID)

            set_user_context(user_id)
            wallet_link = self._save_link(user_id)
            if isinstance(wallet_link, dict):
                return self._respond(wallet_link, True, 500)

            return {"walletLink": wallet_link}

        @router.get("/delete-card")
        async def delete_card(user_id: Optional[str] = Query(None, alias="userId")):
            """Delete a user's card."""
            if not user_id:
                return self._missing(MISSING_USER_ID)

            set_user_context(user_id)
            result = await self.wallet_client.delete_object(user_id)
            if "error" in result:
                self.metrics.record_error("WALLET_API_ERROR")
                return self._respond(result, True, 502)

            self.metrics.record_business_event("card_deleted")
            return result

        self.app.include_router(router)


def create_app():
    """Create FastAPI application."""
    service = WalletService()
    return service.app


def run():
    """Run the wallet service with uvicorn."""
    service = WalletService()
    service.run()


if __name__ == "__main__":
    run()
