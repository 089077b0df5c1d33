"""
Loyalty Wallet Service package.

The wallet service fronts the Google Wallet issuer API, letting a calling
application:
- Create, update and delete a user's loyalty card object
- Read the pre-provisioned loyalty class definition
- Obtain a signed "save to wallet" link for a user

Structure:
- app.main: FastAPI app, routes, and dependency wiring.
- app.credentials: Service-account key loading (fail-fast at startup).
- app.adapters: Issuer API client and OAuth token provider.
- app.cards: Object reference derivation and request payload builders.
- app.links: Signed save-to-wallet link generation.
- app.security: Optional API-key guard for the service's own routes.
"""
