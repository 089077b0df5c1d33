"""
Request bodies for loyalty objects on the issuer API.
"""

from dataclasses import dataclass
from typing import Any, Dict

BARCODE_TYPE = "CODE_128"
BACKGROUND_MODULE_ID = "IMAGE_MODULE_ID"


@dataclass(frozen=True)
class CardStyle:
    """Fixed visual assets applied to every card."""

    background_color: str
    logo_uri: str
    background_image_uri: str


def object_id(issuer_id: str, user_id: str) -> str:
    """Object reference for a user's card: ``{issuer_id}.{user_id}``."""
    return f"{issuer_id}.{user_id}"


def format_balance(balance: Any) -> str:
    """Balance as shown on the card, e.g. ``"50 Bonus"``."""
    return f"{balance} Bonus"


def build_loyalty_object(
    *,
    issuer_id: str,
    class_id: str,
    user_id: str,
    user_name: str,
    card_number: str,
    bonus_balance: Any,
    style: CardStyle,
) -> Dict[str, Any]:
    """Assemble the insert body for a new loyalty object."""
    return {
        "id": object_id(issuer_id, user_id),
        "classId": class_id,
        "state": "active",
        "accountId": card_number,
        "accountName": user_name,
        "barcode": {"type": BARCODE_TYPE, "value": card_number},
        "loyaltyPoints": {"balance": {"string": format_balance(bonus_balance)}},
        "hexBackgroundColor": style.background_color,
        "imageModulesData": [
            {
                "mainImage": {
                    "sourceUri": {"uri": style.background_image_uri},
                    "contentDescription": {
                        "defaultValue": {
                            "language": "en-US",
                            "value": "Background Image",
                        }
                    },
                },
                "id": BACKGROUND_MODULE_ID,
            }
        ],
        "logo": {"sourceUri": {"uri": style.logo_uri}},
    }


def build_balance_patch(new_balance: Any) -> Dict[str, Any]:
    """Patch body touching only the points balance."""
    return {"loyaltyPoints": {"balance": {"string": format_balance(new_balance)}}}
