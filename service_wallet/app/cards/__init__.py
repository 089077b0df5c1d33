"""
Loyalty card payload helpers.
"""

from .payloads import CardStyle, object_id, format_balance, build_loyalty_object, build_balance_patch

__all__ = [
    "CardStyle",
    "object_id",
    "format_balance",
    "build_loyalty_object",
    "build_balance_patch",
]
