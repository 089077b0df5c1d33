"""
Unit tests for loyalty object payload builders.
"""

import pytest

from service_wallet.app.cards import (
    CardStyle,
    build_balance_patch,
    build_loyalty_object,
    format_balance,
    object_id,
)


@pytest.fixture
def style():
    return CardStyle(
        background_color="#0000FF",
        logo_uri="https://example.com/logo.png",
        background_image_uri="https://example.com/background.png",
    )


@pytest.mark.parametrize("issuer_id,user_id,expected", [
    ("3388000000022859545", "u1", "3388000000022859545.u1"),
    ("1", "user.with.dots", "1.user.with.dots"),
    ("42", "", "42."),
])
def test_object_id_is_plain_concatenation(issuer_id, user_id, expected):
    """Test object references are derived without any other transformation."""
    assert object_id(issuer_id, user_id) == expected
    assert object_id(issuer_id, user_id) == object_id(issuer_id, user_id)


def test_format_balance():
    assert format_balance("50") == "50 Bonus"
    assert format_balance(0) == "0 Bonus"


def test_build_loyalty_object(style):
    """Test the insert body carries account fields and fixed styling."""
    body = build_loyalty_object(
        issuer_id="3388000000022859545",
        class_id="3388000000022859545.weberia_bonus_loyalty",
        user_id="u1",
        user_name="Jane",
        card_number="123",
        bonus_balance="50",
        style=style,
    )

    assert body["id"] == "3388000000022859545.u1"
    assert body["classId"] == "3388000000022859545.weberia_bonus_loyalty"
    assert body["state"] == "active"
    assert body["accountId"] == "123"
    assert body["accountName"] == "Jane"
    assert body["barcode"] == {"type": "CODE_128", "value": "123"}
    assert body["loyaltyPoints"] == {"balance": {"string": "50 Bonus"}}
    assert body["hexBackgroundColor"] == "#0000FF"
    assert body["logo"] == {"sourceUri": {"uri": "https://example.com/logo.png"}}

    module = body["imageModulesData"][0]
    assert module["id"] == "IMAGE_MODULE_ID"
    assert module["mainImage"]["sourceUri"]["uri"] == "https://example.com/background.png"
    assert module["mainImage"]["contentDescription"]["defaultValue"] == {
        "language": "en-US",
        "value": "Background Image",
    }


def test_build_balance_patch_only_touches_balance():
    """Test the patch body contains nothing but the points balance."""
    assert build_balance_patch("75") == {"loyaltyPoints": {"balance": {"string": "75 Bonus"}}}


def test_public_helpers_are_documented():
    """Test every public payload helper carries a docstring."""
    for helper in (object_id, format_balance, build_loyalty_object, build_balance_patch):
        assert helper.__doc__
