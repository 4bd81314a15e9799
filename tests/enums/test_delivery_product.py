"""Tests for the DeliveryProduct vocabulary."""

import json

import pytest

from klara_client.enums import DeliveryProduct

EXPECTED_CODES = [
    "fast",
    "cheap",
    "bulk",
    "premium",
    "registered",
    "atpost_economy",
    "atpost_priority",
    "postag_a",
    "postag_b",
    "postag_b2",
    "postag_registered",
    "postag_aplus",
    "dpag_standard",
    "dpag_economy",
    "indpost_mail",
    "indpost_speedmail",
    "nlpost_priority",
    "dhl_europe_priority",
    "dhl_world_priority",
]


def test_catalog_contains_exactly_the_known_codes():
    """The enum is closed over the 19 wire codes."""
    assert [product.value for product in DeliveryProduct] == EXPECTED_CODES


@pytest.mark.parametrize("code", EXPECTED_CODES)
def test_known_code_is_valid(code):
    assert DeliveryProduct.is_valid(code)
    assert DeliveryProduct(code).value == code


@pytest.mark.parametrize("code", ["", "FAST", "express", "dpag", "dhl_priority"])
def test_unknown_code_is_rejected(code):
    assert not DeliveryProduct.is_valid(code)
    with pytest.raises(ValueError, match="is not a valid DeliveryProduct"):
        DeliveryProduct(code)


def test_member_lookup_by_name():
    assert DeliveryProduct["DHL_WORLD_PRIORITY"] is DeliveryProduct.DHL_WORLD_PRIORITY


def test_members_serialize_as_plain_strings():
    """Products embed in JSON payloads as their code."""
    assert json.dumps({"product": DeliveryProduct.POSTAG_B2}) == '{"product": "postag_b2"}'
