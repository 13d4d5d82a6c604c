from __future__ import annotations

import pytest

from listing import offers as O
from listing._types import IdGenerator

from _support import some_value, is_nothing


@pytest.mark.parametrize(
    ("offer_type", "fields", "text"),
    [
        ("buy_x_get_y", {}, "Buy 2 Get 1 Free"),
        ("buy_x_get_y", {"buyQuantity": 3, "getQuantity": 2}, "Buy 3 Get 2 Free"),
        ("special_day", {"specialDayName": "Diwali", "discountPercent": 30}, "Diwali - 30% OFF"),
        ("hourly", {"start_time": "10:00", "end_time": "12:00", "discount_percent": 12.5}, "10:00 - 12:00: 12.5% OFF"),
        ("bundle", {"bundleMinQty": 4, "bundleDiscount": 20}, "Buy 4+ Get 20% OFF"),
        ("special_day", {"specialDayName": "Diwali", "discountPercent": 33.333333}, "Diwali - 33.333333% OFF"),
        ("bundle", {"bundleMinQty": 3, "bundleDiscount": 12.345678}, "Buy 3+ Get 12.345678% OFF"),
    ],
)
def test_describe(offer_type: str, fields: dict[str, object], text: str, ids: IdGenerator) -> None:
    rule = some_value(O.make_offer(offer_type, fields, ids))
    assert O.describe(rule) == text


def test_make_offer_builds_the_tagged_type(ids: IdGenerator) -> None:
    rule = some_value(O.make_offer(O.OfferType.BUNDLE, {}, ids))
    assert isinstance(rule, O.Bundle)
    assert rule.type is O.OfferType.BUNDLE
    assert (rule.bundle_min_qty, rule.bundle_discount, rule.is_active) == (3, 15, True)


def test_irrelevant_fields_are_ignored(ids: IdGenerator) -> None:
    rule = some_value(O.make_offer("buy_x_get_y", {"bundleDiscount": 99, "startTime": "09:00"}, ids))
    assert isinstance(rule, O.BuyXGetY)


@pytest.mark.parametrize(
    ("offer_type", "fields"),
    [
        ("flash_sale", {}),
        ("special_day", {"discountPercent": 150}),
        ("buy_x_get_y", {"buyQuantity": 0}),
        ("bundle", {"bundleMinQty": 1}),
        ("buy_x_get_y", {"buyQuantity": 2.9}),
        ("bundle", {"bundleMinQty": 3.5}),
        ("hourly", {"discountPercent": "lots"}),
    ],
)
def test_invalid_offers_are_refused(offer_type: str, fields: dict[str, object], ids: IdGenerator) -> None:
    assert is_nothing(O.make_offer(offer_type, fields, ids))


def test_toggle_twice_restores_rule(ids: IdGenerator) -> None:
    rule = some_value(O.make_offer("bundle", {}, ids))
    rules = O.add_offer((), rule)

    once = O.toggle_offer_active(rules, rule.id)
    assert once[0].is_active is False
    assert O.toggle_offer_active(once, rule.id) == rules


def test_toggle_and_remove_unknown_id_are_noops(ids: IdGenerator) -> None:
    rules = O.add_offer((), some_value(O.make_offer("bundle", {}, ids)))
    assert O.toggle_offer_active(rules, "missing") == rules
    assert O.remove_offer(rules, "missing") == rules


def test_well_formed_bounds() -> None:
    assert O.is_well_formed(O.Bundle("x", 2, 10))
    assert not O.is_well_formed(O.Bundle("x", 1, 10))
    assert not O.is_well_formed(O.SpecialDay("y", "Sale", 101))
