from __future__ import annotations

import pytest

from listing import pricing as P
from listing.draft import Step4


def test_breakdown_for_indian_listing() -> None:
    step4 = Step4(country_code="IN", mrp=1000, selling_price=750, gst_rate=18, platform_fee=7.5, commission=0.5)

    b = P.breakdown(step4)

    assert b.discount_percent == 25
    assert b.platform_fee_amount == pytest.approx(56.25)
    assert b.commission_amount == pytest.approx(3.75)
    assert b.gst_amount == pytest.approx(135.0)
    assert b.seller_earnings == pytest.approx(555.0)


def test_earnings_plus_deductions_equal_price() -> None:
    step4 = Step4(mrp=899, selling_price=649.99, gst_rate=12, platform_fee=7.5, commission=0.5)
    b = P.breakdown(step4)
    total = b.seller_earnings + b.platform_fee_amount + b.commission_amount + b.gst_amount
    assert total == pytest.approx(649.99)


def test_discount_is_zero_without_mrp() -> None:
    assert P.discount_percent(0, 0) == 0
    assert P.discount_percent(0, 50) == 0


@pytest.mark.parametrize(
    ("mrp", "price", "expected"),
    [
        (8, 7, 13),         # 12.5 rounds up
        (1000, 1000, 0),
        (300, 200, 33),
        (300, 100, 67),
    ],
)
def test_discount_rounds_half_up(mrp: float, price: float, expected: int) -> None:
    assert P.discount_percent(mrp, price) == expected


def test_gst_table_lookup() -> None:
    assert P.gst_rate_for("IN", 15) == 18
    assert P.gst_rate_for("us", 15) == 0
    assert P.gst_rate_for("ZZ", 15) == 15


class TestApplyChanges:
    def test_selling_price_clamped_to_mrp(self) -> None:
        step4 = P.apply_changes(Step4(), {"mrp": 500, "selling_price": 800})
        assert step4.selling_price == 500

    def test_negative_price_clamped_to_zero(self) -> None:
        step4 = P.apply_changes(Step4(mrp=100, selling_price=50), {"selling_price": -5})
        assert step4.selling_price == 0

    def test_lowering_mrp_pulls_price_down(self) -> None:
        step4 = P.apply_changes(Step4(mrp=1000, selling_price=750), {"mrp": 600})
        assert step4.selling_price == 600

    def test_country_switch_suggests_gst(self) -> None:
        step4 = P.apply_changes(Step4(), {"country_code": "in"})
        assert step4.country_code == "IN"
        assert step4.gst_rate == 18

        step4 = P.apply_changes(step4, {"country_code": "GB"})
        assert step4.gst_rate == 20

    def test_unknown_country_uses_default_rate(self) -> None:
        step4 = P.apply_changes(Step4(), {"country_code": "ZZ"})
        assert step4.gst_rate == 15

    def test_manual_gst_survives_country_switch(self) -> None:
        step4 = P.apply_changes(Step4(), {"country_code": "IN"})
        step4 = P.apply_changes(step4, {"gst_rate": 12})
        step4 = P.apply_changes(step4, {"country_code": "GB"})
        assert step4.gst_rate == 12

    def test_explicit_gst_with_country_wins(self) -> None:
        step4 = P.apply_changes(Step4(), {"country_code": "IN", "gst_rate": 5})
        assert step4.gst_rate == 5
