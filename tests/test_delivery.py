from __future__ import annotations

from listing import delivery as DL
from listing._types import IdGenerator
from listing.catalog import Country
from listing.draft import Step4

from _support import some_value, is_nothing

COUNTRIES = (Country("1", "US", "United States", "USD"), Country("2", "IN", "India", "INR"))


def test_add_resolves_country_name(ids: IdGenerator) -> None:
    step4, row = some_value(
        DL.add_delivery_country(Step4(), country_code="us", delivery_charge=12.5, countries=COUNTRIES, ids=ids)
    )
    assert (row.country_code, row.country_name, row.min_order_qty) == ("US", "United States", 1)
    assert step4.delivery_countries == (row,)


def test_duplicate_country_refused(ids: IdGenerator) -> None:
    step4, _ = some_value(DL.add_delivery_country(Step4(), country_code="US", countries=COUNTRIES, ids=ids))
    assert is_nothing(DL.add_delivery_country(step4, country_code="US", delivery_charge=3, ids=ids))
    assert len(step4.delivery_countries) == 1


def test_bad_rows_refused(ids: IdGenerator) -> None:
    assert is_nothing(DL.add_delivery_country(Step4(), country_code="", ids=ids))
    assert is_nothing(DL.add_delivery_country(Step4(), country_code="IN", delivery_charge=-1, ids=ids))
    assert is_nothing(DL.add_delivery_country(Step4(), country_code="IN", min_order_qty=0, ids=ids))


def test_unknown_code_uses_code_as_name(ids: IdGenerator) -> None:
    _, row = some_value(DL.add_delivery_country(Step4(), country_code="NZ", countries=COUNTRIES, ids=ids))
    assert row.country_name == "NZ"


def test_remove(ids: IdGenerator) -> None:
    step4, row = some_value(DL.add_delivery_country(Step4(), country_code="US", ids=ids))
    step4 = DL.remove_delivery_country(step4, row.id)
    assert not DL.has_country(step4, "US")
