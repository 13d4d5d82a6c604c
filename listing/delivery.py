"""
Delivery — per-country delivery charge / minimum order rows (step 4).

Country names are resolved from the reference list when a row is added and
stored on the row; later reference changes do not touch existing rows.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from kungfu import Option, Some, Nothing

from listing._types import IdGenerator
from listing.catalog import Country, country_name
from listing.draft import Step4, DeliveryCountry


def add_delivery_country(
    step4: Step4,
    *,
    country_code: str,
    delivery_charge: float = 0.0,
    min_order_qty: int = 1,
    countries: Sequence[Country] = (),
    ids: IdGenerator,
) -> Option[tuple[Step4, DeliveryCountry]]:
    """
    Append a delivery row for ``country_code``.

    Nothing when the code is empty or already listed, the charge is
    negative or the minimum order quantity is below 1.
    """
    code = country_code.strip().upper()
    if not code or delivery_charge < 0 or min_order_qty < 1:
        return Nothing()
    if has_country(step4, code):
        return Nothing()
    row = DeliveryCountry(
        id=ids(),
        country_code=code,
        country_name=country_name(countries, code),
        delivery_charge=delivery_charge,
        min_order_qty=min_order_qty,
    )
    return Some((replace(step4, delivery_countries=(*step4.delivery_countries, row)), row))


def remove_delivery_country(step4: Step4, row_id: str) -> Step4:
    return replace(
        step4,
        delivery_countries=tuple(d for d in step4.delivery_countries if d.id != row_id),
    )


def has_country(step4: Step4, country_code: str) -> bool:
    code = country_code.strip().upper()
    return any(d.country_code.upper() == code for d in step4.delivery_countries)


__all__ = ("add_delivery_country", "remove_delivery_country", "has_country")
