"""
Listing wizard — one seller session end to end.

Level 3: listing.wizard (controller + submission rollback)
Level 2: listing.pricing / shipping / offers
Level 1: kungfu.Result
"""

from kungfu import Ok, Error, Some, Nothing

from listing.catalog import ReferenceData
from listing.draft import MediaKind, ShippingType
from listing.media import PickedFile
from listing.wizard import WizardController
from examples._infra import FakeCatalogApi, FakeProductApi, FakeStorage, banner, run


def photos(count: int) -> list[PickedFile]:
    return [
        PickedFile(f"shirt-{i}.jpg", "image/jpeg", 850_000, f"blob:local/shirt-{i}")
        for i in range(1, count + 1)
    ]


async def main() -> None:
    api = FakeCatalogApi()
    ref = ReferenceData(categories=api, countries=api)
    wizard = WizardController(reference=ref)

    banner("Step 1: Identity")
    match await ref.categories():
        case Ok(categories):
            print(f"  Categories: {', '.join(c.name for c in categories)}")
        case Error(e):
            print(f"  ✗ {e.message}")
    wizard.update_step1(
        category_id="apparel",
        sub_category_id="shirts",
        product_title="Linen Shirt",
        brand_name="Acme",
        short_description="Breathable summer shirt",
        stock=40,
        color_applicable=True,
    )
    wizard.add_color_variant("Navy", "nv-01", stock=20)
    match wizard.add_color_variant("Sky", "NV-01"):
        case Some(_):
            print("  Added Sky")
        case Nothing():
            print("  ✗ SKU NV-01 already used")
    print(f"  Next: {wizard.go_to_next_step()} → step {wizard.current_step}")

    banner("Step 2: Media")
    match wizard.add_media(photos(6), MediaKind.IMAGE):
        case Ok(batch):
            print(f"  Added {len(batch.added)} images, rejected {len(batch.rejected)}")
        case Error(e):
            print(f"  ✗ {e.message}")
    wizard.go_to_next_step()

    banner("Step 3: Content")
    wizard.update_step3(full_description="Stone-washed linen with a relaxed fit.")
    wizard.add_highlight("100% linen")
    wizard.add_specification("Fabric", "Linen")
    wizard.go_to_next_step()

    banner("Step 4: Pricing")
    await ref.countries()
    wizard.select_country("IN")
    wizard.set_mrp(1000)
    wizard.set_selling_price(750)
    wizard.add_delivery_country("AE", delivery_charge=12)
    p = wizard.pricing
    print(f"  GST {wizard.draft.step4.gst_rate}%  discount {p.discount_percent}%")
    print(f"  Fee {p.platform_fee_amount}  commission {p.commission_amount}  GST {p.gst_amount}")
    print(f"  Seller earns {p.seller_earnings}")
    wizard.go_to_next_step()

    banner("Step 5: Shipping")
    wizard.update_step5(
        package_weight=0.4,
        package_length=30,
        package_width=25,
        package_height=5,
        shipping_type=ShippingType.PLATFORM,
    )
    w = wizard.weights
    print(f"  Actual {w.actual}kg  volumetric {w.volumetric}kg  chargeable {w.chargeable}kg")
    wizard.go_to_next_step()

    banner("Step 6: Offers")
    wizard.add_offer("bundle", {"bundleMinQty": 3, "bundleDiscount": 10})
    wizard.add_offer("special_day", {"specialDayName": "Diwali", "discountPercent": 20})
    for line in wizard.offer_descriptions():
        print(f"  • {line}")

    banner("Submit")
    storage = FakeStorage()
    products = FakeProductApi(fail_first=True)
    await wizard.save_draft(products)

    for attempt in (1, 2):
        print(f"\nAttempt {attempt}")
        match await wizard.submit(products, uploader=storage):
            case Ok(outcome):
                print(f"\n✓ Submitted {outcome.product} for approval")
            case Error(e):
                print(f"\n✗ {e.message}")
                print(f"  Rolled back: {e.rollback_complete}, draft kept: {wizard.has_unsaved_changes()}")


if __name__ == "__main__":
    run(main)
