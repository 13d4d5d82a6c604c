from __future__ import annotations

from listing.draft import ApprovalStatus, MediaKind, ShippingType
from listing.wizard import ProductPayload, WizardController

from _support import FIXED_NOW, jpegs, mp4, ok_value, some_value


def test_payload_uses_camel_case_names(filled: WizardController) -> None:
    data = filled.get_submit_data()

    assert data["categoryId"] == "cat-1"
    assert data["subCategoryId"] == "sub-1"
    assert data["name"] == "Linen Shirt"
    assert data["brandName"] == "Acme"
    assert data["description"] == "Stone-washed linen, relaxed fit."
    assert data["mrp"] == 1000
    assert data["price"] == 750
    assert data["gstRate"] == 18
    assert data["countryCode"] == "IN"
    assert data["shippingType"] == "self"
    assert data["packageDimensions"] == {"length": 0.0, "width": 0.0, "height": 0.0}
    assert data["cancellationPolicyDays"] == 7


def test_payload_meta_fields(filled: WizardController) -> None:
    data = filled.get_submit_data()
    assert data["createdAt"] == FIXED_NOW
    assert data["approvalStatus"] == "pending"
    assert data["isActive"] is False

    assert filled.get_submit_data(ApprovalStatus.DRAFT)["approvalStatus"] == "draft"


def test_images_fall_back_to_previews(filled: WizardController) -> None:
    data = filled.get_submit_data()
    assert data["images"] == [f"blob:photo-{i}.jpg" for i in range(1, 6)]

    first = filled.draft.step2.images[0]
    filled.mark_uploaded({first.id: "https://cdn.example/p1.jpg"})
    assert filled.get_submit_data()["images"][0] == "https://cdn.example/p1.jpg"


def test_collections_carry_every_field(filled: WizardController) -> None:
    some_value(filled.add_size_variant("M", stock=4, price=749))
    some_value(filled.add_delivery_country("us", delivery_charge=12.5, min_order_qty=2))
    some_value(filled.add_offer("hourly", {"startTime": "10:00", "endTime": "12:00", "discountPercent": 10}))

    data = filled.get_submit_data()

    assert data["sizeVariants"] == [{"id": "t-6", "size": "M", "quantity": 0, "stock": 4, "price": 749.0}]
    assert data["deliveryCountries"] == [
        {"id": "t-7", "countryCode": "US", "countryName": "US", "deliveryCharge": 12.5, "minOrderQty": 2},
    ]
    assert data["offerRules"] == [
        {
            "id": "t-8",
            "type": "hourly",
            "startTime": "10:00",
            "endTime": "12:00",
            "discountPercent": 10.0,
            "isActive": True,
        },
    ]


def test_payload_validates_back(filled: WizardController) -> None:
    some_value(filled.add_offer("bundle"))
    some_value(filled.add_offer("special_day", {"specialDayName": "Diwali"}))
    data = filled.get_submit_data()

    parsed = ProductPayload.model_validate(data)

    assert parsed.to_payload() == data
    assert [r.type for r in parsed.offer_rules] == ["bundle", "special_day"]


def fill_every_field(wizard: WizardController) -> None:
    """Distinct values everywhere so a swapped mapping cannot go unnoticed."""
    wizard.update_step1(
        category_id="cat-9",
        sub_category_id="sub-4",
        product_type_id="type-2",
        product_title="Linen Shirt",
        brand_name="Acme",
        model_number="LS2024AB",
        short_description="Short blurb",
        stock=11,
        size_applicable=True,
        color_applicable=True,
    )
    some_value(wizard.add_size_variant("M", stock=4, quantity=2, price=749))
    some_value(wizard.add_color_variant("Navy", "nv-01", price=799, stock=3))
    ok_value(wizard.add_media(jpegs(5), MediaKind.IMAGE))
    ok_value(wizard.add_media([mp4()], MediaKind.VIDEO))
    wizard.update_step3(full_description="Stone-washed linen")
    wizard.add_highlight("Soft hand feel")
    wizard.add_seller_note("Ships in 2 days")
    some_value(wizard.add_specification("Fabric", "Linen"))
    wizard.update_step4(
        country_code="IN",
        mrp=1000,
        selling_price=750,
        stock_quantity=17,
        gst_rate=12,
        platform_fee=6.5,
        commission=1.25,
    )
    some_value(wizard.add_delivery_country("US", delivery_charge=8.5, min_order_qty=3))
    wizard.update_step5(
        package_weight=0.45,
        package_length=31,
        package_width=22,
        package_height=4,
        shipping_type=ShippingType.PLATFORM,
        manufacturer_name="Acme Mills",
        manufacturer_address="Plot 7, Tiruppur",
        packing_details="Poly mailer",
        courier_partner="Delhivery",
        cancellation_policy_days=5,
        return_policy_days=9,
    )
    some_value(wizard.add_offer("buy_x_get_y", {"buyQuantity": 3, "getQuantity": 1, "isActive": False}))


def test_submit_data_mirrors_every_step_field(wizard: WizardController) -> None:
    fill_every_field(wizard)
    d = wizard.draft
    s1, s2, s3, s4, s5, s6 = d.step1, d.step2, d.step3, d.step4, d.step5, d.step6

    data = wizard.get_submit_data()

    expected = {
        "categoryId": s1.category_id,
        "subCategoryId": s1.sub_category_id,
        "productTypeId": s1.product_type_id,
        "name": s1.product_title,
        "brandName": s1.brand_name,
        "modelNumber": s1.model_number,
        "shortDescription": s1.short_description,
        "stock": s1.stock,
        "sizeApplicable": s1.size_applicable,
        "colorApplicable": s1.color_applicable,
        "sizeVariants": [
            {"id": v.id, "size": v.size, "quantity": v.quantity, "stock": v.stock, "price": v.price}
            for v in s1.size_variants
        ],
        "colorVariants": [
            {"id": v.id, "color": v.color, "sku": v.sku, "price": v.price, "stock": v.stock}
            for v in s1.color_variants
        ],
        "images": [m.url for m in s2.images],
        "videos": [m.url for m in s2.videos],
        "highlights": list(s3.highlights),
        "description": s3.full_description,
        "specifications": [{"id": sp.id, "key": sp.key, "value": sp.value} for sp in s3.specifications],
        "sellerNotes": list(s3.seller_notes),
        "countryCode": s4.country_code,
        "mrp": s4.mrp,
        "price": s4.selling_price,
        "stockQuantity": s4.stock_quantity,
        "gstRate": s4.gst_rate,
        "platformFee": s4.platform_fee,
        "commission": s4.commission,
        "deliveryCountries": [
            {
                "id": r.id,
                "countryCode": r.country_code,
                "countryName": r.country_name,
                "deliveryCharge": r.delivery_charge,
                "minOrderQty": r.min_order_qty,
            }
            for r in s4.delivery_countries
        ],
        "packageWeight": s5.package_weight,
        "packageDimensions": {
            "length": s5.package_length,
            "width": s5.package_width,
            "height": s5.package_height,
        },
        "shippingType": "platform",
        "manufacturerName": s5.manufacturer_name,
        "manufacturerAddress": s5.manufacturer_address,
        "packingDetails": s5.packing_details,
        "courierPartner": s5.courier_partner,
        "cancellationPolicyDays": s5.cancellation_policy_days,
        "returnPolicyDays": s5.return_policy_days,
        "offerRules": [
            {
                "id": r.id,
                "type": "buy_x_get_y",
                "buyQuantity": r.buy_quantity,
                "getQuantity": r.get_quantity,
                "isActive": r.is_active,
            }
            for r in s6.offer_rules
        ],
        "createdAt": FIXED_NOW,
        "approvalStatus": "pending",
        "isActive": False,
    }

    assert set(data) == set(expected)
    for key, value in expected.items():
        assert data[key] == value, key


def test_distinct_values_reach_their_own_keys(wizard: WizardController) -> None:
    fill_every_field(wizard)
    data = wizard.get_submit_data()

    assert (data["stock"], data["stockQuantity"]) == (11, 17)
    assert (data["cancellationPolicyDays"], data["returnPolicyDays"]) == (5, 9)
    assert (data["platformFee"], data["commission"], data["gstRate"]) == (6.5, 1.25, 12)
    assert data["packageDimensions"] == {"length": 31, "width": 22, "height": 4}
    assert data["highlights"] == ["Soft hand feel"]
    assert data["sellerNotes"] == ["Ships in 2 days"]
    assert data["colorVariants"][0]["sku"] == "NV-01"
    assert data["offerRules"][0]["isActive"] is False
