"""Domain Types: identity wrappers and closed enums."""

from b2b_gate.core.domain_types import (
    CategoryId, ProductId, GroupId, StoreId,
    ProductType, ConfigKey, ActivationMode,
)


def test_identity_types_wrap_int():
    assert CategoryId(3) == 3
    assert ProductId(4) == 4
    assert GroupId(0) == 0
    assert StoreId(1) == 1


def test_product_type_is_closed():
    assert set(ProductType) == {
        ProductType.SIMPLE, ProductType.GROUPED, ProductType.CONFIGURABLE,
    }
    assert ProductType("grouped") is ProductType.GROUPED


def test_config_keys_match_store_paths():
    assert {k.value for k in ConfigKey} == {
        "requirelogin",
        "generalsettings.active",
        "generalsettings.activecustomers",
        "activatebycustomersettings.activebycustomer",
        "activatebycustomersettings.activecustomers",
        "activatebycategorysettings.activebycategory",
        "activatebycategorysettings.activecategories",
        "add_to_cart.value",
    }


def test_activation_mode_has_four_rows():
    assert len(ActivationMode) == 4
