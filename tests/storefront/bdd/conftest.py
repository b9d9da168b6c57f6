"""Shared BDD fixtures and step definitions for the storefront cart."""

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.cart.coupons import AVAILABLE_COUPONS, Coupon, CouponThresholdNotMet, CouponType, InvalidCouponCode
from storefront.cart.store import CartStore
from storefront.catalogue.product import Product


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {}


@pytest.fixture()
def coupons():
    return list(AVAILABLE_COUPONS)


@pytest.fixture()
def notifications():
    return []


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="store")
def empty_cart(coupons, notifications):
    store = CartStore(coupons=coupons)
    store.subscribe(notifications.append)
    return store


@given(parsers.cfparse('a flat coupon "{code}" worth {amount:f} is available'), target_fixture="store")
def flat_coupon_available(coupons, notifications, code, amount):
    coupons.append(Coupon(code=code, coupon_type=CouponType.FLAT.value, discount=amount))
    store = CartStore(coupons=coupons)
    store.subscribe(notifications.append)
    return store


# ---------------------------------------------------------------------------
# Shared when steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('product "{product_id}" priced {price:f} is added to the cart'))
def add_priced_product(store, product_id, price):
    store.add_to_cart(Product(product_id=product_id, name=f"Product {product_id}", price=price))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_n_lines(store, count):
    assert len(store.lines) == count


@then(parsers.cfparse('product "{product_id}" has quantity {qty:d}'))
def product_has_quantity(store, product_id, qty):
    assert store.state.line_for(product_id).quantity == qty


@then(parsers.cfparse("the subtotal is {amount:f}"))
def subtotal_is(store, amount):
    assert store.pricing.subtotal == pytest.approx(amount)


@then(parsers.cfparse("the discount is {amount:f}"))
def discount_is(store, amount):
    assert store.pricing.discount_amount == pytest.approx(amount)


@then(parsers.cfparse("the total is {amount:f}"))
def total_is(store, amount):
    assert store.pricing.total == pytest.approx(amount)


@then("no coupon is applied")
def no_coupon_applied(store):
    assert store.applied_coupon is None


@then("the coupon is rejected as invalid")
def coupon_rejected_invalid(error):
    assert isinstance(error.get("exc"), InvalidCouponCode)


@then("the coupon is rejected for the minimum order")
def coupon_rejected_threshold(error):
    assert isinstance(error.get("exc"), CouponThresholdNotMet)
