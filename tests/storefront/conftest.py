import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def make_product():
    """Factory for ad-hoc catalogue products."""
    from storefront.catalogue.product import Product

    def _make(product_id="1", price=20.0, name=None, **kwargs):
        return Product(product_id=str(product_id), name=name or f"Product {product_id}", price=price, **kwargs)

    return _make


@pytest.fixture()
def make_coupon():
    from storefront.cart.coupons import Coupon, CouponType

    def _make(code="SAVE10", discount=10, coupon_type=CouponType.PERCENTAGE.value, min_amount=None, **kwargs):
        return Coupon(code=code, discount=discount, coupon_type=coupon_type, min_amount=min_amount, **kwargs)

    return _make
