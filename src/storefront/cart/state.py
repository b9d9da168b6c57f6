"""Cart state — the immutable value the cart reducer transitions between."""

from dataclasses import dataclass

from protean.fields import Integer, ValueObject

from storefront.cart.coupons import Coupon
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.value_object
class CartLine:
    """A product queued for purchase and how many units of it.

    A line is replaced wholesale when its quantity changes. Quantities below
    one are rejected; the reducer removes a line instead of keeping it at zero.
    """

    product: ValueObject(Product, required=True)
    quantity: Integer(required=True, min_value=1)

    @property
    def product_id(self):
        return self.product.product_id

    @property
    def line_total(self):
        return self.product.price * self.quantity

    def with_quantity(self, quantity):
        return CartLine(product=self.product, quantity=quantity)


@dataclass(frozen=True)
class CartState:
    """Cart lines, wishlist and applied coupon for one shopping session.

    Every transition produces a new instance; equality is structural, so two
    states holding the same lines, wishlist and coupon compare equal.
    """

    lines: tuple[CartLine, ...] = ()
    wishlist: tuple[Product, ...] = ()
    applied_coupon: Coupon | None = None

    def line_for(self, product_id) -> CartLine | None:
        return next((line for line in self.lines if line.product_id == str(product_id)), None)

    def in_wishlist(self, product_id) -> bool:
        return any(p.product_id == str(product_id) for p in self.wishlist)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
