"""Cart pricing — subtotal, discount and total derived from cart contents.

Pricing is never stored on the cart state. It is recomputed from the lines
and the applied coupon whenever it is asked for, so it cannot go stale.
"""

from protean.fields import Float, String

from storefront.domain import storefront


@storefront.value_object
class CartPricing:
    """Financial summary of a cart at a point in time."""

    subtotal: Float(default=0.0)
    discount_amount: Float(default=0.0)
    total: Float(default=0.0)
    currency: String(max_length=3, default="USD")


def calculate_subtotal(lines):
    return sum(line.product.price * line.quantity for line in lines)


def calculate_discount(subtotal, coupon):
    """Discount for ``subtotal`` under ``coupon``; never more than the subtotal."""
    if coupon is None:
        return 0.0
    if coupon.is_percentage:
        return subtotal * coupon.discount / 100
    return min(coupon.discount, subtotal)


def calculate_pricing(lines, coupon, precision=2, currency="USD"):
    """Price the cart, rounding each amount to ``precision`` decimal places.

    The discount is taken from the rounded subtotal and the total from the two
    rounded amounts, so ``total == subtotal - discount_amount`` holds at the
    shown precision.
    """
    subtotal = round(calculate_subtotal(lines), precision)
    discount_amount = round(calculate_discount(subtotal, coupon), precision)
    total = round(max(0.0, subtotal - discount_amount), precision)

    return CartPricing(
        subtotal=subtotal,
        discount_amount=discount_amount,
        total=total,
        currency=currency,
    )
