"""Cart state reducer.

``reduce_cart(state, action, coupons)`` is a pure function: it never mutates
``state``, performs no I/O, and returns the same result for the same inputs.
Actions that do not apply (adjusting a product that is not in the cart,
removing an absent wishlist entry) return ``state`` itself.

Coupon rejection is the only failure: ``ApplyCoupon`` raises
``InvalidCouponCode`` or ``CouponThresholdNotMet`` and no new state exists.

DecreaseQuantity never removes a line. At quantity 1 it is a no-op; use
RemoveFromCart to drop the product.
"""

from dataclasses import replace

from storefront.cart.actions import (
    AddToCart,
    AddToWishlist,
    ApplyCoupon,
    DecreaseQuantity,
    IncreaseQuantity,
    RemoveCoupon,
    RemoveFromCart,
    RemoveFromWishlist,
)
from storefront.cart.coupons import CouponThresholdNotMet, InvalidCouponCode, find_coupon
from storefront.cart.pricing import calculate_subtotal
from storefront.cart.state import CartLine, CartState


def _replace_line(state, product_id, quantity):
    lines = tuple(
        line.with_quantity(quantity) if line.product_id == product_id else line for line in state.lines
    )
    return replace(state, lines=lines)


# ---------------------------------------------------------------------------
# Cart lines
# ---------------------------------------------------------------------------
def _add_to_cart(state, action, coupons, precision):
    product = action.product
    existing = state.line_for(product.product_id)
    if existing is not None:
        return _replace_line(state, existing.product_id, existing.quantity + 1)
    return replace(state, lines=state.lines + (CartLine(product=product, quantity=1),))


def _remove_from_cart(state, action, coupons, precision):
    if state.line_for(action.product_id) is None:
        return state
    product_id = str(action.product_id)
    return replace(state, lines=tuple(line for line in state.lines if line.product_id != product_id))


def _increase_quantity(state, action, coupons, precision):
    line = state.line_for(action.product_id)
    if line is None:
        return state
    return _replace_line(state, line.product_id, line.quantity + 1)


def _decrease_quantity(state, action, coupons, precision):
    line = state.line_for(action.product_id)
    if line is None or line.quantity <= 1:
        return state
    return _replace_line(state, line.product_id, line.quantity - 1)


# ---------------------------------------------------------------------------
# Wishlist
# ---------------------------------------------------------------------------
def _add_to_wishlist(state, action, coupons, precision):
    if state.in_wishlist(action.product.product_id):
        return state
    return replace(state, wishlist=state.wishlist + (action.product,))


def _remove_from_wishlist(state, action, coupons, precision):
    if not state.in_wishlist(action.product_id):
        return state
    product_id = str(action.product_id)
    return replace(state, wishlist=tuple(p for p in state.wishlist if p.product_id != product_id))


# ---------------------------------------------------------------------------
# Coupons
# ---------------------------------------------------------------------------
def _apply_coupon(state, action, coupons, precision):
    coupon = find_coupon(coupons, action.code)
    if coupon is None:
        raise InvalidCouponCode(action.code)

    subtotal = round(calculate_subtotal(state.lines), precision)
    if not coupon.accepts_subtotal(subtotal):
        raise CouponThresholdNotMet(coupon, subtotal)

    return replace(state, applied_coupon=coupon)


def _remove_coupon(state, action, coupons, precision):
    if state.applied_coupon is None:
        return state
    return replace(state, applied_coupon=None)


_HANDLERS = {
    AddToCart: _add_to_cart,
    RemoveFromCart: _remove_from_cart,
    IncreaseQuantity: _increase_quantity,
    DecreaseQuantity: _decrease_quantity,
    AddToWishlist: _add_to_wishlist,
    RemoveFromWishlist: _remove_from_wishlist,
    ApplyCoupon: _apply_coupon,
    RemoveCoupon: _remove_coupon,
}


def reduce_cart(state: CartState, action, coupons=(), precision=2) -> CartState:
    """Return the state that results from applying ``action`` to ``state``.

    Coupon thresholds are compared against the subtotal rounded to
    ``precision`` decimal places, the same subtotal pricing reports.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unknown cart action: {action!r}")
    return handler(state, action, coupons, precision)
