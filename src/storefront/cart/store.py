"""Cart store — the per-session owner of cart state.

The presentation layer holds one ``CartStore`` per shopping session and
talks to it through queries (lines, wishlist, applied coupon, pricing) and
commands (the eight cart actions). Every command runs through the pure
reducer; the store swaps in the resulting state and notifies subscribers.
"""

from uuid import uuid4

from protean.exceptions import ValidationError

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
from storefront.cart.coupons import AVAILABLE_COUPONS
from storefront.cart.pricing import calculate_pricing
from storefront.cart.reducer import reduce_cart
from storefront.cart.state import CartState
from storefront.catalogue.products import PRODUCTS, find_product
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _store_settings():
    custom = storefront.config.get("custom") or {}
    return custom.get("currency", "USD"), int(custom.get("price_precision", 2))


class CartStore:
    def __init__(self, coupons=AVAILABLE_COUPONS, products=PRODUCTS, session_id=None):
        self.session_id = session_id or str(uuid4())
        self._coupons = tuple(coupons)
        self._products = tuple(products)
        self._state = CartState()
        self._listeners = []
        self._currency, self._precision = _store_settings()
        self._logger = logger.bind(session_id=self.session_id)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def state(self):
        return self._state

    @property
    def lines(self):
        return self._state.lines

    @property
    def wishlist(self):
        return self._state.wishlist

    @property
    def applied_coupon(self):
        return self._state.applied_coupon

    @property
    def item_count(self):
        return self._state.item_count

    @property
    def pricing(self):
        return calculate_pricing(
            self._state.lines,
            self._state.applied_coupon,
            precision=self._precision,
            currency=self._currency,
        )

    @property
    def products(self):
        return self._products

    @property
    def coupons(self):
        return self._coupons

    def product(self, product_id):
        return find_product(self._products, product_id)

    # -------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------
    def subscribe(self, listener):
        """Register ``listener(state)`` to run after every state change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state):
        if new_state == self._state:
            return self._state
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def dispatch(self, action):
        """Apply ``action`` and return the resulting state.

        Coupon rejections propagate to the caller with the state unchanged.
        """
        self._logger.debug("Dispatching cart action", action=type(action).__name__)
        try:
            new_state = reduce_cart(self._state, action, self._coupons, self._precision)
        except ValidationError as exc:
            self._logger.info(
                "Cart action rejected",
                action=type(action).__name__,
                reason=type(exc).__name__,
                errors=exc.messages,
            )
            raise
        return self._commit(new_state)

    def add_to_cart(self, product):
        return self.dispatch(AddToCart(product=product))

    def remove_from_cart(self, product_id):
        return self.dispatch(RemoveFromCart(product_id=product_id))

    def increase_quantity(self, product_id):
        return self.dispatch(IncreaseQuantity(product_id=product_id))

    def decrease_quantity(self, product_id):
        return self.dispatch(DecreaseQuantity(product_id=product_id))

    def add_to_wishlist(self, product):
        return self.dispatch(AddToWishlist(product=product))

    def remove_from_wishlist(self, product_id):
        return self.dispatch(RemoveFromWishlist(product_id=product_id))

    def apply_coupon(self, code):
        return self.dispatch(ApplyCoupon(code=code))

    def remove_coupon(self):
        return self.dispatch(RemoveCoupon())

    def toggle_wishlist(self, product):
        """Add ``product`` to the wishlist, or remove it if already there."""
        if self._state.in_wishlist(product.product_id):
            return self.remove_from_wishlist(product.product_id)
        return self.add_to_wishlist(product)

    def move_to_cart(self, product_id):
        """Move a wishlist product into the cart as a single state change."""
        product = next((p for p in self._state.wishlist if p.product_id == str(product_id)), None)
        if product is None:
            return self._state

        self._logger.debug("Moving wishlist product to cart", product_id=product.product_id)
        state = reduce_cart(self._state, AddToCart(product=product), self._coupons, self._precision)
        state = reduce_cart(state, RemoveFromWishlist(product_id=product.product_id), self._coupons, self._precision)
        return self._commit(state)
