"""Storefront bounded context — product catalogue, shopping cart and wishlist.

The cart is a session-scoped, in-memory state machine: a pure reducer maps
(state, action) to a new immutable state, and pricing is derived from the
cart lines and the applied coupon on every query.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

storefront = Domain(name="storefront")

configure_logging(storefront.config.get("custom") or {})
