"""Cart actions — the commands the cart reducer understands.

Each action is a small frozen record. ``CartAction`` is the union of all
eight; the reducer dispatches on the action's type.
"""

from dataclasses import dataclass

from storefront.catalogue.product import Product


@dataclass(frozen=True)
class AddToCart:
    product: Product


@dataclass(frozen=True)
class RemoveFromCart:
    product_id: str


@dataclass(frozen=True)
class IncreaseQuantity:
    product_id: str


@dataclass(frozen=True)
class DecreaseQuantity:
    product_id: str


@dataclass(frozen=True)
class AddToWishlist:
    product: Product


@dataclass(frozen=True)
class RemoveFromWishlist:
    product_id: str


@dataclass(frozen=True)
class ApplyCoupon:
    code: str


@dataclass(frozen=True)
class RemoveCoupon:
    pass


CartAction = (
    AddToCart
    | RemoveFromCart
    | IncreaseQuantity
    | DecreaseQuantity
    | AddToWishlist
    | RemoveFromWishlist
    | ApplyCoupon
    | RemoveCoupon
)
