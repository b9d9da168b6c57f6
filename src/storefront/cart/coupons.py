"""Coupons — discount rules a shopper can apply to the cart by code.

A coupon is either a percentage off the subtotal (stored as a whole number,
``10`` meaning 10%) or a flat amount off, capped at the subtotal. Either kind
may carry a minimum order amount below which it cannot be applied.
"""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.domain import storefront


class CouponType(Enum):
    PERCENTAGE = "Percentage"
    FLAT = "Flat"


@storefront.value_object
class Coupon:
    code: String(required=True, max_length=50)
    coupon_type: String(required=True, choices=CouponType)
    discount: Float(required=True, min_value=0.0)
    min_amount: Float(min_value=0.0)  # None means no threshold
    description: String(max_length=255)

    @invariant.post
    def percentage_cannot_exceed_one_hundred(self):
        if self.is_percentage and self.discount is not None and self.discount > 100:
            raise ValidationError({"discount": ["Percentage discount cannot exceed 100"]})

    @property
    def is_percentage(self):
        return self.coupon_type == CouponType.PERCENTAGE.value

    def matches(self, code):
        """True when ``code`` names this coupon, ignoring case and surrounding whitespace."""
        return normalize_code(code) == normalize_code(self.code)

    def accepts_subtotal(self, subtotal):
        return self.min_amount is None or subtotal >= self.min_amount


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class InvalidCouponCode(ValidationError):
    """The code does not match any coupon in the catalogue."""

    def __init__(self, code):
        self.code = code
        super().__init__({"coupon_code": ["Invalid coupon code"]})


class CouponThresholdNotMet(ValidationError):
    """The coupon exists but the cart subtotal is below its minimum order amount."""

    def __init__(self, coupon, subtotal):
        self.code = coupon.code
        self.min_amount = coupon.min_amount
        self.subtotal = subtotal
        super().__init__(
            {"coupon_code": [f"Coupon {coupon.code} requires a minimum order of {coupon.min_amount:.2f}"]}
        )


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
def normalize_code(code):
    if code is None:
        return ""
    return str(code).strip().upper()


def find_coupon(coupons, code):
    """Return the coupon matching ``code`` case-insensitively, or None."""
    return next((c for c in coupons if c.matches(code)), None)


def load_coupons(records):
    """Build an ordered tuple of Coupons from plain records.

    Codes are stored upper-cased; two records whose codes differ only by case
    are rejected as duplicates.
    """
    coupons = tuple(Coupon(**{**record, "code": normalize_code(record.get("code"))}) for record in records)
    seen = set()
    for coupon in coupons:
        if coupon.code in seen:
            raise ValidationError({"code": [f"Duplicate coupon code in catalogue: {coupon.code}"]})
        seen.add(coupon.code)
    return coupons


AVAILABLE_COUPONS = load_coupons(
    [
        {
            "code": "SAVE10",
            "coupon_type": CouponType.PERCENTAGE.value,
            "discount": 10,
            "min_amount": 50,
            "description": "10% off orders over $50",
        },
        {
            "code": "WELCOME20",
            "coupon_type": CouponType.PERCENTAGE.value,
            "discount": 20,
            "min_amount": 100,
            "description": "20% off for new customers on orders over $100",
        },
        {
            "code": "FIXED50",
            "coupon_type": CouponType.FLAT.value,
            "discount": 50,
            "min_amount": 200,
            "description": "$50 off orders over $200",
        },
        {
            "code": "SUMMER15",
            "coupon_type": CouponType.PERCENTAGE.value,
            "discount": 15,
            "description": "15% summer discount",
        },
    ]
)
