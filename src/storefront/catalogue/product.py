"""Product value object — an immutable entry in the storefront catalogue."""

from protean.fields import Float, String, Text

from storefront.domain import storefront


@storefront.value_object
class Product:
    """A product offered in the storefront listing.

    Products are loaded once from a static catalogue and never change during
    a session. Cart lines and wishlist entries embed the product as-is, so two
    products are the same product when their ``product_id`` matches.
    """

    product_id: String(required=True, max_length=50)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    image: String(max_length=500)
    description: Text()
    category: String(max_length=100)
