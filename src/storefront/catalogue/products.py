"""Static product catalogue shown in the storefront listing."""

from protean.exceptions import ValidationError

from storefront.catalogue.product import Product

_PRODUCT_RECORDS = [
    {
        "product_id": "1",
        "name": "Premium Wireless Headphones",
        "price": 199.99,
        "image": "https://images.pexels.com/photos/3394650/pexels-photo-3394650.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "High-quality wireless headphones with noise cancellation",
        "category": "Electronics",
    },
    {
        "product_id": "2",
        "name": "Smart Watch Pro",
        "price": 299.99,
        "image": "https://images.pexels.com/photos/1772123/pexels-photo-1772123.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "Advanced smartwatch with health monitoring features",
        "category": "Electronics",
    },
    {
        "product_id": "3",
        "name": "Coffee Maker Deluxe",
        "price": 149.99,
        "image": "https://images.pexels.com/photos/4226881/pexels-photo-4226881.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "Premium coffee maker for the perfect brew every time",
        "category": "Home & Kitchen",
    },
    {
        "product_id": "4",
        "name": "Leather Backpack",
        "price": 89.99,
        "image": "https://images.pexels.com/photos/2905238/pexels-photo-2905238.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "Stylish leather backpack perfect for work or travel",
        "category": "Fashion",
    },
    {
        "product_id": "5",
        "name": "Bluetooth Speaker",
        "price": 79.99,
        "image": "https://images.pexels.com/photos/1649771/pexels-photo-1649771.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "Portable Bluetooth speaker with amazing sound quality",
        "category": "Electronics",
    },
    {
        "product_id": "6",
        "name": "Fitness Tracker",
        "price": 59.99,
        "image": "https://images.pexels.com/photos/4498362/pexels-photo-4498362.jpeg?auto=compress&cs=tinysrgb&w=500",
        "description": "Track your fitness goals with this advanced fitness tracker",
        "category": "Electronics",
    },
]


def load_products(records):
    """Build an ordered tuple of Products from plain catalogue records.

    Raises ValidationError on duplicate product ids.
    """
    products = tuple(Product(**record) for record in records)
    seen = set()
    for product in products:
        if product.product_id in seen:
            raise ValidationError({"product_id": [f"Duplicate product id in catalogue: {product.product_id}"]})
        seen.add(product.product_id)
    return products


PRODUCTS = load_products(_PRODUCT_RECORDS)


def find_product(products, product_id):
    """Return the product with the given id, or None."""
    return next((p for p in products if p.product_id == str(product_id)), None)
