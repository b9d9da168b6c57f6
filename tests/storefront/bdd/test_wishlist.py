"""BDD tests for the wishlist."""

from pytest_bdd import parsers, scenarios, then, when

scenarios("features/wishlist.feature")


@when(parsers.cfparse('product "{product_id}" is added to the wishlist'))
def add_to_wishlist(store, product_id):
    store.add_to_wishlist(store.product(product_id))


@when(parsers.cfparse('product "{product_id}" is moved to the cart'))
def move_to_cart(store, product_id):
    store.move_to_cart(product_id)


@when(parsers.cfparse('product "{product_id}" is toggled on the wishlist'))
def toggle_wishlist(store, product_id):
    store.toggle_wishlist(store.product(product_id))


@then(parsers.cfparse("the wishlist has {count:d} product"))
def wishlist_has_single_product(store, count):
    assert len(store.wishlist) == count


@then(parsers.cfparse("the wishlist has {count:d} products"))
def wishlist_has_n(store, count):
    assert len(store.wishlist) == count
