"""pieshop: pie storefront demo with an anonymous shopping cart."""

__version__ = "0.3.0"
