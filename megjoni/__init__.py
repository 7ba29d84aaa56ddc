"""Server-rendered storefront pages for a second-hand clothing shop, with a WSGI server."""

__version__ = "0.1.0"