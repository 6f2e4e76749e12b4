"""Small command-line tools and WSGI services."""

__version__ = "0.1.0"