"""expiryctl — domain registration expiry monitoring."""

__version__ = "0.1.0"
