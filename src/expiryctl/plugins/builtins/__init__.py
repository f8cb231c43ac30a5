"""Notification providers bundled with expiryctl."""
