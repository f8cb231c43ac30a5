"""Service layer — expiry checks, notifications, and migrations.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
