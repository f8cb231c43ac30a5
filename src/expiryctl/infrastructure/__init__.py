"""Infrastructure layer — database, WHOIS client, locking.

This layer depends on stdlib and third-party libs (SQLAlchemy, Alembic,
python-whois). It must never import from services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
