"""Domain layer — types, rules, and models.

This layer depends only on stdlib, pydantic, and the parsing libraries
(tldextract, python-dateutil). It must never import from services,
infrastructure, commands, or config.
"""
