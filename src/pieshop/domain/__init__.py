"""Domain layer: catalog and cart models, identifiers, money.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
