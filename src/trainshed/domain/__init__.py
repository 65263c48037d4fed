"""Domain layer: self-validating value types for catalog and collection data.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
