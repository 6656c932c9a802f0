"""Domain layer: entities, constraints, uniqueness rules, patch engine.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
