"""Domain layer — transfer models, transforms, and realm selection.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
