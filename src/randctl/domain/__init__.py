"""Domain layer — request models, character classes, and the generators.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
Randomness enters exclusively through an injected EntropySource.
"""
