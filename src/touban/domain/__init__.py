"""Domain layer — ledger model, token codec, rotation and membership rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
