"""Domain layer — endpoint parsing and shell quoting.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
