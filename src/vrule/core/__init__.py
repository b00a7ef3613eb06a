"""Core layer — outcomes, the rule contract, runtime kinds, and errors.

This layer depends only on stdlib and pydantic.
It must never import from rules, schema, services, commands, or config.
"""
