"""Service layer — file-level operations behind the CLI.

INVARIANT: Services return ServiceResult and never write to stdout.
"""
