"""Configuration layer — vrule.toml discovery, settings, and logging."""
