"""Configuration — pydantic-settings, TOML discovery, and logging."""
