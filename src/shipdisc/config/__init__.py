"""Configuration: code-baked defaults, TOML discovery, settings, and logging."""
