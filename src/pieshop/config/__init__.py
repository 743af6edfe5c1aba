"""Configuration: pieshop.toml discovery, settings, and logging."""
