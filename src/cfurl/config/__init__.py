"""Configuration layer: CLI-derived settings and logging setup."""
