"""Configuration package: persisted settings and path discovery."""
