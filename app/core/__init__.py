"""Configuration, database sessions and token/password primitives."""
