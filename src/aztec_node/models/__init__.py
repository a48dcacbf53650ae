"""Pydantic models and closed enums for the Aztec node."""
