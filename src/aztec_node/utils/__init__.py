"""Hashing and hex encoding helpers shared by the crypto core."""
