"""Crypto core: key hierarchy, addresses, note commitments and note cipher."""
