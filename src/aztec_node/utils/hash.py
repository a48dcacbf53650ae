"""Cryptographic hash utilities."""

import hashlib
from typing import Union

HASH_SIZE = 32  # SHA-256 output size


def sha256(data: Union[bytes, str]) -> bytes:
    """
    Compute SHA-256 hash of data.
    
    Args:
        data: Bytes or string to hash
        
    Returns:
        bytes: 32-byte SHA-256 hash
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.sha256(data).digest()


def hash_concatenate(*data: Union[bytes, str]) -> bytes:
    """
    Hash concatenated data.
    
    Operands are joined as raw bytes with no separator or length prefix,
    so callers must pass fixed-width fields when they need unambiguous
    framing.
    
    Args:
        *data: Multiple bytes or strings to concatenate and hash
        
    Returns:
        bytes: SHA-256 hash of concatenated data
    """
    hasher = hashlib.sha256()
    for item in data:
        if isinstance(item, str):
            item = item.encode('utf-8')
        hasher.update(item)
    return hasher.digest()


def derive_tagged(secret: bytes, tag: str) -> bytes:
    """
    Domain-separated hash H(secret || utf8(tag)).
    
    Args:
        secret: Root secret bytes
        tag: Domain tag such as "spending"
        
    Returns:
        bytes: 32-byte digest
    """
    return hash_concatenate(secret, tag.encode('utf-8'))
