"""Encoding and decoding utilities.

Every value the crypto core accepts or returns travels as a ``0x``-prefixed
hex string. Decoding is strict: anything that is not an even number of hex
digits raises :class:`~aztec_node.exceptions.FormatError`.
"""

import re
from typing import Optional

from aztec_node.exceptions import FormatError

HEX_PREFIX = "0x"

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")
_PREFIXED_HEX = re.compile(r"0x[0-9a-fA-F]+")
_DECIMAL = re.compile(r"-?[0-9]+")


def strip_hex_prefix(value: str) -> str:
    """Return the hex digits of ``value`` without a leading ``0x``/``0X``."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string.
    
    Args:
        data: Bytes to convert
        
    Returns:
        str: Lowercase hexadecimal string with '0x' prefix
    """
    if not isinstance(data, (bytes, bytearray)):
        raise FormatError(f"Expected bytes, got {type(data).__name__}")
    return HEX_PREFIX + bytes(data).hex()


def hex_to_bytes(hex_str: str, expected_length: Optional[int] = None) -> bytes:
    """
    Convert hexadecimal string to bytes.
    
    Args:
        hex_str: Hexadecimal string (with or without '0x' prefix)
        expected_length: Required decoded length in bytes, if any
        
    Returns:
        bytes: Decoded bytes
        
    Raises:
        FormatError: If hex string is invalid or has the wrong length
    """
    if not isinstance(hex_str, str):
        raise FormatError(f"Expected hex string, got {type(hex_str).__name__}")

    digits = strip_hex_prefix(hex_str)

    if not _HEX_DIGITS.fullmatch(digits):
        raise FormatError(f"Invalid hex characters in {hex_str!r}")
    if len(digits) % 2 != 0:
        raise FormatError("Hex string must have even number of characters")

    data = bytes.fromhex(digits)
    if expected_length is not None and len(data) != expected_length:
        raise FormatError(
            f"Expected {expected_length} bytes, got {len(data)} bytes"
        )
    return data


def pad_hex(value: str, length: int) -> str:
    """
    Left-pad a hex string with zeros.
    
    Args:
        value: Hex string (with or without '0x' prefix)
        length: Target number of hex digits
        
    Returns:
        str: '0x'-prefixed lowercase hex string of exactly ``length`` digits
        
    Raises:
        FormatError: If value is not hex or already longer than ``length``
    """
    if not isinstance(value, str):
        raise FormatError(f"Expected hex string, got {type(value).__name__}")

    digits = strip_hex_prefix(value)
    if not _HEX_DIGITS.fullmatch(digits):
        raise FormatError(f"Invalid hex characters in {value!r}")
    if len(digits) > length:
        raise FormatError(
            f"Hex value has {len(digits)} digits, exceeds padded length {length}"
        )
    return HEX_PREFIX + digits.lower().rjust(length, "0")


def is_valid_hex(value: str, expected_length: Optional[int] = None) -> bool:
    """
    Check whether value is a '0x'-prefixed hex string.
    
    Args:
        value: Candidate string
        expected_length: Required number of hex digits (excluding prefix)
        
    Returns:
        bool: True if valid, False otherwise. Never raises.
    """
    if not isinstance(value, str) or not _PREFIXED_HEX.fullmatch(value):
        return False
    if expected_length is not None:
        return len(value) == expected_length + len(HEX_PREFIX)
    return True



def number_to_hex(value: int) -> str:
    """
    Convert a non-negative integer of any size to hex.
    
    Raises:
        FormatError: If value is negative or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"Expected integer, got {type(value).__name__}")
    if value < 0:
        raise FormatError("Cannot encode a negative number as hex")
    return HEX_PREFIX + format(value, "x")


def hex_to_number(value: str) -> int:
    """
    Convert a hex string (or decimal string) to an integer.
    
    Args:
        value: '0x'-prefixed hex, or a plain decimal string
        
    Returns:
        int: Arbitrary-precision integer
        
    Raises:
        FormatError: If value cannot be parsed
    """
    if not isinstance(value, str):
        raise FormatError(f"Expected string, got {type(value).__name__}")

    if value[:2] in ("0x", "0X"):
        digits = value[2:]
        if not digits or not _HEX_DIGITS.fullmatch(digits):
            raise FormatError(f"Invalid hex number {value!r}")
        return int(digits, 16)

    if not _DECIMAL.fullmatch(value):
        raise FormatError(f"Invalid number {value!r}")
    return int(value)
