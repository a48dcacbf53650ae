"""Custom exceptions for the Aztec node."""

from typing import Any, Dict, Optional


class AztecNodeException(Exception):
    """Base exception for all Aztec node errors."""
    pass


# Cryptography Errors
class CryptoError(AztecNodeException):
    """Base exception for cryptographic errors."""
    pass


class FormatError(CryptoError, ValueError):
    """Raised when a value fails hex-format or expected-length validation."""
    pass


class EncryptionError(CryptoError):
    """Raised when note encryption fails."""
    pass


class DecryptionError(CryptoError):
    """Raised when note decryption fails."""
    pass


# API Errors
class ApiError(AztecNodeException):
    """Raised when a request to the Aztec API fails."""

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.description = description or message
        self.status_code = status_code


class ApiResponseError(ApiError):
    """Raised when the API answers with an unsuccessful response envelope."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"API Error [{code}]: {message}")
        self.code = code
        self.details = details or {}


# Configuration Errors
class ConfigurationError(AztecNodeException):
    """Raised when credentials or settings are unusable."""
    pass


# Operation Errors
class OperationError(AztecNodeException):
    """Base exception for resource/operation routing errors."""
    pass


class UnknownResourceError(OperationError):
    """Raised when the requested resource does not exist."""
    pass


class UnknownOperationError(OperationError):
    """Raised when a resource has no such operation."""
    pass


class InvalidParameterError(OperationError):
    """Raised when operation parameters fail validation."""
    pass


# Trigger Errors
class TriggerError(AztecNodeException):
    """Base exception for polling trigger errors."""
    pass


class UnknownEventError(TriggerError):
    """Raised when the trigger is configured with an unknown event."""
    pass
