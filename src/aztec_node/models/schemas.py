"""Pydantic data models and enums for the Aztec node."""

from pydantic import BaseModel
from typing import Any, Dict, Generic, Optional, TypeVar
from enum import Enum

T = TypeVar("T")


class Network(str, Enum):
    """Aztec network selection."""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    CUSTOM = "custom"


class AccountType(str, Enum):
    """Credential access level."""
    SPENDING = "spending"
    VIEWING = "viewing"


class Resource(str, Enum):
    """Resources exposed by the node."""
    ACCOUNTS = "accounts"
    PRIVATE_TOKENS = "privateTokens"
    PUBLIC_TOKENS = "publicTokens"
    NOTES = "notes"
    TRANSACTIONS = "transactions"
    PRIVATE_DEFI = "privateDeFi"
    PROOFS = "proofs"
    NETWORK = "network"
    BRIDGES = "bridges"
    NOIR_CONTRACTS = "noirContracts"
    UTILITY = "utility"


class NoteStatus(str, Enum):
    """Note lifecycle status."""
    PENDING = "pending"
    COMMITTED = "committed"
    NULLIFIED = "nullified"


class TransactionStatus(str, Enum):
    """Transaction status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class ProofType(str, Enum):
    """Proof circuits the API can generate."""
    TRANSFER = "transfer"
    SHIELD = "shield"
    UNSHIELD = "unshield"
    SWAP = "swap"
    BRIDGE = "bridge"
    CONTRACT_CALL = "contractCall"
    CUSTOM = "custom"


class NoteTransactionType(str, Enum):
    """How a spent note is consumed."""
    TRANSFER = "transfer"
    UNSHIELD = "unshield"
    SWAP = "swap"
    BRIDGE = "bridge"


class FeeTransactionType(str, Enum):
    """Transaction kinds accepted by fee estimation."""
    PRIVATE_TRANSFER = "privateTransfer"
    PUBLIC_TRANSFER = "publicTransfer"
    SHIELD = "shield"
    UNSHIELD = "unshield"
    SWAP = "swap"
    BRIDGE = "bridge"
    CONTRACT_CALL = "contractCall"


class FeePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class VerifierType(str, Enum):
    STANDARD = "standard"
    RECURSIVE = "recursive"
    AGGREGATED = "aggregated"


class PendingTxFilter(str, Enum):
    """Filter for the pending transaction pool."""
    ALL = "all"
    TRANSFER = "transfer"
    SHIELD_UNSHIELD = "shieldUnshield"
    SWAP = "swap"
    BRIDGE = "bridge"
    CONTRACT_CALL = "contractCall"


class TimeRange(str, Enum):
    LAST_24H = "24h"
    LAST_7D = "7d"
    LAST_30D = "30d"
    ALL = "all"


class PositionStatus(str, Enum):
    """Bridge position status filter."""
    ALL = "all"
    ACTIVE = "active"
    CLOSED = "closed"
    PENDING = "pending"


class DestinationChain(str, Enum):
    ETHEREUM = "ethereum"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    POLYGON = "polygon"


class TriggerEvent(str, Enum):
    """Events the polling trigger can watch."""
    NEW_PRIVATE_TRANSACTION = "newPrivateTransaction"
    SHIELD_UNSHIELD_EVENT = "shieldUnshieldEvent"
    NOTE_RECEIVED = "noteReceived"
    ROLLUP_PUBLISHED = "rollupPublished"
    BRIDGE_COMPLETION = "bridgeCompletion"


class ShieldType(str, Enum):
    BOTH = "both"
    SHIELD = "shield"
    UNSHIELD = "unshield"


class NoteKind(str, Enum):
    ALL = "all"
    VALUE = "value"
    CUSTOM = "custom"


class BridgeStatusFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    FAILED = "failed"


class ApiErrorDetail(BaseModel):
    """Error block of an API response envelope."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ApiEnvelope(BaseModel, Generic[T]):
    """Standard `{success, data, error}` response envelope."""
    success: bool
    data: Optional[T] = None
    error: Optional[ApiErrorDetail] = None
