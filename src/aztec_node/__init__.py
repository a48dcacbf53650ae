"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "Aztec Node Team"
__description__ = "Aztec privacy-layer automation node: key, note and API tooling"

from .core.keys import KeyDerivation, AccountKeys, KeyPair, KeyType
from .core.commitment import NoteCommitment, NoteData
from .core.cipher import NoteCipher, EncryptedNote
from .config import AztecSettings, get_settings
from .transport.client import AztecClient
from .node import AztecNode
from .trigger import AztecTrigger, TriggerParameters, PollState

__all__ = [
    "KeyDerivation",
    "AccountKeys",
    "KeyPair",
    "KeyType",
    "NoteCommitment",
    "NoteData",
    "NoteCipher",
    "EncryptedNote",
    "AztecSettings",
    "get_settings",
    "AztecClient",
    "AztecNode",
    "AztecTrigger",
    "TriggerParameters",
    "PollState",
]
