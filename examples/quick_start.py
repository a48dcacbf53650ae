#!/usr/bin/env python3
"""
Quick start guide for the Aztec node crypto core.

Run this to see keys, an address, a note and its nullifier derived
locally. No network access is needed.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from aztec_node.constants import DEFAULT_TOKENS
from aztec_node.core.cipher import NoteCipher
from aztec_node.core.commitment import NoteCommitment
from aztec_node.core.keys import KeyDerivation


def main():
    """Run a simple example of local key and note handling."""
    
    print("=" * 70)
    print("AZTEC NODE QUICK START EXAMPLE")
    print("=" * 70)
    print()
    
    # Step 1: Create account material
    print("Step 1: Create an account")
    print("-" * 70)
    account = KeyDerivation.create_account_material()
    print(f"✓ Address: {account.address}")
    print(f"  Spending public key: {account.keys.spending_key.public_key}")
    print(f"  Viewing public key:  {account.keys.viewing_key.public_key}")
    print()
    
    # Step 2: Create a note
    print("Step 2: Create a 1000-unit ETH note")
    print("-" * 70)
    note = NoteCommitment.create_note(1000, DEFAULT_TOKENS["ETH"], account.address)
    print(f"✓ Commitment: {note.commitment}")
    print()
    
    # Step 3: Nullify it
    print("Step 3: Compute the nullifier at position 0")
    print("-" * 70)
    nullifier = NoteCommitment.compute_nullifier(
        note.commitment, account.keys.nullifier_key.private_key, 0
    )
    print(f"✓ Nullifier: {nullifier}")
    print()
    
    # Step 4: Encrypt note data for the viewing key
    print("Step 4: Encrypt note data for the owner's viewing key")
    print("-" * 70)
    encrypted = NoteCipher.encrypt(note.commitment, account.keys.viewing_key.public_key)
    print(f"✓ Ciphertext: {encrypted.ciphertext[:34]}...")
    print(f"  Ephemeral public key: {encrypted.ephemeral_public_key}")
    print(f"  Nonce: {encrypted.nonce}")
    print()


if __name__ == "__main__":
    main()
