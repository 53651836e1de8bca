#!/usr/bin/env python3
"""
Create the Ed25519 key pair used for storefront login sessions.

Tokens are signed with session_private.pem when a user logs in and
checked against session_public.pem on each request. Without these files
the storefront generates a throwaway pair at startup.

Usage:
    python scripts/generate_keys.py [--force]
"""

import os
import sys
from pathlib import Path

from identity import generate_session_keys

PRIVATE_KEY_NAME = "session_private.pem"
PUBLIC_KEY_NAME = "session_public.pem"


def write_session_keys(output_dir: Path) -> tuple[Path, Path]:
    """
    Write a fresh session key pair into output_dir.

    Returns:
        (private key path, public key path)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    private_pem, public_pem = generate_session_keys()

    private_path = output_dir / PRIVATE_KEY_NAME
    public_path = output_dir / PUBLIC_KEY_NAME

    private_path.write_text(private_pem)
    os.chmod(private_path, 0o600)
    public_path.write_text(public_pem)

    return private_path, public_path


def main():
    keys_dir = Path(__file__).resolve().parent.parent / "config" / "keys"
    force = "--force" in sys.argv[1:]

    if (keys_dir / PRIVATE_KEY_NAME).exists() and not force:
        answer = input(f"Session keys already present in {keys_dir}. Replace them? [y/N]: ")
        if answer.strip().lower() != "y":
            print("Keeping existing keys.")
            return

    private_path, public_path = write_session_keys(keys_dir)

    print("Wrote session keys:")
    print(f"  {private_path}")
    print(f"  {public_path}")
    print("\nAdd to config/.env:")
    print(f"  SESSION_PRIVATE_KEY_PATH={private_path}")
    print(f"  SESSION_PUBLIC_KEY_PATH={public_path}")
    print("\nReplacing the keys logs out every current session.")


if __name__ == "__main__":
    main()
