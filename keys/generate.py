"""
Generate the development RSA key pair the commerce service signs tokens with.

``services/commerce/config.py`` falls back to ``keys/dev.private.pem`` and
``keys/dev.public.pem`` when no JWT key environment variables are set, so
running this once is enough for local development and load-test rigs.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

KEYS_DIR = Path(__file__).resolve().parent
PRIVATE_KEY_PATH = KEYS_DIR / "dev.private.pem"
PUBLIC_KEY_PATH = KEYS_DIR / "dev.public.pem"


def write_key_pair(private_path: Path, public_path: Path, key_size: int = 2048) -> None:
    """Write a PKCS8 private key and its SubjectPublicKeyInfo public key."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    private_path.parent.mkdir(parents=True, exist_ok=True)
    private_path.write_bytes(
        private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    public_path.write_bytes(
        private_key.public_key().public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )


def main(argv: list[str] | None = None) -> int:
    """Generate keys, skipping when both files exist unless ``--force`` is given."""
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--force", action="store_true", help="Overwrite existing keys")
    args = parser.parse_args(argv)

    private_exists = PRIVATE_KEY_PATH.exists()
    public_exists = PUBLIC_KEY_PATH.exists()

    if private_exists and public_exists and not args.force:
        print(f"Keys already exist, skipping: {PRIVATE_KEY_PATH} / {PUBLIC_KEY_PATH}")
        return 0

    if private_exists != public_exists and not args.force:
        raise SystemExit("Only one key file exists. Re-run with --force to replace both.")

    write_key_pair(PRIVATE_KEY_PATH, PUBLIC_KEY_PATH)
    print(f"Generated: {PRIVATE_KEY_PATH}")
    print(f"Generated: {PUBLIC_KEY_PATH}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
