"""
Writes a .env for a new DNSGate deployment from .env.example.

Fills in the operator JWT signing keys, the password pepper and the shared
key the resolver presents on /access/*. Every other line is copied as is.

    python setup_env.py [--force]
"""
import secrets
import sys
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

TEMPLATE = Path(".env.example")
TARGET = Path(".env")


def jwt_signing_keys(key_size: int = 4096) -> tuple[str, str]:
    """RS256 key pair as PEM strings with newlines escaped for a dotenv value."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return (
        private_pem.decode().replace("\n", "\\n"),
        public_pem.decode().replace("\n", "\\n"),
    )


def render(template: str, values: dict[str, str]) -> str:
    """Replaces the value of each KEY= line whose key appears in values."""
    lines = []
    for line in template.splitlines():
        key, sep, _ = line.partition("=")
        if sep and key.strip() in values:
            line = f"{key.strip()}={values[key.strip()]}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def main(argv: list[str]) -> int:
    if not TEMPLATE.exists():
        print(f"{TEMPLATE} not found; run this from the repository root.")
        return 1
    if TARGET.exists() and "--force" not in argv:
        print(f"{TARGET} already exists. Re-run with --force to replace it.")
        return 1

    private_key, public_key = jwt_signing_keys()
    values = {
        "SERVER_PRIVATE_KEY": f'"{private_key}"',
        "SERVER_PUBLIC_KEY": f'"{public_key}"',
        "PASSWORD_PEPPER": secrets.token_urlsafe(32),
        "RESOLVER_API_KEY": secrets.token_urlsafe(32),
    }
    TARGET.write_text(render(TEMPLATE.read_text(), values))
    TARGET.chmod(0o600)

    print(f"Wrote {TARGET}. Give RESOLVER_API_KEY to the resolver and change ADMIN_PASSWORD.")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
