"""Test configuration and fixtures."""

import os
import tempfile

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


def _rsa_pem_pair():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return private_pem.decode(), public_pem.decode()


# Set up the environment BEFORE importing app modules: settings are read at import
_private_pem, _public_pem = _rsa_pem_pair()
_db_dir = tempfile.mkdtemp(prefix="dnsgate-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_db_dir}/test.db"
os.environ["ALGORITHM"] = "RS256"
os.environ["SERVER_PRIVATE_KEY"] = _private_pem
os.environ["SERVER_PUBLIC_KEY"] = _public_pem
os.environ["PASSWORD_PEPPER"] = "test-pepper"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-password"
os.environ["RESOLVER_API_KEY"] = ""
os.environ["DNSGATE_HOME"] = os.path.join(_db_dir, "cli-home")

from sqlmodel import SQLModel

from backend.app.core.database import engine
from backend.app import main  # noqa: F401  registers every table


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts from empty tables."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
