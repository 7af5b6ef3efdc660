"""
Plaintext password hashing and verification.

Thin wrappers over Django's hasher framework so that views never touch
hashing details.  Plaintext values are never stored or logged.
"""
from typing import Optional

from django.contrib.auth.hashers import check_password, make_password

from portal.hashers import PortalBCryptPasswordHasher

COST_FACTOR = PortalBCryptPasswordHasher.rounds

# Bare bcrypt hashes carry one of these prefixes and no Django algorithm tag
RAW_BCRYPT_PREFIXES = ('$2a$', '$2b$', '$2y$')


def hash_password(plaintext: str) -> str:
    return make_password(plaintext, hasher=PortalBCryptPasswordHasher.algorithm)


def verify_password(plaintext: str, encoded: Optional[str]) -> bool:
    """Return True when ``plaintext`` matches the stored hash.

    A missing hash never verifies.  Bare bcrypt hashes are accepted
    alongside Django-encoded ones.
    """
    if not plaintext or not encoded:
        return False
    if encoded.startswith(RAW_BCRYPT_PREFIXES):
        encoded = f'{PortalBCryptPasswordHasher.algorithm}${encoded}'
    return check_password(plaintext, encoded)
