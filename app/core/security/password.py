"""
Password hashing (bcrypt, auto-salted).
"""

import bcrypt

BCRYPT_ROUNDS = 12

# bcrypt only accepts passwords up to this many bytes (not characters).
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hashes a plain-text password for storage in ``User.password_hash``."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()

