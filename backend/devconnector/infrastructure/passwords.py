"""Password Hashing — thin wrapper over bcrypt.

Invariants:
    - Plaintext passwords never stored or logged
    - verify_password never raises on a malformed stored hash; it returns False
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 10) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False
