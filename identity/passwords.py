"""Password hashing (PBKDF2-SHA256)"""

import base64
import hashlib
import hmac
import os

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 260_000


def hash_password(password: str, iterations: int = ITERATIONS) -> str:
    """Hash a password as algorithm$iterations$salt$hash"""
    salt = base64.b64encode(os.urandom(16)).decode()
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    encoded = base64.b64encode(digest).decode()
    return f"{ALGORITHM}${iterations}${salt}${encoded}"


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a stored hash"""
    try:
        algorithm, iterations, salt, encoded = hashed.split("$", 3)
        iterations = int(iterations)
    except ValueError:
        return False

    if algorithm != ALGORITHM:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return hmac.compare_digest(base64.b64encode(digest).decode(), encoded)
