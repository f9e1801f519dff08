import uuid

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash password using bcrypt"""
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash"""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
    except (ValueError, TypeError):
        # Malformed stored hash
        return False


def random_str() -> str:
    """Random 32 character hex string used for tokens and generated passwords"""
    return uuid.uuid4().hex
