# books_api/utils/ids.py
import math
import secrets


def generate_id(length: int = 8) -> str:
    """Random URL-safe token of exactly `length` characters."""
    if length <= 0:
        raise ValueError("length must be positive")
    # token_urlsafe encodes n bytes as ceil(4n/3) base64 chars
    return secrets.token_urlsafe(math.ceil(length * 3 / 4))[:length]
