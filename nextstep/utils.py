"""
Utility functions for the NextStep app.
"""

import hashlib
import time

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _sha(text: str) -> str:
    """Computes SHA256 hash of a string."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def to_base36(n: int) -> str:
    if n < 0:
        raise ValueError("negative numbers have no base36 form here")
    digits = ""
    while True:
        n, r = divmod(n, 36)
        digits = _BASE36[r] + digits
        if n == 0:
            return digits


def now_ms() -> int:
    return int(time.time() * 1000)


def portfolio_slug(user_id: str, timestamp_ms: int) -> str:
    """Share slug for a generated portfolio: user prefix + base36 timestamp."""
    return f"{user_id[:8]}-{to_base36(timestamp_ms)}"
