"""
Random salt generation.

Salts come from the operating system CSPRNG via ``secrets``, which blocks until the
entropy pool is seeded and raises instead of returning predictable bytes.
"""

import secrets
from typing import Optional

from ..config import settings
from ..errors import InvalidInputError


def generate_salt(num_bytes: Optional[int] = None) -> bytes:
    """
    Generate random bytes for use as a salt.

    Uniqueness is statistical only; previously issued salts are not tracked.

    Args:
        num_bytes: Salt size in bytes (defaults to settings.default_salt_bytes)

    Returns:
        num_bytes cryptographically random bytes

    Raises:
        InvalidInputError: If num_bytes is not a positive integer
    """
    if num_bytes is None:
        num_bytes = settings.default_salt_bytes

    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int) or num_bytes <= 0:
        raise InvalidInputError(
            f"num_bytes argument must be a positive integer (1 or larger), got {num_bytes!r}"
        )

    return secrets.token_bytes(num_bytes)
