"""
SHA-1 digests with optional salt and iterative re-hashing, plus secure salt generation.

Digests are returned as raw bytes; encode them (hex, base64) as needed.
"""

from .errors import DigestHasherError, DigestUnavailableError, InvalidInputError
from .hashing import DigestHasher, default_hasher, generate_salt, sha1, verify
from .version import DIGEST_ALGORITHM, DIGEST_SIZE, HASHER_VERSION, __version__

__all__ = [
    "DigestHasher",
    "DigestHasherError",
    "DigestUnavailableError",
    "InvalidInputError",
    "DIGEST_ALGORITHM",
    "DIGEST_SIZE",
    "HASHER_VERSION",
    "__version__",
    "default_hasher",
    "generate_salt",
    "sha1",
    "verify",
]
