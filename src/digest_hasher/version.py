"""
Version constants for the digest hasher.

Stored digests depend on the exact algorithm and round scheme, so any change to
either must bump HASHER_VERSION.
"""

__version__ = "1.0.0"

HASHER_VERSION = "digest-hasher-1.0.0"

# Digest algorithm (hashlib name) and its output size in bytes
DIGEST_ALGORITHM = "sha1"
DIGEST_SIZE = 20
