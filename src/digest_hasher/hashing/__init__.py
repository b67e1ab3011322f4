# SHA-1 hashing and salt generation

from .engine import EngineFactory, get_default_engine_factory, resolve_engine_factory
from .hasher import DigestHasher, default_hasher, sha1, verify
from .salt import generate_salt

__all__ = [
    "DigestHasher",
    "EngineFactory",
    "default_hasher",
    "generate_salt",
    "get_default_engine_factory",
    "resolve_engine_factory",
    "sha1",
    "verify",
]
