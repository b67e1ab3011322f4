"""
Digest engine resolution.

A digest engine is a hashlib object: it accumulates bytes with update() and emits
the digest on finalization. Engines carry running state, so they are never shared
between calls. Instead the module resolves an engine *factory* once and every
hashing call builds its own engine from it.
"""

import functools
import hashlib
from typing import Callable, Optional

import structlog

from ..errors import DigestUnavailableError
from ..version import DIGEST_ALGORITHM

logger = structlog.get_logger(__name__)

# Callable returning a fresh hashlib engine
EngineFactory = Callable[[], "hashlib._Hash"]

# Singleton for the default (SHA-1) engine factory
_default_factory: Optional[EngineFactory] = None


def resolve_engine_factory(algorithm: str = DIGEST_ALGORITHM) -> EngineFactory:
    """
    Resolve a factory of fresh digest engines for the given algorithm.

    The algorithm is probed once here so that a missing primitive fails at
    initialization rather than on the first hashing call.

    Args:
        algorithm: hashlib algorithm name

    Returns:
        Zero-argument callable returning a new engine

    Raises:
        DigestUnavailableError: If the runtime does not provide the algorithm
    """
    try:
        hashlib.new(algorithm)
    except ValueError as e:
        logger.error("digest_algorithm_unavailable", algorithm=algorithm, error=str(e))
        raise DigestUnavailableError(
            f"unexpected exception creating digest engine for [{algorithm}]"
        ) from e

    return functools.partial(hashlib.new, algorithm)


def get_default_engine_factory() -> EngineFactory:
    """
    Get or resolve the SHA-1 engine factory (singleton pattern).

    Returns:
        Factory producing fresh SHA-1 engines
    """
    global _default_factory
    if _default_factory is None:
        _default_factory = resolve_engine_factory()
    return _default_factory
