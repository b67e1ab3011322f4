"""
SHA-1 hashing with optional salt and iterative re-hashing.

Round scheme (must stay stable, stored digests depend on it):

    round 1:  SHA1(salt || input)     salt only if given
    round n:  SHA1(round n-1)         never salted

Only the first round is salted. This is weaker than standard key stretching
(PBKDF2 and friends mix the salt into every round) but existing digests were
produced this way.

Each call and each extra round uses a fresh engine from the engine factory, so a
DigestHasher holds no running digest state and is safe to share across threads.
"""

import hmac
from typing import Optional, Union

from ..errors import InvalidInputError
from .engine import EngineFactory, get_default_engine_factory
from .salt import generate_salt as _generate_salt

BytesLike = Union[bytes, bytearray, memoryview]

TEXT_ENCODING = "utf-8"


def _contiguous(value: BytesLike) -> BytesLike:
    """Copy strided memoryviews into bytes; hash engines need C-contiguous buffers."""
    if isinstance(value, memoryview) and not value.c_contiguous:
        return value.tobytes()
    return value


def _as_bytes(value: Union[str, BytesLike], name: str) -> BytesLike:
    """Return value as bytes, encoding text as UTF-8."""
    if isinstance(value, str):
        return value.encode(TEXT_ENCODING)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _contiguous(value)
    if value is None:
        raise InvalidInputError(f"{name} argument is required")
    raise InvalidInputError(
        f"{name} argument must be str or bytes-like, got {type(value).__name__}"
    )


class DigestHasher:
    """
    Computes (optionally salted, optionally iterated) SHA-1 digests.

    The digest engine is injectable: pass an engine_factory returning fresh
    hashlib-compatible objects, or leave it out to use the process-wide SHA-1
    factory, which is resolved here so an unavailable algorithm fails at
    construction.
    """

    def __init__(self, engine_factory: Optional[EngineFactory] = None):
        """
        Initialize hasher.

        Args:
            engine_factory: Zero-argument callable returning a new digest engine

        Raises:
            DigestUnavailableError: If the default algorithm is unavailable
        """
        self._engine_factory = engine_factory or get_default_engine_factory()
        self.digest_size = self._engine_factory().digest_size

    def sha1(
        self,
        data: Union[str, BytesLike],
        salt: Optional[BytesLike] = None,
        iterations: int = 1,
    ) -> bytes:
        """
        Hash data, optionally salted and re-hashed.

        Args:
            data: Bytes to hash; str is encoded as UTF-8
            salt: Salt fed to the engine before input on the first round only.
                None means no salt; b"" is accepted and contributes nothing.
            iterations: Total number of rounds (>= 1)

        Returns:
            Raw digest bytes (20 for SHA-1)

        Raises:
            InvalidInputError: On missing input, bad salt type or iterations < 1
        """
        data = _as_bytes(data, "data")
        if salt is not None:
            if not isinstance(salt, (bytes, bytearray, memoryview)):
                raise InvalidInputError(
                    f"salt argument must be bytes-like or None, got {type(salt).__name__}"
                )
            salt = _contiguous(salt)
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
            raise InvalidInputError(
                f"iterations argument must be a positive integer (1 or larger), got {iterations!r}"
            )

        return self._digest(data, salt, iterations)

    def verify(
        self,
        data: Union[str, BytesLike],
        expected: BytesLike,
        salt: Optional[BytesLike] = None,
        iterations: int = 1,
    ) -> bool:
        """
        Check whether data hashes to an expected digest.

        Comparison runs in constant time.

        Args:
            data: Value to verify
            expected: Previously stored raw digest
            salt: Salt used for the stored digest
            iterations: Iterations used for the stored digest

        Returns:
            True if the recomputed digest equals expected, False otherwise

        Raises:
            InvalidInputError: On invalid arguments
        """
        if not isinstance(expected, (bytes, bytearray, memoryview)):
            raise InvalidInputError(
                f"expected argument must be bytes-like, got {type(expected).__name__}"
            )
        computed = self.sha1(data, salt, iterations)
        return hmac.compare_digest(computed, bytes(expected))

    def generate_salt(self, num_bytes: Optional[int] = None) -> bytes:
        """Generate a random salt (see digest_hasher.hashing.salt.generate_salt)."""
        return _generate_salt(num_bytes)

    def _digest(self, data: BytesLike, salt: Optional[BytesLike], iterations: int) -> bytes:
        engine = self._engine_factory()
        if salt is not None:
            engine.update(salt)
        engine.update(data)
        result = engine.digest()

        # Extra rounds re-hash the previous raw digest, unsalted
        for _ in range(1, iterations):
            engine = self._engine_factory()
            engine.update(result)
            result = engine.digest()

        return result


# Process-wide default hasher; resolving it here surfaces a missing SHA-1 at import
default_hasher = DigestHasher()


def sha1(
    data: Union[str, BytesLike],
    salt: Optional[BytesLike] = None,
    iterations: int = 1,
) -> bytes:
    """Hash data with the default hasher (see DigestHasher.sha1)."""
    return default_hasher.sha1(data, salt, iterations)


def verify(
    data: Union[str, BytesLike],
    expected: BytesLike,
    salt: Optional[BytesLike] = None,
    iterations: int = 1,
) -> bool:
    """Verify data against a stored digest with the default hasher."""
    return default_hasher.verify(data, expected, salt, iterations)
