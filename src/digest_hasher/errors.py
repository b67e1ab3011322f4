"""Exceptions raised by the digest hasher."""


class DigestHasherError(Exception):
    """Base class for all digest hasher errors."""


class DigestUnavailableError(DigestHasherError, RuntimeError):
    """The required digest algorithm is not provided by this runtime.

    Raised once, when the digest engine is first requested. Not retryable.
    """


class InvalidInputError(DigestHasherError, ValueError):
    """A caller-supplied argument violates a precondition."""
