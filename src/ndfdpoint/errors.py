from __future__ import annotations


class NdfdError(Exception):
    """Base class for every error raised by the NDFD client."""


class InvalidInputError(NdfdError, ValueError):
    """Caller supplied a value the feed cannot be queried with."""


class UpstreamError(NdfdError):
    """The feed was unreachable or returned something we could not read."""
