"""Error taxonomy for riokeys."""


class RioError(Exception):
    """Base class for riokeys failures."""


class TransportError(RioError):
    """Raised when the HTTP request itself fails (connection, DNS, TLS)."""


class DecodeError(RioError, ValueError):
    """Raised when a response body does not match the expected shape."""


class CacheIOError(RioError, OSError):
    """Raised when the cache file cannot be read or written."""


class CorruptCacheError(RioError, ValueError):
    """Raised when the cache file content is not a valid run cache.

    The cache store recovers from this itself; it never reaches the CLI.
    """
