"""
Exceptions raised by pysourcequery
"""

from typing import List, Optional, Sequence

from .config.validation import ConfigValidationError


class QueryError(Exception):
    """Base class for query failures"""
    pass


class TransportError(QueryError):
    """A datagram could not be sent or no reply could be received"""

    def __init__(self, message: str, address=None):
        super().__init__(message)
        self.address = address


class QueryTimeoutError(TransportError):
    """Every attempt of a datagram exchange timed out"""

    def __init__(self, message: str, address=None, timeouts: Optional[Sequence[float]] = None):
        super().__init__(message, address)
        self.timeouts: List[float] = list(timeouts or [])

    @property
    def attempts(self) -> int:
        return len(self.timeouts)


class DecodeError(QueryError):
    """A reply datagram is malformed"""
    pass


class EnumerationLimitError(QueryError):
    """Master server enumeration reached the page ceiling before the end of the list"""

    def __init__(self, message: str, addresses=None):
        super().__init__(message)
        self.addresses = list(addresses or [])


__all__ = [
    'QueryError',
    'TransportError',
    'QueryTimeoutError',
    'DecodeError',
    'EnumerationLimitError',
    'ConfigValidationError',
]
