"""Server address value type."""

from dataclasses import dataclass
from typing import Tuple, Union

from ..config.validation import ConfigValidationError, validate_host, validate_port
from ..protocol.constants import SENTINEL_HOST, SENTINEL_PORT


@dataclass(frozen=True)
class Address:
    """A host and UDP port, rendered as ``host:port``."""

    host: str
    port: int

    def __post_init__(self):
        validate_host(self.host)
        validate_port(self.port, allow_zero=True)

    @classmethod
    def parse(cls, text: str) -> 'Address':
        """Parse ``host:port`` text."""
        if not isinstance(text, str) or ':' not in text:
            raise ConfigValidationError(f"Address must look like host:port, got {text!r}")
        host, _, port = text.rpartition(':')
        try:
            port_number = int(port)
        except ValueError:
            raise ConfigValidationError(f"Invalid port in address {text!r}") from None
        return cls(host, port_number)

    @classmethod
    def coerce(cls, value: Union['Address', str, Tuple[str, int]]) -> 'Address':
        """Accept an Address, a ``host:port`` string or a ``(host, port)`` tuple."""
        if isinstance(value, Address):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise ConfigValidationError(f"Cannot use {value!r} as an address")

    @property
    def is_sentinel(self) -> bool:
        """True for ``0.0.0.0:0``, the master server's end-of-list marker."""
        return self == SENTINEL

    def as_tuple(self) -> Tuple[str, int]:
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


SENTINEL = Address(SENTINEL_HOST, SENTINEL_PORT)
