"""
Configuration validation utilities
"""

from typing import List, Optional, Sequence, Union


class ConfigValidationError(ValueError):
    """Raised when configuration validation fails"""
    pass


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int, allow_zero: bool = False) -> int:
    """Validate port number

    Port 0 only appears in the master server's end-of-list sentinel, so it is
    rejected unless explicitly allowed.
    """
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigValidationError("Port must be an integer")

    minimum = 0 if allow_zero else 1
    if port < minimum or port > 0xFFFF:
        raise ConfigValidationError(f"Port must be between {minimum} and 65535")

    return port


def validate_attempts(attempts: int) -> int:
    """Validate number of send attempts"""
    if isinstance(attempts, bool) or not isinstance(attempts, int):
        raise ConfigValidationError("Attempts must be an integer")

    if attempts < 1:
        raise ConfigValidationError("Attempts must be at least 1")

    return attempts


def validate_timeout(timeout: float) -> float:
    """Validate timeout value"""
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigValidationError("Timeout must be a number")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)


def validate_timeouts(attempts: int, timeout: Union[float, Sequence[float]]) -> List[float]:
    """Expand a timeout setting into one timeout per attempt.

    A single number applies to every attempt. A list must hold exactly one
    entry per attempt.
    """
    attempts = validate_attempts(attempts)

    if isinstance(timeout, (list, tuple)):
        if len(timeout) != attempts:
            raise ConfigValidationError(
                f"Number of attempts ({attempts}) does not match the length "
                f"of the timeout list ({len(timeout)})"
            )
        return [validate_timeout(value) for value in timeout]

    return [validate_timeout(timeout)] * attempts


def validate_max_pages(max_pages: Optional[int]) -> Optional[int]:
    """Validate the master server page ceiling (None means unbounded)"""
    if max_pages is None:
        return None

    if isinstance(max_pages, bool) or not isinstance(max_pages, int):
        raise ConfigValidationError("Max pages must be an integer or None")

    if max_pages < 1:
        raise ConfigValidationError("Max pages must be at least 1")

    return max_pages
