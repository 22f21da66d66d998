"""
Query Configuration - Consolidated configuration management
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Union

from .validation import (
    ConfigValidationError,
    validate_attempts,
    validate_max_pages,
    validate_timeouts,
)


@dataclass
class QueryConfig:
    """Query configuration settings"""

    # Transaction behavior
    attempts: int = 1
    timeout: Union[float, List[float]] = 1.0

    # Master server enumeration
    max_pages: Optional[int] = None

    # Logging
    log_level: str = "WARNING"

    def timeouts(self) -> List[float]:
        """Per-attempt timeouts for one datagram exchange"""
        return validate_timeouts(self.attempts, self.timeout)

    def validate(self) -> 'QueryConfig':
        """Check every setting, raising ConfigValidationError on the first bad one"""
        validate_attempts(self.attempts)
        self.timeouts()
        validate_max_pages(self.max_pages)
        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigValidationError(f"Unknown log level: {self.log_level}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'attempts': self.attempts,
            'timeout': self.timeout,
            'max_pages': self.max_pages,
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QueryConfig':
        """Create from dictionary"""
        return cls(**data)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
