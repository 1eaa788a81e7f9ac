"""Configuration system for treewalker.

This module defines how users of the high-level API choose what happens
when the storage fails during a traversal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .error_policies import (
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ErrorPolicy,
    FailFastPolicy,
    ThresholdPolicy,
)


class ErrorMode(Enum):
    """How stat/list failures are treated.

    Callers who want to see every failure themselves use
    ``Walker.walk`` directly instead.
    """
    FAIL_FAST = "fail_fast"     # Raise the first storage error
    CONTINUE = "continue"       # Skip failed paths, log a warning
    COLLECT = "collect"         # Skip failed paths silently, keep a record
    THRESHOLD = "threshold"     # Skip failed paths until max_errors is reached


@dataclass
class WalkConfig:
    """Complete configuration for a high-level traversal."""

    # Error handling
    error_mode: ErrorMode = ErrorMode.FAIL_FAST
    max_errors: Optional[int] = None  # Required for THRESHOLD

    # Reporting
    verbose: bool = True  # Log skipped paths (CONTINUE, THRESHOLD)

    @classmethod
    def strict(cls) -> 'WalkConfig':
        """Create config that aborts on the first error."""
        return cls(error_mode=ErrorMode.FAIL_FAST)

    @classmethod
    def lenient(cls, verbose: bool = False) -> 'WalkConfig':
        """Create config that skips whatever cannot be read.

        Args:
            verbose: Whether to log each skipped path

        Returns:
            WalkConfig that never aborts on storage errors
        """
        mode = ErrorMode.CONTINUE if verbose else ErrorMode.COLLECT
        return cls(error_mode=mode, verbose=verbose)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.error_mode, ErrorMode):
            errors.append(f"unknown error_mode: {self.error_mode!r}")

        if self.error_mode == ErrorMode.THRESHOLD and self.max_errors is None:
            errors.append("max_errors required when error_mode is THRESHOLD")

        if self.max_errors is not None:
            if self.max_errors < 0:
                errors.append("max_errors cannot be negative")
            if self.error_mode != ErrorMode.THRESHOLD:
                errors.append("max_errors only applies when error_mode is THRESHOLD")

        return errors

    def create_policy(self) -> ErrorPolicy:
        """Build a fresh error policy matching this configuration."""
        if self.error_mode == ErrorMode.CONTINUE:
            return ContinueOnErrorsPolicy(verbose=self.verbose)
        if self.error_mode == ErrorMode.COLLECT:
            return CollectErrorsPolicy()
        if self.error_mode == ErrorMode.THRESHOLD:
            return ThresholdPolicy(max_errors=self.max_errors, verbose=self.verbose)
        return FailFastPolicy()
