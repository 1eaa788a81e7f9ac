"""
Error handling policies for treewalker.

A policy turns an error-free callback ``fn(path, info)`` into the
``fn(path, info, error)`` callback the Walker expects, deciding on the way
what each stat or list failure means for the traversal. This keeps a
single traversal algorithm while letting callers pick fail-fast, lenient,
or thresholded behaviour.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from .core.info import EntryInfo
from .core.types import MustWalkFunc, WalkFunc
from .errors import ErrorThresholdExceeded, FailureKind, classify_failure

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement ``handle``; ``bind`` wraps a user callback so the
    policy sees every failure and the callback sees only successes.
    """

    @abstractmethod
    def handle(self, error: Exception, path: str, info: Optional[EntryInfo]) -> bool:
        """
        Handle a failure reported by the walker.

        Args:
            error: The exception the storage raised
            path: Path being processed when it failed
            info: Metadata of the path, or None when reading it failed

        Returns:
            True to continue the traversal (skipping the failed subtree),
            False to stop it. Raising aborts the traversal with that error.
        """
        pass

    def bind(self, fn: MustWalkFunc) -> WalkFunc:
        """
        Adapt an error-free callback to this policy.

        Args:
            fn: Callback receiving ``(path, info)`` for successful entries

        Returns:
            A callable suitable for ``Walker.walk``
        """
        return PolicyCallback(self, fn)


class PolicyCallback:
    """
    Walker callback that routes failures to a policy.

    Successful entries are forwarded to the wrapped callback; failures go
    to ``policy.handle`` and never reach it.
    """

    def __init__(self, policy: ErrorPolicy, fn: MustWalkFunc):
        self.policy = policy
        self.fn = fn

    def __call__(self, path: str, info: Optional[EntryInfo], error: Optional[Exception]) -> bool:
        if error is not None:
            return self.policy.handle(error, path, info)
        return self.fn(path, info)

    def __repr__(self) -> str:
        return f"PolicyCallback(policy={self.policy.__class__.__name__}, fn={self.fn!r})"


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    This is what ``Walker.walk_or_fail`` uses. The exception raised is
    the storage's own object, so callers can match on its type, message
    and identity.
    """

    def handle(self, error: Exception, path: str, info: Optional[EntryInfo]) -> bool:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that records errors and continues traversal.

    Paths that failed are skipped (for directories, their whole subtree)
    and recorded in ``errors`` and ``skipped_paths`` for later inspection.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every error
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle(self, error: Exception, path: str, info: Optional[EntryInfo]) -> bool:
        """Record the error and keep going."""
        self._record(error, path, info)
        return True

    def _record(self, error: Exception, path: str, info: Optional[EntryInfo]) -> Dict[str, Any]:
        kind = classify_failure(info)
        error_record = {
            'path': path,
            'kind': kind,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.errors.append(error_record)
        self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                logger.warning("Skipping inaccessible path '%s': %s", path, error)
            else:
                logger.warning("Error in %s for '%s': %s", kind.value, path, error)

        return error_record

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'stat_errors': sum(1 for e in self.errors if e['kind'] is FailureKind.STAT),
            'list_errors': sum(1 for e in self.errors if e['kind'] is FailureKind.LIST),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without logging, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(ContinueOnErrorsPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for every tolerated error
        """
        super().__init__(verbose=verbose)
        self.max_errors = max_errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def handle(self, error: Exception, path: str, info: Optional[EntryInfo]) -> bool:
        """Continue while under the threshold, otherwise raise."""
        if self.error_count >= self.max_errors:
            raise ErrorThresholdExceeded(self.max_errors, path) from error
        self._record(error, path, info)
        return True
