"""Errors raised by the solc orchestration layer.

Every failure aborts the single compile or link operation it occurred in.
Nothing here is retried; callers decide whether to exit or try again.
"""

from typing import Optional


class SolcError(Exception):
    """Base class for compile/link failures."""

    def __init__(self, message: str, stage: str):
        super().__init__(message)
        self.stage = stage


class ResolutionError(SolcError):
    """Raised when a source path cannot be canonicalized or read."""
    pass


class SpawnError(SolcError):
    """Raised when the solc process could not be started."""
    pass


class ExecutionError(SolcError):
    """Raised when solc ran but exited with a non-zero status."""

    def __init__(self, message: str, stage: str, returncode: Optional[int] = None):
        super().__init__(message, stage)
        self.returncode = returncode


class UnresolvedLibraryError(SolcError):
    """Raised in strict link mode for specifiers that match no placeholder."""

    def __init__(self, message: str, stage: str, specifiers: list):
        super().__init__(message, stage)
        self.specifiers = specifiers


class LibrarySpecifierError(ValueError):
    """Raised for a library specifier that is not `unit:name:address`."""
    pass
