"""
Solidity source file discovery.

Lists the `.sol` files that sit directly in a contracts directory. Names are
returned bare (no directory part) because solc runs with the contracts
directory as its working directory.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

from .errors import ResolutionError

logger = logging.getLogger(__name__)


class SourceScanner:
    """
    Scans a directory for Solidity sources.

    The scanner:
    1. Enumerates the directory entries (no recursion)
    2. Skips entries whose name is not representable as text
    3. Keeps every entry whose name ends with the source suffix

    Only the name is checked, so a subdirectory called `foo.sol` is kept too.
    Results follow the directory enumeration order unless `sort` is set.
    """

    def __init__(self, suffix: str = ".sol", sort: bool = False):
        """
        Initialize source scanner.

        Args:
            suffix: File name suffix of compilable sources
            sort: Sort the result by name for a stable argument order
        """
        self.suffix = suffix
        self.sort = sort

    def scan(self, path: Union[str, Path], stage: str = "compile") -> List[str]:
        """
        List source file names under a directory.

        Args:
            path: Contracts directory
            stage: Operation name reported in errors

        Returns:
            Source file names, e.g. ["token.sol", "library.sol"]

        Raises:
            ResolutionError: If the directory cannot be read
        """
        sources = []

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    name = self._representable_name(entry.name)
                    if name is not None and name.endswith(self.suffix):
                        sources.append(name)
        except OSError as e:
            logger.error(f"Cannot read contracts directory {path}: {e}")
            raise ResolutionError(
                f"Contracts directory is not readable: {path} ({e})", stage
            ) from e

        if self.sort:
            sources.sort()

        logger.debug(f"Found {len(sources)} source file(s) in {path}")
        return sources

    @staticmethod
    def _representable_name(name: str):
        """Return the name, or None if it only decodes via surrogate escapes."""
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            return None
        return name
