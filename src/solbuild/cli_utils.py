"""CLI utility functions for solbuild.

This module provides common utilities used across CLI commands including:
- Error handling and formatting
- Exit code selection per failure kind
- Directory argument validation
"""

import logging
import sys
from pathlib import Path

from solbuild.build.errors import (
    ExecutionError,
    LibrarySpecifierError,
    ResolutionError,
    SolcError,
    SpawnError,
    UnresolvedLibraryError,
)

EXIT_EXECUTION_FAILED = 1
EXIT_USAGE = 2
EXIT_SPAWN_FAILED = 127
EXIT_INTERRUPTED = 130


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Compilation failed")
            message: Error message details
        """
        print()
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}")
        print()
        print(message)
        print()

    @staticmethod
    def print_success(message: str) -> None:
        print()
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def print_warning(message: str) -> None:
        print()
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def exit_code_for(error: Exception) -> int:
        """Map a failure to the CLI exit status."""
        if isinstance(error, SpawnError):
            return EXIT_SPAWN_FAILED
        if isinstance(error, (ResolutionError, LibrarySpecifierError)):
            return EXIT_USAGE
        return EXIT_EXECUTION_FAILED

    @staticmethod
    def handle_solc_error(error: SolcError) -> None:
        """Report a compile/link failure and exit.

        Args:
            error: The SolcError to handle
        """
        titles = {
            ResolutionError: "Error: Cannot resolve contracts directory",
            SpawnError: "Error: Cannot start solc",
            ExecutionError: "Error: solc failed",
            UnresolvedLibraryError: "Error: Unmatched library specifier",
        }
        title = next(
            (t for cls, t in titles.items() if isinstance(error, cls)),
            "Error",
        )
        ErrorFormatter.print_error(f"{title} ({error.stage})", str(error))
        if isinstance(error, SpawnError):
            print("Make sure solc is installed and on your PATH.")
        sys.exit(ErrorFormatter.exit_code_for(error))

    @staticmethod
    def handle_specifier_error(error: LibrarySpecifierError) -> None:
        ErrorFormatter.print_error("Error: Invalid library specifier", str(error))
        sys.exit(EXIT_USAGE)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(EXIT_INTERRUPTED)

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:")
            print(traceback.format_exc())

        sys.exit(1)


class PathValidator:
    """Validates directory arguments."""

    @staticmethod
    def validate_contracts_dir(contracts_dir: Path) -> None:
        """Validate that the contracts directory exists and is a directory.

        Args:
            contracts_dir: Path to validate

        Raises:
            SystemExit: If path doesn't exist or isn't a directory
        """
        if not contracts_dir.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path does not exist: {contracts_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(EXIT_USAGE)
        if not contracts_dir.is_dir():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path is not a directory: {contracts_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(EXIT_USAGE)
