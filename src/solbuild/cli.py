"""
Command-line interface for solbuild.

This module provides the `solbuild` CLI, a thin wrapper over
`solbuild.compile` and `solbuild.link`.
"""

import argparse
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import solbuild
from solbuild.build.errors import LibrarySpecifierError, SolcError
from solbuild.cli_utils import ErrorFormatter, PathValidator, configure_logging
from solbuild.config import SolcConfig


@dataclass
class CompileArgs:
    """Arguments for the compile command."""

    contracts_dir: Path
    sort: bool = False
    optimize: bool = True
    verbose: bool = False


@dataclass
class LinkArgs:
    """Arguments for the link command."""

    target: str
    contracts_dir: Path
    libraries: List[str] = field(default_factory=list)
    strict: bool = False
    verbose: bool = False


def compile_command(args: CompileArgs) -> None:
    """Compile every .sol file in a directory.

    Examples:
        solbuild compile                  # Compile contracts in current directory
        solbuild compile contracts/       # Compile a specific directory
        solbuild compile --sort           # Pass sources to solc in sorted order
    """
    try:
        config = SolcConfig(sort_sources=args.sort, optimize=args.optimize)

        if args.verbose:
            print(f"Compiling contracts in: {args.contracts_dir}")
            print()

        start_time = time.time()
        result = solbuild.compile(args.contracts_dir, config=config)
        compile_time = time.time() - start_time

        ErrorFormatter.print_success("Compilation successful!")
        artifacts = result.artifacts()
        if artifacts:
            print()
            print("Artifacts:")
            for name in artifacts:
                print(f"  {name}.bin, {name}.abi")
        print()
        print(f"Compile time: {compile_time:.2f}s")
        sys.exit(0)

    except SolcError as e:
        ErrorFormatter.handle_solc_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def link_command(args: LinkArgs) -> None:
    """Link deployed library addresses into a compiled .bin file.

    Examples:
        solbuild link LibraryTest.bin -l test.sol:TestLibrary:<address>
        solbuild link Token.bin -C contracts/ -l a.sol:A:<addr> -l b.sol:B:<addr>
        solbuild link Token.bin -l a.sol:A:<addr> --strict
    """
    try:
        config = SolcConfig(strict_link=args.strict)

        if args.verbose:
            print(f"Linking: {args.contracts_dir / args.target}")
            for library in args.libraries:
                print(f"  {library}")
            print()

        result = solbuild.link(args.libraries, args.target, args.contracts_dir, config=config)

        ErrorFormatter.print_success(f"Linked {result.target_path}")
        sys.exit(0)

    except LibrarySpecifierError as e:
        ErrorFormatter.handle_specifier_error(e)
    except SolcError as e:
        ErrorFormatter.handle_solc_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def main(argv: Optional[List[str]] = None) -> None:
    """solbuild - compile and link Solidity contracts with solc."""
    parser = argparse.ArgumentParser(
        prog="solbuild",
        description="solbuild - compile and link Solidity contracts with solc",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"solbuild {solbuild.__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Compile command
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile all .sol files in a directory",
    )
    compile_parser.add_argument(
        "contracts_dir",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Contracts directory (default: current directory)",
    )
    compile_parser.add_argument(
        "--sort",
        action="store_true",
        help="Pass source files to solc in sorted order",
    )
    compile_parser.add_argument(
        "--no-optimize",
        action="store_true",
        help="Do not pass --optimize to solc",
    )
    compile_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Link command
    link_parser = subparsers.add_parser(
        "link",
        help="Link library addresses into a compiled .bin file",
    )
    link_parser.add_argument(
        "target",
        help="Bytecode file to link in place, relative to the contracts directory",
    )
    link_parser.add_argument(
        "-l",
        "--library",
        dest="libraries",
        action="append",
        default=[],
        help="Library mapping <unit>:<library>:<address> (repeatable)",
    )
    link_parser.add_argument(
        "-C",
        "--contracts-dir",
        dest="contracts_dir",
        type=Path,
        default=Path.cwd(),
        help="Directory containing the target (default: current directory)",
    )
    link_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if a library specifier matches no placeholder in the target",
    )
    link_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Parse arguments
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    configure_logging(parsed_args.verbose)
    PathValidator.validate_contracts_dir(parsed_args.contracts_dir)

    # Execute command
    if parsed_args.command == "compile":
        compile_args = CompileArgs(
            contracts_dir=parsed_args.contracts_dir,
            sort=parsed_args.sort,
            optimize=not parsed_args.no_optimize,
            verbose=parsed_args.verbose,
        )
        compile_command(compile_args)
    elif parsed_args.command == "link":
        link_args = LinkArgs(
            target=parsed_args.target,
            contracts_dir=parsed_args.contracts_dir,
            libraries=parsed_args.libraries,
            strict=parsed_args.strict,
            verbose=parsed_args.verbose,
        )
        link_command(link_args)


if __name__ == "__main__":
    main()
