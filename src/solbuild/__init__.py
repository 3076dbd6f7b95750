"""solbuild - compile and link Solidity contracts with solc."""

from pathlib import Path
from typing import Iterable, Optional, Union

from .build import (
    CompileResult,
    ExecutionError,
    LibrarySpecifier,
    LibrarySpecifierError,
    LinkResult,
    ResolutionError,
    SolcError,
    SpawnError,
    UnresolvedLibraryError,
)
from .config import SolcConfig

__version__ = "0.1.0"


def compile(path: Union[str, Path], config: Optional[SolcConfig] = None) -> CompileResult:
    """Compile all Solidity files in `path`, writing .bin/.abi files next to them."""
    return (config or SolcConfig()).create_compiler().compile(path)


def link(
    libraries: Iterable[Union[str, LibrarySpecifier]],
    target: str,
    path: Union[str, Path],
    config: Optional[SolcConfig] = None,
) -> LinkResult:
    """Link libraries into the bytecode file `target` (relative to `path`) in place."""
    return (config or SolcConfig()).create_linker().link(libraries, target, path)


__all__ = [
    "CompileResult",
    "ExecutionError",
    "LibrarySpecifier",
    "LibrarySpecifierError",
    "LinkResult",
    "ResolutionError",
    "SolcConfig",
    "SolcError",
    "SpawnError",
    "UnresolvedLibraryError",
    "compile",
    "link",
]
