"""
Build system components for solbuild.

This module provides:
- Platform-specific solc invocation
- Solidity source discovery
- Compilation (solc --bin --abi)
- Library linking (solc --link)
"""

from .compiler import CompileRequest, CompileResult, SolcCompiler
from .errors import (
    ExecutionError,
    LibrarySpecifierError,
    ResolutionError,
    SolcError,
    SpawnError,
    UnresolvedLibraryError,
)
from .linker import LibrarySpecifier, LinkRequest, LinkResult, SolcLinker, find_placeholders
from .platform_command import (
    CommandStrategy,
    DirectCommand,
    PlatformCommandResolver,
    ShellWrappedCommand,
)
from .solc_executor import SolcExecutor
from .source_scanner import SourceScanner

__all__ = [
    'CommandStrategy',
    'CompileRequest',
    'CompileResult',
    'DirectCommand',
    'ExecutionError',
    'LibrarySpecifier',
    'LibrarySpecifierError',
    'LinkRequest',
    'LinkResult',
    'PlatformCommandResolver',
    'ResolutionError',
    'ShellWrappedCommand',
    'SolcCompiler',
    'SolcError',
    'SolcExecutor',
    'SolcLinker',
    'SourceScanner',
    'SpawnError',
    'UnresolvedLibraryError',
    'find_placeholders',
]
